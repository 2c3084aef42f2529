"""
NDK installation.

NDKs are installed side by side under ``<sdk root>/ndk/<version>`` by
sdkmanager, while the installed revision is always detected at the legacy
location (ANDROID_NDK_HOME or ``<sdk>/ndk-bundle``). Older Android Gradle
Plugin versions only read the legacy location, so both conventions are kept.

Example:
    from ndkkit.ndk.installer import NdkInstaller

    installer = NdkInstaller(sdk, environment)
    outcome = installer.install("23.1.7779620")
    print(outcome.ndk_home)
"""

import logging
from dataclasses import dataclass
from typing import Optional

from ndkkit.core.exceptions import SdkManagerInstallError
from ndkkit.core.filesystem import remove_path
from ndkkit.core.interfaces import EnvironmentPort
from ndkkit.core.version import validate_ndk_version
from ndkkit.ndk.locator import current_ndk_home
from ndkkit.ndk.probe import probe_ndk_version
from ndkkit.sdk.components import ndk_component
from ndkkit.sdk.model import AndroidSdk
from ndkkit.sdk.sdkmanager import SdkManager

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InstallOutcome:
    """
    Result of an install call.

    Attributes:
        ndk_home: Location of the requested NDK
        previous_version: Revision found before the call ("" if none)
        changed: False when the requested revision was already in place
    """

    ndk_home: str
    previous_version: str
    changed: bool


class NdkInstaller:
    """
    Remove-then-install cycle for the NDK.

    Attributes:
        sdk: Android SDK the NDK is installed into
        environment: Environment used to resolve the current NDK location
    """

    def __init__(
        self,
        sdk: AndroidSdk,
        environment: EnvironmentPort,
        sdkmanager: Optional[SdkManager] = None,
    ):
        self.sdk = sdk
        self.environment = environment
        self._sdkmanager = sdkmanager

    @property
    def sdkmanager(self) -> SdkManager:
        if self._sdkmanager is None:
            self._sdkmanager = SdkManager(self.sdk)
        return self._sdkmanager

    def install(self, version: str) -> InstallOutcome:
        """
        Make the requested NDK revision the installed one.

        Args:
            version: Requested NDK revision

        Returns:
            InstallOutcome with the NDK location

        Raises:
            InvalidVersionError: If version is invalid (nothing is touched)
            FilesystemError: If the previous NDK cannot be removed
            SdkManagerNotFoundError: If sdkmanager is missing
            SdkManagerInstallError: If sdkmanager fails
        """
        validate_ndk_version(version)

        ndk_home = current_ndk_home(self.environment)
        current_version = probe_ndk_version(ndk_home)

        if current_version == version:
            logger.info(f"NDK {version} already installed at {ndk_home}")
            return InstallOutcome(
                ndk_home=ndk_home, previous_version=current_version, changed=False
            )

        if current_version:
            logger.info(f"NDK {current_version} found at: {ndk_home}")

        logger.info("Removing existing NDK...")
        if remove_path(ndk_home):
            logger.debug(f"Removed {ndk_home}")
        logger.info("Done")

        logger.info(f"Installing NDK {version} with sdkmanager")
        component = ndk_component(version)
        try:
            self.sdkmanager.install(component)
        except SdkManagerInstallError as e:
            if e.output:
                logger.error(e.output)
            raise
        logger.info("Done")

        new_ndk_home = str(self.sdk.component_path(component))
        return InstallOutcome(
            ndk_home=new_ndk_home, previous_version=current_version, changed=True
        )


__all__ = ["InstallOutcome", "NdkInstaller"]
