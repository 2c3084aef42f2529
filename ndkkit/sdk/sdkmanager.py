"""
sdkmanager integration for NDKKit.

Locates the sdkmanager executable inside an Android SDK and runs its
install and license commands. All prompts are answered with "y" on stdin,
so runs are non-interactive.

Classes:
    SdkManager: Wrapper around the sdkmanager command-line tool

Example:
    from ndkkit.sdk.model import AndroidSdk
    from ndkkit.sdk.components import ndk_component
    from ndkkit.sdk.sdkmanager import SdkManager

    sdk = AndroidSdk.from_environment(android_home="/opt/android-sdk")
    manager = SdkManager(sdk)
    output = manager.install(ndk_component("23.1.7779620"))
"""

import logging
import os
import subprocess
from pathlib import Path
from typing import List, Optional

from packaging import version

from ndkkit.core.exceptions import (
    LicenseAcceptanceError,
    SdkManagerInstallError,
    SdkManagerNotFoundError,
)
from ndkkit.sdk.components import SdkComponent
from ndkkit.sdk.model import AndroidSdk

logger = logging.getLogger(__name__)

SDKMANAGER_NAME = "sdkmanager.bat" if os.name == "nt" else "sdkmanager"

# Enough answers for every license prompt sdkmanager shows
YES_ANSWERS = "y\n" * 64


class SdkManager:
    """
    sdkmanager command-line tool wrapper.

    Attributes:
        sdk: Android SDK the tool operates on
        executable: Path to the sdkmanager executable
    """

    def __init__(self, sdk: AndroidSdk, executable: Optional[Path] = None):
        """
        Initialize sdkmanager wrapper.

        Args:
            sdk: Android SDK
            executable: Explicit sdkmanager path (located inside the SDK if None)

        Raises:
            SdkManagerNotFoundError: If sdkmanager cannot be found
        """
        self.sdk = sdk
        self.executable = executable or self._find_executable()

    def _find_executable(self) -> Path:
        """
        Find sdkmanager inside the SDK.

        Searches, in order:
        1. cmdline-tools/latest/bin
        2. cmdline-tools/<version>/bin, highest version first
        3. tools/bin (legacy SDK tools)

        Returns:
            Path to sdkmanager

        Raises:
            SdkManagerNotFoundError: If none of the locations has sdkmanager
        """
        candidates = [self.sdk.root / "cmdline-tools" / "latest" / "bin"]

        cmdline_tools = self.sdk.root / "cmdline-tools"
        if cmdline_tools.is_dir():
            versioned = []
            for child in cmdline_tools.iterdir():
                if not child.is_dir() or child.name == "latest":
                    continue
                try:
                    versioned.append((version.Version(child.name), child))
                except version.InvalidVersion:
                    continue
            versioned.sort(reverse=True)
            candidates.extend(path / "bin" for _, path in versioned)

        candidates.append(self.sdk.root / "tools" / "bin")

        for directory in candidates:
            executable = directory / SDKMANAGER_NAME
            if executable.is_file():
                logger.debug(f"Found sdkmanager at {executable}")
                return executable

        raise SdkManagerNotFoundError(
            f"sdkmanager not found in Android SDK at {self.sdk.root}.\n"
            f"Install the Android command-line tools into "
            f"{self.sdk.root / 'cmdline-tools' / 'latest'}"
        )

    def install_command(self, component: SdkComponent) -> List[str]:
        """Build the install command line for a component."""
        return [
            str(self.executable),
            f"--sdk_root={self.sdk.root}",
            component.package,
        ]

    def _run(self, cmd: List[str]) -> subprocess.CompletedProcess:
        logger.debug(f"Running: {' '.join(cmd)}")
        return subprocess.run(
            cmd,
            input=YES_ANSWERS,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            check=False,
        )

    def install(self, component: SdkComponent) -> str:
        """
        Install a component.

        Args:
            component: Package to install

        Returns:
            Trimmed sdkmanager output

        Raises:
            SdkManagerInstallError: If sdkmanager cannot be run or exits non-zero;
                the captured output is attached as ``output``
        """
        cmd = self.install_command(component)

        try:
            result = self._run(cmd)
        except OSError as e:
            raise SdkManagerInstallError(
                f"Failed to execute sdkmanager: {e}\nCommand: {' '.join(cmd)}"
            ) from e

        output = (result.stdout or "").strip()
        if result.returncode != 0:
            raise SdkManagerInstallError(
                f"sdkmanager failed to install {component} "
                f"(exit code {result.returncode})",
                output=output,
            )

        return output

    def accept_licenses(self) -> str:
        """
        Accept all SDK licenses.

        Returns:
            Trimmed sdkmanager output

        Raises:
            LicenseAcceptanceError: If sdkmanager --licenses fails
        """
        cmd = [str(self.executable), f"--sdk_root={self.sdk.root}", "--licenses"]

        try:
            result = self._run(cmd)
        except OSError as e:
            raise LicenseAcceptanceError(
                f"Failed to execute sdkmanager: {e}\nCommand: {' '.join(cmd)}"
            ) from e

        output = (result.stdout or "").strip()
        if result.returncode != 0:
            logger.error(output)
            raise LicenseAcceptanceError(
                f"sdkmanager --licenses failed with exit code {result.returncode}"
            )

        return output


__all__ = ["SdkManager", "SDKMANAGER_NAME"]
