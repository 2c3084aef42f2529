"""
NDK reconciliation.

Brings the host's NDK in line with the requested revision:

- no revision requested: ANDROID_NDK_HOME is cleared
- revision requested: it is validated, installed if the current NDK differs,
  and the new location is published

Every failure propagates; nothing is rolled back.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from ndkkit.core.interfaces import EnvironmentPort
from ndkkit.ndk.installer import NdkInstaller
from ndkkit.ndk.publisher import EnvironmentPublisher
from ndkkit.sdk.model import AndroidSdk

logger = logging.getLogger(__name__)

ACTION_CLEARED = "cleared"
ACTION_UNCHANGED = "unchanged"
ACTION_INSTALLED = "installed"


@dataclass(frozen=True)
class ReconcileResult:
    """Outcome of a reconcile call."""

    action: str
    requested_version: str = ""
    ndk_home: str = ""
    previous_version: str = ""

    def __str__(self) -> str:
        if self.action == ACTION_CLEARED:
            return "NDK environment cleared"
        if self.action == ACTION_UNCHANGED:
            return f"NDK {self.requested_version} already installed at {self.ndk_home}"
        return f"NDK {self.requested_version} installed at {self.ndk_home}"


class NdkReconciler:
    """
    Top-level NDK decision procedure.

    Attributes:
        sdk: Android SDK
        environment: Environment port shared by installer and publisher
        installer: NDK installer
        publisher: Environment publisher
    """

    def __init__(
        self,
        sdk: AndroidSdk,
        environment: EnvironmentPort,
        installer: Optional[NdkInstaller] = None,
        publisher: Optional[EnvironmentPublisher] = None,
    ):
        self.sdk = sdk
        self.environment = environment
        self.installer = installer or NdkInstaller(sdk, environment)
        self.publisher = publisher or EnvironmentPublisher(environment)

    def reconcile(self, requested_version: str) -> ReconcileResult:
        """
        Reconcile the installed NDK with the requested revision.

        Args:
            requested_version: NDK revision, or "" when the project needs none

        Returns:
            ReconcileResult describing what happened

        Raises:
            NdkKitError: On any failure (invalid version, filesystem,
                sdkmanager, export)
        """
        if not requested_version:
            logger.info("Clearing NDK environment")
            self.publisher.clear()
            return ReconcileResult(action=ACTION_CLEARED)

        logger.info("Installing Android NDK")
        outcome = self.installer.install(requested_version)
        if not outcome.changed:
            return ReconcileResult(
                action=ACTION_UNCHANGED,
                requested_version=requested_version,
                ndk_home=outcome.ndk_home,
                previous_version=outcome.previous_version,
            )

        self.publisher.publish(outcome.ndk_home)
        return ReconcileResult(
            action=ACTION_INSTALLED,
            requested_version=requested_version,
            ndk_home=outcome.ndk_home,
            previous_version=outcome.previous_version,
        )


__all__ = [
    "ACTION_CLEARED",
    "ACTION_UNCHANGED",
    "ACTION_INSTALLED",
    "ReconcileResult",
    "NdkReconciler",
]
