"""
Publishing NDK environment state for later pipeline steps.
"""

import logging
import os

from ndkkit.core.interfaces import EnvironmentPort
from ndkkit.ndk.locator import ANDROID_NDK_HOME

logger = logging.getLogger(__name__)


class EnvironmentPublisher:
    """Export ANDROID_NDK_HOME and PATH through an EnvironmentPort."""

    def __init__(self, environment: EnvironmentPort):
        self.environment = environment

    def publish(self, ndk_home: str) -> None:
        """
        Append the NDK to PATH and point ANDROID_NDK_HOME at it.

        Earlier PATH entries are kept, including one for a removed NDK.

        Raises:
            EnvironmentExportError: If an export fails
        """
        logger.info("Append NDK folder to $PATH")
        current_path = self.environment.get("PATH")
        new_path = f"{current_path}{os.pathsep}{ndk_home}" if current_path else ndk_home
        self.environment.export("PATH", new_path)

        self.environment.export(ANDROID_NDK_HOME, ndk_home)
        logger.info(f"Exported ${ANDROID_NDK_HOME}: {ndk_home}")

    def clear(self) -> None:
        """
        Declare that no NDK is configured.

        Unsets ANDROID_NDK_HOME in this process and exports it empty,
        whether or not an NDK was ever installed.
        """
        logger.info(f"Unset {ANDROID_NDK_HOME}")
        self.environment.unset(ANDROID_NDK_HOME)
        self.environment.export(ANDROID_NDK_HOME, "")


__all__ = ["EnvironmentPublisher"]
