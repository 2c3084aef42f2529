"""
Declared SDK component ensuring.

SdkManagerComponentEnsurer installs an explicit list of sdkmanager packages
(from configuration or --component flags) that are missing under the SDK
root. It does not inspect build files to decide what a project needs.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Optional

from ndkkit.core.exceptions import ComponentEnsureError, SdkManagerInstallError
from ndkkit.core.interfaces import ComponentEnsurer
from ndkkit.sdk.components import SdkComponent
from ndkkit.sdk.model import AndroidSdk
from ndkkit.sdk.sdkmanager import SdkManager

logger = logging.getLogger(__name__)


class SdkManagerComponentEnsurer(ComponentEnsurer):
    """
    Install declared SDK packages with sdkmanager.

    Attributes:
        sdkmanager: sdkmanager wrapper used for installs
        components: Packages that must be present
    """

    def __init__(self, sdkmanager: SdkManager, components: Iterable[SdkComponent]):
        self.sdkmanager = sdkmanager
        self.components: List[SdkComponent] = list(components)

    def ensure(self, sdk: AndroidSdk, gradlew_path: Optional[Path] = None) -> None:
        if not self.components:
            logger.info("No SDK components declared")
            return

        for component in self.components:
            if sdk.is_installed(component):
                logger.info(f"{component} is already installed")
                continue

            logger.info(f"Installing {component}")
            try:
                self.sdkmanager.install(component)
            except SdkManagerInstallError as e:
                if e.output:
                    logger.error(e.output)
                raise ComponentEnsureError(f"Failed to install {component}: {e}") from e


__all__ = ["SdkManagerComponentEnsurer"]
