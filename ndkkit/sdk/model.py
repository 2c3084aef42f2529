"""
Android SDK location model.

The SDK root comes from ANDROID_HOME or ANDROID_SDK_ROOT. Following the
Android command-line tool rules, ANDROID_HOME wins when it points to an
existing directory; otherwise ANDROID_SDK_ROOT is used.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ndkkit.core.exceptions import SdkNotFoundError
from ndkkit.sdk.components import SdkComponent

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AndroidSdk:
    """
    An Android SDK installation.

    Attributes:
        root: SDK root directory
    """

    root: Path

    @classmethod
    def from_environment(
        cls, android_home: Optional[str] = None, android_sdk_root: Optional[str] = None
    ) -> "AndroidSdk":
        """
        Resolve the SDK from ANDROID_HOME / ANDROID_SDK_ROOT values.

        Args:
            android_home: Value of ANDROID_HOME (deprecated, still preferred)
            android_sdk_root: Value of ANDROID_SDK_ROOT

        Returns:
            AndroidSdk for the first value pointing to an existing directory

        Raises:
            SdkNotFoundError: If neither value points to a directory
        """
        if android_home and android_sdk_root and android_home != android_sdk_root:
            logger.warning(
                f"ANDROID_HOME ({android_home}) and ANDROID_SDK_ROOT "
                f"({android_sdk_root}) point to different locations"
            )

        for name, value in (
            ("ANDROID_HOME", android_home),
            ("ANDROID_SDK_ROOT", android_sdk_root),
        ):
            if not value:
                continue
            path = Path(value)
            if path.is_dir():
                logger.debug(f"Using Android SDK from ${name}: {path}")
                return cls(root=path)
            logger.warning(f"${name} is set but {path} is not a directory")

        raise SdkNotFoundError(
            "Android SDK not found: neither ANDROID_HOME nor ANDROID_SDK_ROOT "
            "points to an existing directory"
        )

    def component_path(self, component: SdkComponent) -> Path:
        """Absolute install location of a component."""
        return self.root / component.install_path

    def is_installed(self, component: SdkComponent) -> bool:
        """Check whether a component's install directory exists."""
        return self.component_path(component).is_dir()


__all__ = ["AndroidSdk"]
