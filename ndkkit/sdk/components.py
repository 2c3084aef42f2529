"""
Android SDK component model.

An SdkComponent is an sdkmanager package path such as
``ndk;23.1.7779620``, ``platforms;android-33`` or ``build-tools;33.0.2``.
sdkmanager installs every package under the SDK root at the package path
with ``;`` replaced by directory separators.
"""

from dataclasses import dataclass
from pathlib import Path

NDK_PACKAGE_PREFIX = "ndk"


@dataclass(frozen=True)
class SdkComponent:
    """
    A package sdkmanager can install.

    Attributes:
        package: sdkmanager package path (e.g., 'platforms;android-33')

    Example:
        component = SdkComponent("build-tools;33.0.2")
        component.install_path  # Path('build-tools/33.0.2')
    """

    package: str

    def __post_init__(self):
        """Validate package path after initialization."""
        if not self.package or not self.package.strip():
            raise ValueError("SDK package path cannot be empty")
        if any(not part.strip() for part in self.package.split(";")):
            raise ValueError(f"Invalid SDK package path: {self.package!r}")

    @property
    def install_path(self) -> Path:
        """Install location relative to the SDK root."""
        return Path(*self.package.split(";"))

    def __str__(self) -> str:
        return self.package


def ndk_component(version: str) -> SdkComponent:
    """
    Side-by-side NDK package for a version.

    Args:
        version: NDK revision (e.g., '22.1.7171670')

    Returns:
        SdkComponent for 'ndk;<version>', installed at 'ndk/<version>'
    """
    return SdkComponent(f"{NDK_PACKAGE_PREFIX};{version}")


__all__ = ["SdkComponent", "ndk_component", "NDK_PACKAGE_PREFIX"]
