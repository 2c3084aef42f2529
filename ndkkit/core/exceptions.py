"""
Centralized exception hierarchy for NDKKit.

Every fatal condition of the install step is raised as a subclass of
NdkKitError so the CLI can report it with a single message. Soft misses
(missing source.properties, missing previous NDK directory) are not errors
and never raise.
"""


# ============================================================================
# Base Exceptions
# ============================================================================


class NdkKitError(Exception):
    """Base exception for all NDKKit errors."""

    pass


# ============================================================================
# Configuration Exceptions
# ============================================================================


class ConfigurationError(NdkKitError):
    """Base exception for invalid step configuration."""

    pass


class InvalidVersionError(ConfigurationError):
    """Requested NDK version is not a valid version string."""

    def __init__(self, version: str):
        self.version = version
        super().__init__(
            f"'{version}' is not a valid NDK version. This should be the full "
            f"version number, such as 23.0.7599858. To see all available "
            f"versions, run 'sdkmanager --list'"
        )


class MissingInputError(ConfigurationError):
    """A required input (file or value) is missing."""

    pass


# ============================================================================
# Filesystem Exceptions
# ============================================================================


class FilesystemError(NdkKitError):
    """Base exception for filesystem operations."""

    pass


# ============================================================================
# Android SDK Exceptions
# ============================================================================


class SdkError(NdkKitError):
    """Base exception for Android SDK errors."""

    pass


class SdkNotFoundError(SdkError):
    """Neither ANDROID_HOME nor ANDROID_SDK_ROOT points to an SDK."""

    pass


# ============================================================================
# sdkmanager Exceptions
# ============================================================================


class SdkManagerError(NdkKitError):
    """Base exception for sdkmanager errors."""

    pass


class SdkManagerNotFoundError(SdkManagerError):
    """sdkmanager executable not found inside the SDK."""

    pass


class SdkManagerInstallError(SdkManagerError):
    """sdkmanager failed to install a package."""

    def __init__(self, message: str, output: str = ""):
        self.output = output
        super().__init__(message)


class LicenseAcceptanceError(SdkManagerError):
    """sdkmanager --licenses failed."""

    pass


# ============================================================================
# Environment / Component Exceptions
# ============================================================================


class EnvironmentExportError(NdkKitError):
    """Failed to export an environment variable for later pipeline steps."""

    pass


class ComponentEnsureError(NdkKitError):
    """Failed to ensure required SDK components."""

    pass
