"""
Core functionality for NDKKit.

Provides the exception hierarchy, version validation, filesystem helpers
and the environment port used by the NDK reconciliation.
"""

from ndkkit.core.exceptions import (
    NdkKitError,
    ConfigurationError,
    InvalidVersionError,
    MissingInputError,
    FilesystemError,
    SdkError,
    SdkNotFoundError,
    SdkManagerError,
    SdkManagerNotFoundError,
    SdkManagerInstallError,
    LicenseAcceptanceError,
    EnvironmentExportError,
    ComponentEnsureError,
)
from ndkkit.core.interfaces import EnvironmentPort, EnvironmentExporter
from ndkkit.core.environment import (
    PipelineEnvironment,
    EnvmanExporter,
    EnvFileExporter,
    create_exporter,
)
from ndkkit.core.version import validate_ndk_version

__all__ = [
    # Exceptions
    "NdkKitError",
    "ConfigurationError",
    "InvalidVersionError",
    "MissingInputError",
    "FilesystemError",
    "SdkError",
    "SdkNotFoundError",
    "SdkManagerError",
    "SdkManagerNotFoundError",
    "SdkManagerInstallError",
    "LicenseAcceptanceError",
    "EnvironmentExportError",
    "ComponentEnsureError",
    # Environment
    "EnvironmentPort",
    "EnvironmentExporter",
    "PipelineEnvironment",
    "EnvmanExporter",
    "EnvFileExporter",
    "create_exporter",
    # Version
    "validate_ndk_version",
]
