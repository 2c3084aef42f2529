"""
NDK version validation.

NDK revisions are plain dotted versions (e.g. 23.1.7779620, sometimes with a
pre-release suffix such as 25.0.8141415-rc2). Validation uses
packaging.version so that anything sdkmanager could never resolve is rejected
before the step touches the filesystem.
"""

from packaging import version

from ndkkit.core.exceptions import InvalidVersionError

# major.minor at least; sdkmanager NDK packages are major.minor.build
MIN_RELEASE_COMPONENTS = 2


def validate_ndk_version(version_str: str) -> version.Version:
    """
    Validate an NDK version string.

    Args:
        version_str: Version string (e.g., "23.1.7779620")

    Returns:
        Parsed version

    Raises:
        InvalidVersionError: If the string is not a valid multi-component version

    Example:
        >>> validate_ndk_version("23.1.7779620").release
        (23, 1, 7779620)
    """
    # sdkmanager takes the package path verbatim
    if version_str != version_str.strip():
        raise InvalidVersionError(version_str)

    try:
        parsed = version.Version(version_str)
    except version.InvalidVersion:
        raise InvalidVersionError(version_str)

    if len(parsed.release) < MIN_RELEASE_COMPONENTS:
        raise InvalidVersionError(version_str)

    return parsed


__all__ = ["validate_ndk_version", "MIN_RELEASE_COMPONENTS"]
