"""
Installed NDK revision detection.

Every NDK ships a source.properties file at its root:

    Pkg.Desc = Android NDK
    Pkg.Revision = 23.1.7779620

A missing or unreadable file is the normal state of a fresh host and
yields an empty revision instead of an error.
"""

import logging
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)

SOURCE_PROPERTIES = "source.properties"
REVISION_KEY = "pkg.revision"


def parse_revision(content: str) -> str:
    """
    Extract Pkg.Revision from source.properties content.

    The key is matched case-insensitively; the value is everything after the
    first '=' with surrounding whitespace removed. Only the first matching
    line is used.

    Args:
        content: File content

    Returns:
        Revision string, or "" if no revision line exists
    """
    for line in content.splitlines():
        key, sep, value = line.partition("=")
        if sep and key.strip().lower() == REVISION_KEY:
            return value.strip()
    return ""


def probe_ndk_version(ndk_home: Union[str, Path]) -> str:
    """
    Return the revision of the NDK installed at a location.

    Args:
        ndk_home: NDK install directory

    Returns:
        Revision string (e.g., "23.1.7779620"), or "" if unknown
    """
    properties_path = Path(ndk_home) / SOURCE_PROPERTIES

    try:
        content = properties_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.debug(f"No NDK revision at {properties_path}: {e}")
        return ""

    return parse_revision(content)


__all__ = ["SOURCE_PROPERTIES", "parse_revision", "probe_ndk_version"]
