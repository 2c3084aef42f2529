"""
File system utilities for NDKKit.

Provides the few filesystem mutations the install step performs:
- Recursive removal of a previous NDK installation
- Setting executable permission on the gradle wrapper

Failures are raised as FilesystemError; callers never attempt cleanup.
"""

import os
import shutil
import stat
from pathlib import Path
from typing import Union

from ndkkit.core.exceptions import FilesystemError, MissingInputError

IS_WINDOWS = os.name == "nt"

GRADLEW_MODE = 0o770


def remove_path(path: Union[str, Path]) -> bool:
    """
    Remove a file, symlink or directory tree.

    Symlinks are removed themselves, never followed. A missing path is not
    an error.

    Args:
        path: Path to remove

    Returns:
        True if something was removed, False if the path did not exist

    Raises:
        FilesystemError: If removal fails

    Example:
        >>> remove_path('/opt/android-sdk/ndk-bundle')
        True
    """
    path = Path(path)

    if not path.exists() and not path.is_symlink():
        return False

    try:
        if path.is_symlink() or not path.is_dir():
            path.unlink()
        elif IS_WINDOWS:

            def handle_remove_readonly(func, failed_path, exc):
                """Error handler for Windows read-only files."""
                if not os.access(failed_path, os.W_OK):
                    os.chmod(failed_path, stat.S_IWRITE)
                    func(failed_path)
                else:
                    raise

            shutil.rmtree(path, onerror=handle_remove_readonly)
        else:
            shutil.rmtree(path)
    except OSError as e:
        raise FilesystemError(f"Failed to remove '{path}': {e}") from e

    return True


def make_executable(path: Union[str, Path], mode: int = GRADLEW_MODE) -> Path:
    """
    Set permission bits on a file so it can be executed.

    Args:
        path: File to update
        mode: Permission bits to apply (default: 0o770)

    Returns:
        Path object

    Raises:
        MissingInputError: If the file does not exist
        FilesystemError: If chmod fails
    """
    path = Path(path)

    if not path.is_file():
        raise MissingInputError(f"File does not exist: {path}")

    try:
        os.chmod(path, mode)
    except OSError as e:
        raise FilesystemError(
            f"Failed to set executable permission on '{path}': {e}"
        ) from e

    return path


__all__ = [
    "IS_WINDOWS",
    "GRADLEW_MODE",
    "remove_path",
    "make_executable",
]
