"""
Canonical NDK location resolution.

The "current" NDK is always looked up at a legacy, unversioned location.
Precedence, highest first:

1. $ANDROID_NDK_HOME
2. $ANDROID_HOME/ndk-bundle (ANDROID_HOME is deprecated but still honored first)
3. $ANDROID_SDK_ROOT/ndk-bundle
4. $HOME/ndk-bundle
5. ndk-bundle

The filesystem is never consulted; the returned path may not exist.
"""

import os
from typing import Callable, Mapping, Optional, Tuple, Union

from ndkkit.core.interfaces import EnvironmentPort

ANDROID_NDK_HOME = "ANDROID_NDK_HOME"
NDK_BUNDLE_DIR = "ndk-bundle"


def _as_is(value: str) -> str:
    return value


def _ndk_bundle_under(value: str) -> str:
    return os.path.join(value, NDK_BUNDLE_DIR)


# Ordered (variable, transform) pairs; first non-empty variable wins.
NDK_HOME_PRECEDENCE: Tuple[Tuple[str, Callable[[str], str]], ...] = (
    (ANDROID_NDK_HOME, _as_is),
    ("ANDROID_HOME", _ndk_bundle_under),
    ("ANDROID_SDK_ROOT", _ndk_bundle_under),
    ("HOME", _ndk_bundle_under),
)


def current_ndk_home(
    environment: Optional[Union[EnvironmentPort, Mapping[str, str]]] = None,
) -> str:
    """
    Return the install location currently considered authoritative.

    Args:
        environment: EnvironmentPort or plain mapping (os.environ if None)

    Returns:
        NDK home path as a string

    Example:
        >>> current_ndk_home({"ANDROID_HOME": "/opt/sdk"})
        '/opt/sdk/ndk-bundle'
    """
    if environment is None:
        environment = os.environ

    for name, transform in NDK_HOME_PRECEDENCE:
        value = environment.get(name, "")
        if value:
            return transform(value)

    return NDK_BUNDLE_DIR


__all__ = [
    "ANDROID_NDK_HOME",
    "NDK_BUNDLE_DIR",
    "NDK_HOME_PRECEDENCE",
    "current_ndk_home",
]
