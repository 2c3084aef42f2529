"""
Detect command implementation.

Reports the NDK location currently considered authoritative, the revision
installed there and the state of declared SDK components. Nothing is changed.
"""

import logging
import os

from ndkkit.cli.utils import load_step_config, sdk_location_inputs
from ndkkit.core.exceptions import NdkKitError
from ndkkit.ndk.locator import current_ndk_home
from ndkkit.ndk.probe import probe_ndk_version
from ndkkit.sdk.model import AndroidSdk

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the detect command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, 1 if the configuration is invalid)
    """
    logger.debug(f"Arguments: {args}")

    try:
        config = load_step_config(args)
    except NdkKitError as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    environ = dict(os.environ)
    environ.update(sdk_location_inputs(config))

    ndk_home = current_ndk_home(environ)
    installed = probe_ndk_version(ndk_home)

    print(f"NDK home: {ndk_home}")
    print(f"Installed NDK: {installed or '<none>'}")
    if config.ndk_version:
        status = "up to date" if installed == config.ndk_version else "install required"
        print(f"Requested NDK: {config.ndk_version} ({status})")
    else:
        print("Requested NDK: <none>")

    try:
        sdk = AndroidSdk.from_environment(
            android_home=config.android_home,
            android_sdk_root=config.android_sdk_root,
        )
    except NdkKitError as e:
        print(f"Android SDK: not found ({e})")
        return 0

    print(f"Android SDK: {sdk.root}")
    for component in config.components:
        state = "installed" if sdk.is_installed(component) else "missing"
        print(f"  {component}: {state}")

    return 0
