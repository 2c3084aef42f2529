"""
Install command implementation.

Runs the full install step:

1. Print the effective configuration
2. Make the gradle wrapper executable (when a path is configured)
3. Initialize the Android SDK
4. Reconcile the NDK with the requested revision
5. Accept SDK licenses
6. Ensure declared SDK components

Any failure stops the step with a message naming the failed phase.
"""

import logging
from typing import Optional

from ndkkit.cli.utils import (
    format_success_message,
    load_step_config,
    sdk_location_inputs,
)
from ndkkit.config.parser import StepConfig, log_config
from ndkkit.core.environment import PipelineEnvironment, create_exporter
from ndkkit.core.exceptions import InvalidVersionError, NdkKitError
from ndkkit.core.filesystem import make_executable
from ndkkit.core.interfaces import EnvironmentPort
from ndkkit.ndk.reconciler import NdkReconciler
from ndkkit.sdk.ensurer import SdkManagerComponentEnsurer
from ndkkit.sdk.model import AndroidSdk
from ndkkit.sdk.sdkmanager import SdkManager

logger = logging.getLogger(__name__)


def _fail(phase: str, error: Exception) -> int:
    logger.error(f"Failed to {phase}, error: {error}")
    return 1


def run(args, environment: Optional[EnvironmentPort] = None) -> int:
    """
    Run the install command.

    Args:
        args: Parsed command-line arguments
        environment: Environment port (os.environ plus the configured exporter if None)

    Returns:
        Exit code (0 for success, 1 on any failure)
    """
    logger.debug(f"Arguments: {args}")

    try:
        config = load_step_config(args, environ=environment)
    except NdkKitError as e:
        return _fail("load configuration", e)

    log_config(config)

    if environment is None:
        try:
            exporter = create_exporter(config.export.backend, config.export.file)
        except NdkKitError as e:
            return _fail("configure environment export", e)
        environment = PipelineEnvironment(exporter=exporter)

    return run_step(config, environment)


def run_step(config: StepConfig, environment: EnvironmentPort) -> int:
    """
    Run the install step phases for a loaded configuration.

    Args:
        config: Effective step configuration
        environment: Environment port used for detection and exports

    Returns:
        Exit code (0 for success, 1 on any failure)
    """
    logger.info("Preparation")
    if config.gradlew_path is not None:
        logger.info("Set executable permission for gradlew")
        try:
            make_executable(config.gradlew_path)
        except NdkKitError as e:
            return _fail("set executable permission for gradlew", e)

    for name, value in sdk_location_inputs(config).items():
        environment.set(name, value)

    logger.info("Initialize Android SDK")
    try:
        sdk = AndroidSdk.from_environment(
            android_home=config.android_home,
            android_sdk_root=config.android_sdk_root,
        )
    except NdkKitError as e:
        return _fail("initialize Android SDK", e)

    try:
        result = NdkReconciler(sdk, environment).reconcile(config.ndk_version)
    except InvalidVersionError as e:
        logger.error(str(e))
        return 1
    except NdkKitError as e:
        return _fail("install new NDK package", e)

    sdkmanager = None
    if config.accept_licenses or config.components:
        try:
            sdkmanager = SdkManager(sdk)
        except NdkKitError as e:
            return _fail("locate sdkmanager", e)

    if config.accept_licenses:
        logger.info("Ensure android licences")
        try:
            sdkmanager.accept_licenses()
        except NdkKitError as e:
            return _fail("ensure android licences", e)

    logger.info("Ensure required Android SDK components")
    try:
        ensurer = SdkManagerComponentEnsurer(sdkmanager, config.components)
        ensurer.ensure(sdk, config.gradlew_path)
    except NdkKitError as e:
        return _fail("ensure android components", e)

    print(
        format_success_message(
            "Required SDK components are installed",
            {
                "Android SDK": sdk.root,
                "NDK": result,
            },
        )
    )
    return 0

