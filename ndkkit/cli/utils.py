"""
Shared utilities for CLI commands.

Provides configuration loading from parsed arguments and consistent
output formatting across commands.
"""

import logging
import os
from typing import Any, Dict

from ndkkit.config.parser import StepConfig, load_config

logger = logging.getLogger(__name__)


# ============================================================================
# Configuration Management
# ============================================================================


def overrides_from_args(args) -> Dict[str, Any]:
    """
    Collect command-line configuration overrides.

    Attributes missing from the namespace (commands without the flag) are
    treated as not given.

    Args:
        args: Parsed command-line arguments

    Returns:
        Dictionary of config field -> value (None for flags not given)
    """
    overrides = {
        "ndk_version": getattr(args, "ndk_version", None),
        "gradlew_path": getattr(args, "gradlew_path", None),
        "android_home": getattr(args, "android_home", None),
        "android_sdk_root": getattr(args, "android_sdk_root", None),
        "components": getattr(args, "components", None),
        "export_backend": getattr(args, "export_backend", None),
        "export_file": getattr(args, "export_file", None),
    }
    if getattr(args, "skip_licenses", False):
        overrides["accept_licenses"] = False
    return overrides


def sdk_location_inputs(config: StepConfig) -> Dict[str, str]:
    """
    SDK location variables given by the configuration.

    NDK location detection reads ANDROID_HOME and ANDROID_SDK_ROOT from the
    environment, so values from --android-home, --android-sdk-root or
    ndkkit.yaml must be applied there before detecting.

    Args:
        config: Effective step configuration

    Returns:
        Variable name -> value for every non-empty SDK location
    """
    inputs = {}
    if config.android_home:
        inputs["ANDROID_HOME"] = config.android_home
    if config.android_sdk_root:
        inputs["ANDROID_SDK_ROOT"] = config.android_sdk_root
    return inputs


def load_step_config(args, environ=None) -> StepConfig:
    """
    Load the step configuration for a command.

    Args:
        args: Parsed command-line arguments (uses config and project_root)
        environ: Mapping or EnvironmentPort to read step inputs from (os.environ if None)

    Returns:
        Effective StepConfig

    Raises:
        ConfigurationError: If configuration is invalid
    """
    return load_config(
        config_path=getattr(args, "config", None),
        environ=os.environ if environ is None else environ,
        overrides=overrides_from_args(args),
        project_root=getattr(args, "project_root", None),
    )


# ============================================================================
# User Interface / Output Formatting
# ============================================================================


def format_success_message(
    title: str,
    details: Dict[str, Any],
    width: int = 70,
) -> str:
    """
    Format a standardized success message.

    Args:
        title: Success message title
        details: Key-value pairs to display
        width: Width of message box

    Returns:
        Formatted message string
    """
    lines = []
    lines.append("=" * width)
    lines.append(title)
    lines.append("=" * width)
    lines.append("")

    for key, value in details.items():
        lines.append(f"{key}: {value}")

    lines.append("")
    return "\n".join(lines)


__all__ = [
    "overrides_from_args",
    "load_step_config",
    "sdk_location_inputs",
    "format_success_message",
]
