"""
Configuration for NDKKit.

Loads the install step configuration from ndkkit.yaml, step inputs in the
environment and command-line overrides.
"""

from ndkkit.config.parser import (
    DEFAULT_CONFIG_FILE,
    ExportConfig,
    StepConfig,
    load_config,
    log_config,
)

__all__ = [
    "DEFAULT_CONFIG_FILE",
    "ExportConfig",
    "StepConfig",
    "load_config",
    "log_config",
]
