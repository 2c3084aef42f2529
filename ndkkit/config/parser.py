"""YAML configuration parser for NDKKit.

The install step's configuration is layered, lowest precedence first:

1. StepConfig defaults
2. ndkkit.yaml (or the file passed with --config)
3. Step inputs from the environment (ndk_version, gradlew_path,
   ANDROID_HOME, ANDROID_SDK_ROOT)
4. Command-line overrides

Example ndkkit.yaml:

    ndk_version: "23.1.7779620"
    gradlew_path: ./gradlew
    components:
      - platforms;android-33
      - build-tools;33.0.2
    accept_licenses: true
    export:
      backend: envman
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

import yaml

from ndkkit.core.environment import EXPORT_BACKENDS
from ndkkit.core.exceptions import ConfigurationError
from ndkkit.sdk.components import SdkComponent

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "ndkkit.yaml"

# Step inputs read from the environment: env var -> config field
ENV_INPUTS = {
    "ndk_version": "ndk_version",
    "gradlew_path": "gradlew_path",
    "ANDROID_HOME": "android_home",
    "ANDROID_SDK_ROOT": "android_sdk_root",
}

_KNOWN_KEYS = {
    "ndk_version",
    "gradlew_path",
    "android_home",
    "android_sdk_root",
    "components",
    "accept_licenses",
    "export",
}


@dataclass
class ExportConfig:
    """Cross-step environment export configuration."""

    backend: str = "envman"  # 'envman', 'file', 'none'
    file: Optional[Path] = None


@dataclass
class StepConfig:
    """Complete install step configuration."""

    ndk_version: str = ""
    gradlew_path: Optional[Path] = None
    android_home: str = ""
    android_sdk_root: str = ""
    components: List[SdkComponent] = field(default_factory=list)
    accept_licenses: bool = True
    export: ExportConfig = field(default_factory=ExportConfig)


def load_config(
    config_path: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
    overrides: Optional[Dict[str, Any]] = None,
    project_root: Optional[Path] = None,
) -> StepConfig:
    """
    Build the effective step configuration.

    Args:
        config_path: Explicit YAML file (must exist if given)
        environ: Environment to read step inputs from
        overrides: Command-line values; None values are ignored
        project_root: Directory searched for ndkkit.yaml when no path is given

    Returns:
        Validated StepConfig

    Raises:
        ConfigurationError: If the file or any value is invalid
    """
    data: Dict[str, Any] = {}

    if config_path is not None:
        data.update(_read_yaml(config_path, required=True))
    else:
        default_path = (project_root or Path.cwd()) / DEFAULT_CONFIG_FILE
        data.update(_read_yaml(default_path, required=False))

    for env_name, key in ENV_INPUTS.items():
        value = (environ or {}).get(env_name, "")
        if value:
            data[key] = value

    for key, value in (overrides or {}).items():
        if value is None:
            continue
        if key in ("export_backend", "export_file"):
            export = dict(data.get("export") or {})
            export[key.split("_", 1)[1]] = value
            data["export"] = export
        elif key == "components":
            data["components"] = list(data.get("components") or []) + list(value)
        else:
            data[key] = value

    return _parse_and_validate(data)


def _read_yaml(path: Path, required: bool) -> Dict[str, Any]:
    """Read a YAML mapping from disk."""
    if not path.exists():
        if required:
            raise ConfigurationError(f"Configuration file not found: {path}")
        logger.debug(f"Config file not found (optional): {path}")
        return {}

    logger.debug(f"Loading configuration from {path}")
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML syntax in {path}: {e}")

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration in {path} must be a mapping")

    unknown = set(data) - _KNOWN_KEYS
    if unknown:
        logger.warning(f"Ignoring unknown configuration keys: {', '.join(sorted(unknown))}")

    return data


def _parse_and_validate(data: Dict[str, Any]) -> StepConfig:
    """Parse and validate configuration data."""
    ndk_version = data.get("ndk_version")
    if ndk_version is None:
        ndk_version = ""
    if isinstance(ndk_version, (int, float)):
        # YAML reads unquoted 23.10 as the float 23.1
        raise ConfigurationError(
            "ndk_version must be a quoted string, e.g. \"23.1.7779620\""
        )
    if not isinstance(ndk_version, str):
        raise ConfigurationError("ndk_version must be a string")

    gradlew = data.get("gradlew_path")
    gradlew_path = Path(gradlew) if gradlew else None

    components_data = data.get("components") or []
    if not isinstance(components_data, list):
        raise ConfigurationError("components must be a list of sdkmanager packages")

    components = []
    for raw in components_data:
        try:
            components.append(SdkComponent(str(raw).strip()))
        except ValueError as e:
            raise ConfigurationError(str(e))

    accept_licenses = data.get("accept_licenses", True)
    if not isinstance(accept_licenses, bool):
        raise ConfigurationError("accept_licenses must be true or false")

    export = _parse_export_config(data.get("export") or {})

    return StepConfig(
        ndk_version=ndk_version.strip(),
        gradlew_path=gradlew_path,
        android_home=str(data.get("android_home") or ""),
        android_sdk_root=str(data.get("android_sdk_root") or ""),
        components=components,
        accept_licenses=accept_licenses,
        export=export,
    )


def _parse_export_config(data: Any) -> ExportConfig:
    """Parse export configuration section."""
    if not isinstance(data, dict):
        raise ConfigurationError("export must be a mapping")

    backend = data.get("backend", "envman")
    if backend not in EXPORT_BACKENDS:
        raise ConfigurationError(
            f"Invalid export backend: {backend} (expected one of {', '.join(EXPORT_BACKENDS)})"
        )

    export_file = data.get("file")
    if backend == "file" and not export_file:
        raise ConfigurationError("export.file is required when export.backend is 'file'")

    return ExportConfig(backend=backend, file=Path(export_file) if export_file else None)


def log_config(config: StepConfig) -> None:
    """Log the effective configuration."""
    logger.info("Configs:")
    logger.info(f"- ndk_version: {config.ndk_version or '<not set>'}")
    logger.info(f"- gradlew_path: {config.gradlew_path or '<not set>'}")
    logger.info(f"- android_home: {config.android_home or '<not set>'}")
    logger.info(f"- android_sdk_root: {config.android_sdk_root or '<not set>'}")
    logger.info(
        f"- components: {', '.join(str(c) for c in config.components) or '<none>'}"
    )
    logger.info(f"- accept_licenses: {config.accept_licenses}")
    logger.info(f"- export: {config.export.backend}")


__all__ = [
    "DEFAULT_CONFIG_FILE",
    "ENV_INPUTS",
    "ExportConfig",
    "StepConfig",
    "load_config",
    "log_config",
]
