"""
Process environment and cross-step environment export.

PipelineEnvironment binds the EnvironmentPort interface to a live
environment mapping (os.environ by default) and an EnvironmentExporter.

Exporters:
    EnvmanExporter: `envman add --key KEY` with the value on stdin
    EnvFileExporter: appends KEY=VALUE lines to an env file

Example:
    from ndkkit.core.environment import PipelineEnvironment, create_exporter

    env = PipelineEnvironment(exporter=create_exporter("envman"))
    env.export("ANDROID_NDK_HOME", "/opt/android-sdk/ndk/23.1.7779620")
"""

import logging
import os
import shutil
import subprocess
from pathlib import Path
from typing import MutableMapping, Optional, Union

from ndkkit.core.exceptions import ConfigurationError, EnvironmentExportError
from ndkkit.core.interfaces import EnvironmentExporter, EnvironmentPort

logger = logging.getLogger(__name__)

EXPORT_BACKENDS = ("envman", "file", "none")


class EnvmanExporter(EnvironmentExporter):
    """Export variables through the envman tool."""

    def __init__(self, envman_path: Optional[str] = None):
        self.envman_path = envman_path or shutil.which("envman") or "envman"

    def export(self, key: str, value: str) -> None:
        cmd = [self.envman_path, "add", "--key", key]
        try:
            result = subprocess.run(
                cmd, input=value, capture_output=True, text=True, check=False
            )
        except OSError as e:
            raise EnvironmentExportError(
                f"Failed to execute envman: {e}\nCommand: {' '.join(cmd)}"
            ) from e

        if result.returncode != 0:
            output = (result.stdout + result.stderr).strip()
            raise EnvironmentExportError(
                f"envman add --key {key} failed with exit code "
                f"{result.returncode}: {output}"
            )

        logger.debug(f"Exported {key} with envman")


class EnvFileExporter(EnvironmentExporter):
    """Append KEY=VALUE lines to an env file read by later steps."""

    def __init__(self, env_file: Union[str, Path]):
        self.env_file = Path(env_file)

    def export(self, key: str, value: str) -> None:
        if "\n" in value:
            raise EnvironmentExportError(
                f"Cannot export multi-line value for {key} to {self.env_file}"
            )

        try:
            self.env_file.parent.mkdir(parents=True, exist_ok=True)
            with open(self.env_file, "a", encoding="utf-8") as f:
                f.write(f"{key}={value}\n")
        except OSError as e:
            raise EnvironmentExportError(
                f"Failed to write {key} to {self.env_file}: {e}"
            ) from e

        logger.debug(f"Exported {key} to {self.env_file}")


class PipelineEnvironment(EnvironmentPort):
    """
    EnvironmentPort backed by a live environment mapping and an exporter.

    Attributes:
        environ: Live environment mapping (os.environ unless given)
        exporter: Exporter used for cross-step state, or None to skip exports
    """

    def __init__(
        self,
        environ: Optional[MutableMapping[str, str]] = None,
        exporter: Optional[EnvironmentExporter] = None,
    ):
        self.environ = os.environ if environ is None else environ
        self.exporter = exporter

    def get(self, key: str, default: str = "") -> str:
        return self.environ.get(key, default)

    def set(self, key: str, value: str) -> None:
        self.environ[key] = value

    def unset(self, key: str) -> None:
        self.environ.pop(key, None)

    def export(self, key: str, value: str) -> None:
        if self.exporter is None:
            logger.debug(f"No exporter configured, not exporting {key}")
            return
        self.exporter.export(key, value)


def create_exporter(
    backend: str, env_file: Optional[Union[str, Path]] = None
) -> Optional[EnvironmentExporter]:
    """
    Create an exporter for the configured backend.

    Args:
        backend: 'envman', 'file' or 'none'
        env_file: Target file for the 'file' backend

    Returns:
        Exporter instance, or None for the 'none' backend

    Raises:
        ConfigurationError: If backend is unknown or the file backend has no file
    """
    if backend == "envman":
        return EnvmanExporter()
    if backend == "file":
        if not env_file:
            raise ConfigurationError("Export backend 'file' requires an export file")
        return EnvFileExporter(env_file)
    if backend == "none":
        return None
    raise ConfigurationError(
        f"Unknown export backend: {backend} (expected one of {', '.join(EXPORT_BACKENDS)})"
    )


__all__ = [
    "EXPORT_BACKENDS",
    "EnvmanExporter",
    "EnvFileExporter",
    "PipelineEnvironment",
    "create_exporter",
]
