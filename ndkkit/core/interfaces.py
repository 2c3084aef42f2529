"""
Core interfaces for NDKKit.

This module defines the abstract interfaces the NDK reconciliation depends
on. The process environment and the pipeline's cross-step export mechanism
are reached only through these interfaces so that the decision logic can be
exercised without touching os.environ or spawning envman.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Optional


class EnvironmentExporter(ABC):
    """
    Abstract interface for persisting environment variables across steps.

    Implementations write a key/value pair somewhere a later pipeline step
    will pick it up (envman store, env file, ...).
    """

    @abstractmethod
    def export(self, key: str, value: str) -> None:
        """
        Persist a single environment variable.

        Args:
            key: Variable name (e.g., "ANDROID_NDK_HOME")
            value: Variable value (may be empty to clear the variable)

        Raises:
            EnvironmentExportError: If the value could not be persisted
        """
        pass


class EnvironmentPort(ABC):
    """
    Abstract interface over the step's environment.

    Covers the live process environment (get/set/unset) and the exported
    state handed over to later pipeline steps (export).
    """

    @abstractmethod
    def get(self, key: str, default: str = "") -> str:
        """
        Read a variable from the live process environment.

        Args:
            key: Variable name
            default: Value returned when the variable is not set

        Returns:
            Variable value, or default
        """
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Set a variable in the live process environment."""
        pass

    @abstractmethod
    def unset(self, key: str) -> None:
        """Remove a variable from the live process environment (no-op if absent)."""
        pass

    @abstractmethod
    def export(self, key: str, value: str) -> None:
        """
        Export a variable to later pipeline steps.

        Raises:
            EnvironmentExportError: If the export fails
        """
        pass


class ComponentEnsurer(ABC):
    """
    Abstract interface for components that make sure required SDK packages
    (platforms, build-tools, ...) are present.

    How the required package list is determined is up to the implementation;
    the install step only sequences the call.
    """

    @abstractmethod
    def ensure(self, sdk: Any, gradlew_path: Optional[Path] = None) -> None:
        """
        Ensure required components are installed.

        Args:
            sdk: AndroidSdk instance
            gradlew_path: Optional path to the project's gradle wrapper

        Raises:
            ComponentEnsureError: If a component cannot be installed
        """
        pass


__all__ = [
    "EnvironmentExporter",
    "EnvironmentPort",
    "ComponentEnsurer",
]
