"""
Pytest configuration and shared fixtures for NDKKit tests.
"""

import pytest
from pathlib import Path

# Import test fixtures to make them available to all tests
# These imports register the fixtures with pytest's fixture discovery system
# ruff: noqa: F401
from tests.fixtures.sdk import (
    mock_android_sdk,
    mock_legacy_ndk,
)
from tests.mocks import MemoryEnvironment


# ============================================================================
# Shared Test Fixtures
# ============================================================================


@pytest.fixture
def memory_env(mock_android_sdk: Path) -> MemoryEnvironment:
    """In-memory environment pointing ANDROID_HOME at the mock SDK."""
    return MemoryEnvironment(
        {
            "ANDROID_HOME": str(mock_android_sdk),
            "PATH": "/usr/bin",
            "HOME": str(mock_android_sdk.parent / "home"),
        }
    )


@pytest.fixture
def clean_android_env(monkeypatch):
    """Remove Android related variables from the process environment."""
    for name in (
        "ANDROID_NDK_HOME",
        "ANDROID_HOME",
        "ANDROID_SDK_ROOT",
        "ndk_version",
        "gradlew_path",
    ):
        monkeypatch.delenv(name, raising=False)
