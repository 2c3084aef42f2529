"""
Tests for NDK environment publishing (ndkkit.ndk.publisher).
"""

import os

import pytest

from ndkkit.core.exceptions import EnvironmentExportError
from ndkkit.ndk.publisher import EnvironmentPublisher
from tests.mocks import MemoryEnvironment


class TestPublish:
    """Test EnvironmentPublisher.publish()."""

    def test_exports_ndk_home_and_path(self):
        """Test both variables are exported."""
        env = MemoryEnvironment({"PATH": "/usr/bin"})

        EnvironmentPublisher(env).publish("/sdk/ndk/22.1.7171670")

        assert env.exported["ANDROID_NDK_HOME"] == "/sdk/ndk/22.1.7171670"
        assert env.exported["PATH"] == f"/usr/bin{os.pathsep}/sdk/ndk/22.1.7171670"

    def test_path_exported_before_ndk_home(self):
        """Test PATH is exported first."""
        env = MemoryEnvironment({"PATH": "/usr/bin"})

        EnvironmentPublisher(env).publish("/ndk")

        assert [key for key, _ in env.export_log] == ["PATH", "ANDROID_NDK_HOME"]

    def test_stale_path_entries_kept(self):
        """Test previous NDK entries stay in PATH."""
        old_path = f"/usr/bin{os.pathsep}/sdk/ndk-bundle"
        env = MemoryEnvironment({"PATH": old_path})

        EnvironmentPublisher(env).publish("/sdk/ndk/23.1.7779620")

        assert env.exported["PATH"].startswith(old_path)

    def test_empty_path(self):
        """Test publishing with no PATH set."""
        env = MemoryEnvironment()

        EnvironmentPublisher(env).publish("/ndk")

        assert env.exported["PATH"] == "/ndk"

    def test_export_failure_propagates(self):
        """Test export errors are not swallowed."""
        env = MemoryEnvironment({"PATH": "/usr/bin"})
        env.fail_exports = True

        with pytest.raises(EnvironmentExportError):
            EnvironmentPublisher(env).publish("/ndk")


class TestClear:
    """Test EnvironmentPublisher.clear()."""

    def test_clear_unsets_and_exports_empty(self):
        """Test ANDROID_NDK_HOME is removed live and exported empty."""
        env = MemoryEnvironment({"ANDROID_NDK_HOME": "/old/ndk"})

        EnvironmentPublisher(env).clear()

        assert "ANDROID_NDK_HOME" not in env.variables
        assert env.exported == {"ANDROID_NDK_HOME": ""}

    def test_clear_without_previous_ndk(self):
        """Test clearing works when nothing was ever configured."""
        env = MemoryEnvironment()

        EnvironmentPublisher(env).clear()

        assert env.exported == {"ANDROID_NDK_HOME": ""}
