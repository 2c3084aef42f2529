"""
Tests for the process environment and environment exporters.
"""

from unittest.mock import Mock, patch

import pytest

from ndkkit.core.environment import (
    EnvFileExporter,
    EnvmanExporter,
    PipelineEnvironment,
    create_exporter,
)
from ndkkit.core.exceptions import ConfigurationError, EnvironmentExportError


class TestPipelineEnvironment:
    """Test PipelineEnvironment."""

    def test_get_set_unset(self):
        """Test live environment access."""
        environ = {"PATH": "/usr/bin"}
        env = PipelineEnvironment(environ=environ)

        assert env.get("PATH") == "/usr/bin"
        assert env.get("MISSING") == ""
        assert env.get("MISSING", "fallback") == "fallback"

        env.set("ANDROID_NDK_HOME", "/ndk")
        assert environ["ANDROID_NDK_HOME"] == "/ndk"

        env.unset("ANDROID_NDK_HOME")
        assert "ANDROID_NDK_HOME" not in environ

    def test_unset_missing_is_noop(self):
        """Test unsetting an absent variable does not raise."""
        PipelineEnvironment(environ={}).unset("ANDROID_NDK_HOME")

    def test_defaults_to_os_environ(self, monkeypatch):
        """Test os.environ is used by default."""
        monkeypatch.setenv("NDKKIT_TEST_VAR", "value")
        assert PipelineEnvironment().get("NDKKIT_TEST_VAR") == "value"

    def test_export_delegates_to_exporter(self):
        """Test exports go to the exporter, not the live environment."""
        exporter = Mock()
        environ = {}
        env = PipelineEnvironment(environ=environ, exporter=exporter)

        env.export("ANDROID_NDK_HOME", "/ndk")

        exporter.export.assert_called_once_with("ANDROID_NDK_HOME", "/ndk")
        assert environ == {}

    def test_export_without_exporter(self):
        """Test exports are skipped without an exporter."""
        PipelineEnvironment(environ={}).export("ANDROID_NDK_HOME", "/ndk")


class TestEnvmanExporter:
    """Test EnvmanExporter."""

    def test_export_runs_envman(self):
        """Test envman is called with the key and the value on stdin."""
        exporter = EnvmanExporter(envman_path="/usr/local/bin/envman")

        with patch("subprocess.run") as mock_run:
            mock_run.return_value = Mock(returncode=0, stdout="", stderr="")
            exporter.export("ANDROID_NDK_HOME", "/sdk/ndk/23.1.7779620")

        args, kwargs = mock_run.call_args
        assert args[0] == ["/usr/local/bin/envman", "add", "--key", "ANDROID_NDK_HOME"]
        assert kwargs["input"] == "/sdk/ndk/23.1.7779620"

    def test_export_empty_value(self):
        """Test clearing a variable passes an empty value."""
        exporter = EnvmanExporter(envman_path="envman")

        with patch("subprocess.run") as mock_run:
            mock_run.return_value = Mock(returncode=0, stdout="", stderr="")
            exporter.export("ANDROID_NDK_HOME", "")

        assert mock_run.call_args[1]["input"] == ""

    def test_nonzero_exit(self):
        """Test envman failures raise EnvironmentExportError."""
        exporter = EnvmanExporter(envman_path="envman")

        with patch("subprocess.run") as mock_run:
            mock_run.return_value = Mock(returncode=1, stdout="", stderr="no envstore")
            with pytest.raises(EnvironmentExportError, match="no envstore"):
                exporter.export("PATH", "/usr/bin")

    def test_envman_missing(self):
        """Test a missing envman binary raises EnvironmentExportError."""
        exporter = EnvmanExporter(envman_path="envman")

        with patch("subprocess.run", side_effect=FileNotFoundError("envman")):
            with pytest.raises(EnvironmentExportError, match="Failed to execute envman"):
                exporter.export("PATH", "/usr/bin")

    def test_subprocess_not_checked(self):
        """Test envman is run without check=True so output can be reported."""
        exporter = EnvmanExporter(envman_path="envman")

        with patch("subprocess.run") as mock_run:
            mock_run.return_value = Mock(returncode=0, stdout="", stderr="")
            exporter.export("PATH", "/usr/bin")

        assert mock_run.call_args[1]["check"] is False


class TestEnvFileExporter:
    """Test EnvFileExporter."""

    def test_appends_lines(self, tmp_path):
        """Test exports are appended as KEY=VALUE lines."""
        env_file = tmp_path / "step.env"
        exporter = EnvFileExporter(env_file)

        exporter.export("PATH", "/usr/bin:/ndk")
        exporter.export("ANDROID_NDK_HOME", "/ndk")

        assert env_file.read_text() == "PATH=/usr/bin:/ndk\nANDROID_NDK_HOME=/ndk\n"

    def test_creates_parent_directory(self, tmp_path):
        """Test missing parent directories are created."""
        env_file = tmp_path / "out" / "step.env"

        EnvFileExporter(env_file).export("ANDROID_NDK_HOME", "")

        assert env_file.read_text() == "ANDROID_NDK_HOME=\n"

    def test_rejects_multiline_values(self, tmp_path):
        """Test multi-line values cannot be written."""
        with pytest.raises(EnvironmentExportError, match="multi-line"):
            EnvFileExporter(tmp_path / "step.env").export("KEY", "a\nb")

    def test_write_failure(self, tmp_path):
        """Test write errors are wrapped."""
        directory = tmp_path / "step.env"
        directory.mkdir()

        with pytest.raises(EnvironmentExportError, match="Failed to write"):
            EnvFileExporter(directory).export("KEY", "value")


class TestCreateExporter:
    """Test create_exporter()."""

    def test_envman(self):
        assert isinstance(create_exporter("envman"), EnvmanExporter)

    def test_file(self, tmp_path):
        exporter = create_exporter("file", tmp_path / "step.env")
        assert isinstance(exporter, EnvFileExporter)
        assert exporter.env_file == tmp_path / "step.env"

    def test_file_requires_path(self):
        with pytest.raises(ConfigurationError, match="requires an export file"):
            create_exporter("file")

    def test_none(self):
        assert create_exporter("none") is None

    def test_unknown_backend(self):
        with pytest.raises(ConfigurationError, match="Unknown export backend"):
            create_exporter("github")
