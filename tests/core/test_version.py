"""
Tests for NDK version validation.
"""

import pytest

from ndkkit.core.exceptions import ConfigurationError, InvalidVersionError
from ndkkit.core.version import validate_ndk_version


class TestValidateNdkVersion:
    """Test validate_ndk_version()."""

    @pytest.mark.parametrize(
        "version_str",
        ["23.1.7779620", "18.1.5063045", "22.1.7171670", "25.0.8141415-rc2", "21.4"],
    )
    def test_valid_versions(self, version_str):
        """Test real NDK revisions are accepted."""
        assert validate_ndk_version(version_str) is not None

    def test_release_components(self):
        """Test parsed release tuple."""
        assert validate_ndk_version("23.1.7779620").release == (23, 1, 7779620)

    @pytest.mark.parametrize(
        "version_str",
        ["abc", "r23b", "23.1.x", "1..2", "23", " 23.1.7779620", "23.1.7779620\n"],
    )
    def test_invalid_versions(self, version_str):
        """Test malformed or single-component versions are rejected."""
        with pytest.raises(InvalidVersionError) as exc_info:
            validate_ndk_version(version_str)

        assert exc_info.value.version == version_str
        assert "is not a valid NDK version" in str(exc_info.value)
        assert "sdkmanager --list" in str(exc_info.value)

    def test_is_configuration_error(self):
        """Test invalid versions are configuration errors."""
        with pytest.raises(ConfigurationError):
            validate_ndk_version("abc")
