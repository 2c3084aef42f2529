"""
Tests for Android SDK model and components.
"""

from pathlib import Path

import pytest

from ndkkit.core.exceptions import SdkNotFoundError
from ndkkit.sdk.components import SdkComponent, ndk_component
from ndkkit.sdk.model import AndroidSdk


class TestSdkComponent:
    """Test SdkComponent."""

    def test_install_path(self):
        """Test ';' separated package paths map to directories."""
        assert SdkComponent("platforms;android-33").install_path == Path(
            "platforms", "android-33"
        )

    def test_single_segment(self):
        """Test packages without ';'."""
        assert SdkComponent("platform-tools").install_path == Path("platform-tools")

    def test_ndk_component(self):
        """Test side-by-side NDK package."""
        component = ndk_component("22.1.7171670")
        assert component.package == "ndk;22.1.7171670"
        assert component.install_path == Path("ndk", "22.1.7171670")

    @pytest.mark.parametrize("package", ["", "   ", "platforms;", ";android-33"])
    def test_invalid_package(self, package):
        """Test empty package paths and segments are rejected."""
        with pytest.raises(ValueError):
            SdkComponent(package)

    def test_str(self):
        assert str(SdkComponent("build-tools;33.0.2")) == "build-tools;33.0.2"


class TestAndroidSdk:
    """Test AndroidSdk."""

    def test_from_android_home(self, mock_android_sdk):
        sdk = AndroidSdk.from_environment(android_home=str(mock_android_sdk))
        assert sdk.root == mock_android_sdk

    def test_from_sdk_root(self, mock_android_sdk):
        sdk = AndroidSdk.from_environment(android_sdk_root=str(mock_android_sdk))
        assert sdk.root == mock_android_sdk

    def test_android_home_preferred(self, mock_android_sdk, tmp_path):
        """Test ANDROID_HOME wins when both exist."""
        other = tmp_path / "other-sdk"
        other.mkdir()

        sdk = AndroidSdk.from_environment(
            android_home=str(mock_android_sdk), android_sdk_root=str(other)
        )

        assert sdk.root == mock_android_sdk

    def test_falls_back_when_android_home_missing(self, mock_android_sdk, tmp_path):
        """Test ANDROID_SDK_ROOT is used when ANDROID_HOME does not exist."""
        sdk = AndroidSdk.from_environment(
            android_home=str(tmp_path / "missing"),
            android_sdk_root=str(mock_android_sdk),
        )

        assert sdk.root == mock_android_sdk

    def test_not_found(self, tmp_path):
        with pytest.raises(SdkNotFoundError):
            AndroidSdk.from_environment(android_home=str(tmp_path / "missing"))

    def test_nothing_set(self):
        with pytest.raises(SdkNotFoundError):
            AndroidSdk.from_environment()

    def test_is_installed(self, mock_android_sdk):
        sdk = AndroidSdk(root=mock_android_sdk)
        (mock_android_sdk / "platforms" / "android-33").mkdir()

        assert sdk.is_installed(SdkComponent("platforms;android-33"))
        assert not sdk.is_installed(SdkComponent("platforms;android-34"))

    def test_component_path(self, mock_android_sdk):
        sdk = AndroidSdk(root=mock_android_sdk)
        assert sdk.component_path(ndk_component("23.1.7779620")) == (
            mock_android_sdk / "ndk" / "23.1.7779620"
        )
