"""
Tests for declared SDK component ensuring.
"""

from unittest.mock import Mock

import pytest

from ndkkit.core.exceptions import ComponentEnsureError, SdkManagerInstallError
from ndkkit.sdk.components import SdkComponent
from ndkkit.sdk.ensurer import SdkManagerComponentEnsurer
from ndkkit.sdk.model import AndroidSdk
from ndkkit.sdk.sdkmanager import SdkManager


@pytest.fixture
def sdk(mock_android_sdk):
    return AndroidSdk(root=mock_android_sdk)


class TestSdkManagerComponentEnsurer:
    """Test SdkManagerComponentEnsurer.ensure()."""

    def test_installs_missing_only(self, sdk, mock_android_sdk):
        """Test installed components are skipped."""
        (mock_android_sdk / "platforms" / "android-33").mkdir()
        manager = Mock(spec=SdkManager)
        components = [
            SdkComponent("platforms;android-33"),
            SdkComponent("build-tools;33.0.2"),
        ]

        SdkManagerComponentEnsurer(manager, components).ensure(sdk)

        manager.install.assert_called_once_with(SdkComponent("build-tools;33.0.2"))

    def test_nothing_declared(self, sdk):
        """Test no sdkmanager is needed without declared components."""
        SdkManagerComponentEnsurer(None, []).ensure(sdk)

    def test_install_failure(self, sdk, caplog):
        manager = Mock(spec=SdkManager)
        manager.install.side_effect = SdkManagerInstallError(
            "failed", output="Failed to find package"
        )
        ensurer = SdkManagerComponentEnsurer(manager, [SdkComponent("platforms;android-99")])

        with pytest.raises(ComponentEnsureError, match="platforms;android-99"):
            ensurer.ensure(sdk)

        assert "Failed to find package" in caplog.text
