"""
Android SDK support for NDKKit.

Available Components:
--------------------
- AndroidSdk: SDK root resolved from ANDROID_HOME / ANDROID_SDK_ROOT
- SdkComponent: sdkmanager package path and its install location
- SdkManager: sdkmanager wrapper (install, licenses)
- SdkManagerComponentEnsurer: installs declared packages that are missing
"""

from ndkkit.sdk.components import SdkComponent, ndk_component
from ndkkit.sdk.model import AndroidSdk
from ndkkit.sdk.sdkmanager import SdkManager
from ndkkit.sdk.ensurer import SdkManagerComponentEnsurer

__all__ = [
    "AndroidSdk",
    "SdkComponent",
    "ndk_component",
    "SdkManager",
    "SdkManagerComponentEnsurer",
]
