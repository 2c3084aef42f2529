"""
NDK reconciliation for NDKKit.

Available Components:
--------------------
- current_ndk_home: canonical location of the installed NDK
- probe_ndk_version: revision read from source.properties
- NdkInstaller: remove-then-install cycle through sdkmanager
- EnvironmentPublisher: ANDROID_NDK_HOME / PATH exports
- NdkReconciler: top-level decision procedure

Example Usage:
-------------
    from ndkkit.core.environment import PipelineEnvironment, EnvmanExporter
    from ndkkit.ndk import NdkReconciler
    from ndkkit.sdk import AndroidSdk

    sdk = AndroidSdk.from_environment(android_home="/opt/android-sdk")
    env = PipelineEnvironment(exporter=EnvmanExporter())
    result = NdkReconciler(sdk, env).reconcile("23.1.7779620")
"""

from ndkkit.ndk.locator import ANDROID_NDK_HOME, current_ndk_home
from ndkkit.ndk.probe import probe_ndk_version
from ndkkit.ndk.installer import InstallOutcome, NdkInstaller
from ndkkit.ndk.publisher import EnvironmentPublisher
from ndkkit.ndk.reconciler import NdkReconciler, ReconcileResult

__all__ = [
    "ANDROID_NDK_HOME",
    "current_ndk_home",
    "probe_ndk_version",
    "InstallOutcome",
    "NdkInstaller",
    "EnvironmentPublisher",
    "NdkReconciler",
    "ReconcileResult",
]
