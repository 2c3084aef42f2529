"""Test fixtures for NDKKit tests.

- sdk: Mock Android SDK directories and NDK installations

Import fixtures in your tests using:
    from tests.fixtures.sdk import mock_android_sdk
"""

__all__ = [
    "sdk",
]
