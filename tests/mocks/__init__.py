"""
Mock implementations for testing NDKKit components.

This package provides in-memory implementations of the environment port
to enable isolated, deterministic testing.
"""

from .environment import MemoryEnvironment

__all__ = [
    "MemoryEnvironment",
]
