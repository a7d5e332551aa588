"""
Implementations Package

Concrete registry client implementations.
"""

from registry.implementations.http_registry import HttpRegistryClient
from registry.implementations.mock_registry import MockRegistryClient

__all__ = [
    "HttpRegistryClient",
    "MockRegistryClient",
]
