"""
Implementations Package

Concrete media resolver implementations.
"""

from media.implementations.filesystem_resolver import FilesystemMediaResolver
from media.implementations.mock_resolver import MockMediaResolver

__all__ = [
    "FilesystemMediaResolver",
    "MockMediaResolver",
]
