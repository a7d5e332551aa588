"""
Interfaces Package

Abstract interfaces for local media resolvers.
"""

from media.interfaces.media_resolver_interface import (
    MediaResolverError,
    MediaResolverInterface,
)

__all__ = [
    "MediaResolverInterface",
    "MediaResolverError",
]
