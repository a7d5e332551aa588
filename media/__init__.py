"""
Media Module

Lookup of locally stored videos for the upload client.

Public API:
    - MediaResolverInterface: Resolver contract
    - MediaResolverError: Raised when a reference cannot be resolved
    - VideoMetadata: Resolved video description
    - create_resolver: Factory function

Usage:
    from media import create_resolver

    resolver = create_resolver()
    metadata = resolver.resolve("file:///videos/clip.mp4")
"""

from media.constants import MediaErrorCode
from media.factory import MediaResolverFactory, create_resolver
from media.interfaces.media_resolver_interface import (
    MediaResolverError,
    MediaResolverInterface,
)
from media.models.video_metadata import VideoMetadata

__all__ = [
    "MediaErrorCode",
    "MediaResolverError",
    "MediaResolverFactory",
    "MediaResolverInterface",
    "VideoMetadata",
    "create_resolver",
]
