"""
Media Resolver Factory

Factory pattern for creating media resolver implementations.
Follows the same pattern as registry/factory.py.
"""

import logging
from pathlib import Path
from typing import Literal, Optional

from config.settings import ENABLE_FFPROBE, MEDIA_ROOT
from media.implementations.filesystem_resolver import FilesystemMediaResolver
from media.implementations.mock_resolver import MockMediaResolver
from media.interfaces.media_resolver_interface import MediaResolverInterface

# Type alias
ResolverMode = Literal["auto", "real", "mock"]


class MediaResolverFactory:
    """
    Factory for creating media resolver implementations.

    Usage:
        # Filesystem resolver rooted at MEDIA_ROOT
        resolver = MediaResolverFactory.create_resolver()

        # Force mock for testing
        resolver = MediaResolverFactory.create_resolver(mode="mock")
    """

    _logger = logging.getLogger(__name__)

    @classmethod
    def create_resolver(
        cls,
        mode: ResolverMode = "auto",
        media_root: Optional[Path] = None,
    ) -> MediaResolverInterface:
        """
        Create a media resolver instance.

        Args:
            mode: "auto" / "real" (filesystem), "mock" (in-memory)
            media_root: Override MEDIA_ROOT from settings

        Returns:
            MediaResolverInterface implementation
        """
        if mode == "mock":
            cls._logger.info("Creating Mock Media Resolver (forced)")
            return MockMediaResolver()

        # The local filesystem is always available, so "auto" needs no fallback
        cls._logger.info("Creating Filesystem Media Resolver")
        return FilesystemMediaResolver(
            media_root=media_root or MEDIA_ROOT,
            probe_duration=ENABLE_FFPROBE,
        )


def create_resolver(
    force_mock: bool = False,
    media_root: Optional[Path] = None,
) -> MediaResolverInterface:
    """
    Quick resolver creation with simple mock override.

    Example:
        resolver = create_resolver()
        resolver = create_resolver(force_mock=True)
    """
    mode = "mock" if force_mock else "auto"
    return MediaResolverFactory.create_resolver(mode=mode, media_root=media_root)
