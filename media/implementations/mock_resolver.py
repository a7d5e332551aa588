"""
Mock Media Resolver Implementation

In-memory resolver for testing without real video files.
Similar to MockRegistryClient in the registry module.
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional

from media.constants import MediaErrorCode
from media.interfaces.media_resolver_interface import (
    MediaResolverError,
    MediaResolverInterface,
)
from media.models.video_metadata import VideoMetadata


class MockMediaResolver(MediaResolverInterface):
    """
    Mock media resolver for testing.

    References are plain dictionary keys. Nothing touches the filesystem
    unless a test registers a real path.
    """

    def __init__(self, videos: Optional[Dict[str, VideoMetadata]] = None):
        """
        Initialize mock resolver.

        Args:
            videos: Initial reference -> metadata mapping
        """
        self.logger = logging.getLogger(__name__)
        self._videos: Dict[str, VideoMetadata] = dict(videos or {})

        # Track lookups for test verification
        self.resolve_history: List[str] = []

        self.logger.info("[MOCK] Media resolver initialized")

    def resolve(self, ref: str) -> VideoMetadata:
        self.resolve_history.append(ref)

        metadata = self._videos.get(ref)
        if metadata is None:
            raise MediaResolverError(
                f"[MOCK] No local video for reference: {ref}",
                code=MediaErrorCode.NOT_FOUND,
            )
        return metadata

    def exists(self, ref: str) -> bool:
        return ref in self._videos

    # =========================================================================
    # TESTING HELPER METHODS
    # =========================================================================

    def add_fake_video(
        self,
        ref: str,
        size_bytes: int = 1024 * 1024,
        content_type: str = "video/mp4",
        title: Optional[str] = None,
        local_path: Optional[Path] = None,
        duration_ms: Optional[int] = None,
    ) -> VideoMetadata:
        """
        Register a fake local video.

        Args:
            ref: Reference that resolve() will accept
            size_bytes: Reported file size
            content_type: Reported content type
            title: Reported title (default: ref)
            local_path: Reported path (default: /mock/media/<ref>)
            duration_ms: Reported duration

        Returns:
            The stored VideoMetadata
        """
        metadata = VideoMetadata(
            local_path=local_path or Path("/mock/media") / ref,
            size_bytes=size_bytes,
            content_type=content_type,
            title=title or ref,
            duration_ms=duration_ms,
        )
        self._videos[ref] = metadata
        self.logger.debug(f"[MOCK] Added fake video: {ref} ({size_bytes} bytes)")
        return metadata

    def clear(self) -> None:
        """Remove all fake videos and lookup history"""
        self._videos.clear()
        self.resolve_history.clear()
