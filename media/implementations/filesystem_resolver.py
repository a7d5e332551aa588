"""
Filesystem Media Resolver

Resolves plain paths and file:// URIs to video metadata by
inspecting the file on disk.
"""

import logging
import os
from pathlib import Path
from typing import Optional

from media.constants import SUPPORTED_VIDEO_FORMATS, MediaErrorCode
from media.interfaces.media_resolver_interface import (
    MediaResolverError,
    MediaResolverInterface,
)
from media.models.video_metadata import VideoMetadata
from media.utils.media_utils import (
    get_video_duration_ms,
    guess_content_type,
    ref_to_path,
)


class FilesystemMediaResolver(MediaResolverInterface):
    """
    Local media resolver backed by the filesystem.

    Metadata comes from the file itself:
    - size from stat()
    - content type from the extension
    - title from the file stem
    - duration from ffprobe (optional)
    """

    def __init__(
        self,
        media_root: Optional[Path] = None,
        probe_duration: bool = True,
    ):
        """
        Initialize filesystem resolver.

        Args:
            media_root: Base directory for relative references
            probe_duration: If True, use ffprobe to read video duration

        Example:
            resolver = FilesystemMediaResolver(media_root=Path("/sdcard/DCIM"))
            metadata = resolver.resolve("clip.mp4")
        """
        self.logger = logging.getLogger(__name__)
        self.media_root = Path(media_root) if media_root else None
        self.probe_duration = probe_duration

        self.logger.debug(
            f"Filesystem resolver initialized "
            f"(root: {self.media_root}, probe: {probe_duration})",
        )

    def resolve(self, ref: str) -> VideoMetadata:
        """Resolve a path or file:// URI to metadata read from disk."""
        path = ref_to_path(ref, self.media_root)
        if path is None:
            raise MediaResolverError(
                f"Not a local video reference: {ref!r}",
                code=MediaErrorCode.INVALID_REFERENCE,
            )

        if not path.is_file():
            raise MediaResolverError(
                f"Video file not found: {path}",
                code=MediaErrorCode.NOT_FOUND,
            )

        content_type = guess_content_type(path)
        if content_type is None:
            raise MediaResolverError(
                f"Unsupported video format: {path.suffix}. "
                f"Supported: {SUPPORTED_VIDEO_FORMATS}",
                code=MediaErrorCode.UNSUPPORTED_FORMAT,
            )

        if not os.access(path, os.R_OK):
            raise MediaResolverError(
                f"Video file not readable: {path}",
                code=MediaErrorCode.UNREADABLE,
            )

        size_bytes = path.stat().st_size
        duration_ms = get_video_duration_ms(path) if self.probe_duration else None

        metadata = VideoMetadata(
            local_path=path,
            size_bytes=size_bytes,
            content_type=content_type,
            title=path.stem,
            duration_ms=duration_ms,
        )

        self.logger.debug(f"Resolved {ref} -> {metadata}")
        return metadata

    def exists(self, ref: str) -> bool:
        try:
            self.resolve(ref)
            return True
        except MediaResolverError:
            return False
