"""
Video Metadata Model

Descriptive metadata for a video, either resolved from local storage
or returned by the registry in a listing.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class VideoMetadata:
    """
    Read-only description of a video.

    Attributes:
        local_path: Path on disk (None for videos listed from the registry)
        size_bytes: File size in bytes (0 if unknown)
        content_type: MIME type, e.g. "video/mp4"
        title: Human-readable title (defaults to file stem for local videos)
        duration_ms: Video length in milliseconds, if known
    """

    local_path: Optional[Path]
    size_bytes: int
    content_type: str
    title: str = ""
    duration_ms: Optional[int] = None

    @property
    def is_local(self) -> bool:
        """True if this metadata points at a file on this machine"""
        return self.local_path is not None

    @property
    def size_mb(self) -> float:
        """Size in megabytes, for logging"""
        return self.size_bytes / (1024 * 1024)

    def __repr__(self) -> str:
        """Human-readable representation"""
        return (
            f"VideoMetadata(title='{self.title}', "
            f"content_type={self.content_type}, "
            f"size={self.size_bytes})"
        )
