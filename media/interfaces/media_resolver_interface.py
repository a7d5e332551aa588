"""
Media Resolver Interface

Abstract interface for looking up locally stored videos.
Follows Dependency Inversion Principle - the upload controller depends on
this abstraction, not on how local videos are actually stored.
"""

from abc import ABC, abstractmethod

from media.constants import MediaErrorCode
from media.models.video_metadata import VideoMetadata


class MediaResolverInterface(ABC):
    """
    Abstract base class for local media resolvers.

    Any resolver implementation (filesystem, media index, in-memory, etc.)
    must implement these methods.
    """

    @abstractmethod
    def resolve(self, ref: str) -> VideoMetadata:
        """
        Resolve a local video reference to its metadata.

        The reference is opaque to callers: a filesystem path or a
        file:// URI for the filesystem resolver, any key for the mock.

        Args:
            ref: Local video reference

        Returns:
            VideoMetadata with local_path, size, content type and title

        Raises:
            MediaResolverError: If no matching local video exists

        Example:
            metadata = resolver.resolve("file:///videos/clip.mp4")
            print(metadata.size_bytes)
        """

    @abstractmethod
    def exists(self, ref: str) -> bool:
        """
        Check if a reference points at a resolvable video.

        Returns:
            True if resolve(ref) would succeed
        """


class MediaResolverError(Exception):
    """
    Exception raised when a local video cannot be resolved.

    Examples:
    - File does not exist
    - Unsupported file extension
    - File cannot be read
    """

    def __init__(
        self,
        message: str,
        code: MediaErrorCode = MediaErrorCode.NOT_FOUND,
    ):
        super().__init__(message)
        self.code = code
