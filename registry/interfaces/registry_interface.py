"""
Registry Client Interface

Abstract interface for talking to the remote Video Registry.
Follows Dependency Inversion Principle - the upload controller depends on
this abstraction, not on the wire format (HTTP/JSON, gRPC, ...).

Absent results are never returned as None: every failure raises
RegistryError so callers cannot mistake "nothing" for "something".
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional

from media.models.video_metadata import VideoMetadata
from registry.constants import RegistryErrorCode
from registry.models.registered_video import RegisteredVideo, VideoStatus


class RegistryClientInterface(ABC):
    """
    Abstract base class for Video Registry clients.

    All methods block until the remote call completes.
    """

    @abstractmethod
    def register(self, metadata: VideoMetadata) -> RegisteredVideo:
        """
        Register video metadata with the registry.

        Args:
            metadata: Local video metadata (title, duration, content type, size)

        Returns:
            RegisteredVideo with server-assigned id and content type

        Raises:
            RegistryError: If the call failed or returned no video
        """

    @abstractmethod
    def upload_data(
        self,
        video_id: str,
        content_type: str,
        file_path: Path,
    ) -> VideoStatus:
        """
        Send the bytes of a registered video.

        Args:
            video_id: ID returned by register()
            content_type: Content type returned by register()
            file_path: Local file to send

        Returns:
            VideoStatus with the server's processing state

        Raises:
            RegistryError: If the call failed or returned no status
        """

    @abstractmethod
    def list_videos(self) -> List[VideoMetadata]:
        """
        List all videos known to the registry.

        Returns:
            List of VideoMetadata (empty if the registry has none)

        Raises:
            RegistryError: If the registry could not be queried
        """

    @abstractmethod
    def is_available(self) -> bool:
        """
        Check if the client is configured and ready to make calls.

        Returns:
            True if the client can be used
        """

    @abstractmethod
    def test_connection(self) -> bool:
        """
        Test connection to the registry without changing anything.

        Returns:
            True if the registry endpoint is reachable
        """

    def close(self) -> None:
        """Release transport resources (default: nothing to release)"""


class RegistryError(Exception):
    """
    Exception raised for registry-related errors.

    Examples:
    - Connection refused or timed out
    - HTTP error status
    - Empty or malformed response body
    """

    def __init__(
        self,
        message: str,
        code: RegistryErrorCode = RegistryErrorCode.NETWORK_ERROR,
        http_status: Optional[int] = None,
    ):
        super().__init__(message)
        self.code = code
        self.http_status = http_status
