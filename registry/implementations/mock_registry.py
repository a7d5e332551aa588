"""
Mock Registry Client Implementation

In-memory Video Registry for testing without a server.
Similar to MockUploader in the upload module.
"""

import logging
from itertools import count
from pathlib import Path
from typing import Dict, List, Optional

from media.models.video_metadata import VideoMetadata
from registry.constants import RegistryErrorCode, VideoState
from registry.interfaces.registry_interface import (
    RegistryClientInterface,
    RegistryError,
)
from registry.models.registered_video import RegisteredVideo, VideoStatus


class MockRegistryClient(RegistryClientInterface):
    """
    Mock registry client for testing.

    Registered videos are kept in memory and every call is recorded,
    so tests can assert which remote operations happened.
    """

    def __init__(
        self,
        upload_state: VideoState = VideoState.READY,
        fail_register: bool = False,
        fail_upload: bool = False,
        fail_list: bool = False,
        canonical_content_type: Optional[str] = None,
    ):
        """
        Initialize mock registry.

        Args:
            upload_state: State returned by every upload_data() call
            fail_register: If True, register() raises RegistryError
            fail_upload: If True, upload_data() raises RegistryError
            fail_list: If True, list_videos() raises RegistryError
            canonical_content_type: Content type the "server" assigns
                (None = echo the registered one)

        Example:
            # Server that never finishes processing
            registry = MockRegistryClient(upload_state=VideoState.PROCESSING)
        """
        self.logger = logging.getLogger(__name__)
        self.upload_state = upload_state
        self.fail_register = fail_register
        self.fail_upload = fail_upload
        self.fail_list = fail_list
        self.canonical_content_type = canonical_content_type

        self._ids = count(1)
        self._videos: Dict[str, VideoMetadata] = {}

        # Track calls for testing
        self.register_calls: List[VideoMetadata] = []
        self.upload_calls: List[dict] = []
        self.list_calls = 0

        self.logger.info("[MOCK] Registry client initialized")

    def register(self, metadata: VideoMetadata) -> RegisteredVideo:
        self.register_calls.append(metadata)

        if self.fail_register:
            raise RegistryError(
                "[MOCK] Simulated registration failure",
                code=RegistryErrorCode.EMPTY_RESPONSE,
            )

        video_id = str(next(self._ids))
        content_type = self.canonical_content_type or metadata.content_type
        self._videos[video_id] = VideoMetadata(
            local_path=None,
            size_bytes=metadata.size_bytes,
            content_type=content_type,
            title=metadata.title,
            duration_ms=metadata.duration_ms,
        )

        self.logger.info(f"[MOCK] Registered video {video_id}")
        return RegisteredVideo(
            id=video_id,
            content_type=content_type,
            title=metadata.title,
            duration_ms=metadata.duration_ms,
            data_url=f"mock://video/{video_id}/data",
        )

    def upload_data(
        self,
        video_id: str,
        content_type: str,
        file_path: Path,
    ) -> VideoStatus:
        self.upload_calls.append(
            {
                "video_id": video_id,
                "content_type": content_type,
                "file_path": Path(file_path),
            },
        )

        if self.fail_upload:
            raise RegistryError(
                "[MOCK] Simulated upload failure",
                code=RegistryErrorCode.NETWORK_ERROR,
            )

        self.logger.info(
            f"[MOCK] Received data for video {video_id} "
            f"(state: {self.upload_state.value})",
        )
        return VideoStatus(state=self.upload_state)

    def list_videos(self) -> List[VideoMetadata]:
        self.list_calls += 1

        if self.fail_list:
            raise RegistryError(
                "[MOCK] Simulated list failure",
                code=RegistryErrorCode.NETWORK_ERROR,
            )
        return list(self._videos.values())

    def is_available(self) -> bool:
        """Mock registry is always available"""
        return True

    def test_connection(self) -> bool:
        self.logger.info("[MOCK] ✅ Connection test successful")
        return True

    # =========================================================================
    # TESTING HELPER METHODS
    # =========================================================================

    @property
    def network_calls(self) -> int:
        """Total number of remote operations performed"""
        return len(self.register_calls) + len(self.upload_calls) + self.list_calls

    def get_last_upload(self) -> Optional[dict]:
        """Most recent upload_data() call, or None"""
        return self.upload_calls[-1] if self.upload_calls else None

    def clear_history(self) -> None:
        """Forget recorded calls (registered videos are kept)"""
        self.register_calls.clear()
        self.upload_calls.clear()
        self.list_calls = 0
