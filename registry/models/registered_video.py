"""
Registry Models

Data classes for what the Video Registry returns, plus conversion
between these models and the registry's JSON representation.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from media.models.video_metadata import VideoMetadata
from registry.constants import (
    DEFAULT_CONTENT_TYPE,
    FIELD_CONTENT_TYPE,
    FIELD_DATA_URL,
    FIELD_DURATION,
    FIELD_ID,
    FIELD_SIZE,
    FIELD_STATE,
    FIELD_TITLE,
    VideoState,
)


@dataclass(frozen=True)
class RegisteredVideo:
    """
    Identity assigned by the registry after metadata registration.

    Lives only for the duration of one upload call.

    Attributes:
        id: Server-assigned video ID
        content_type: Canonical content type chosen by the server
        title: Title as stored by the server
        duration_ms: Duration as stored by the server
        data_url: Where the server will serve the video bytes from
    """

    id: str
    content_type: str
    title: str = ""
    duration_ms: Optional[int] = None
    data_url: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RegisteredVideo":
        """
        Create RegisteredVideo from a registry JSON object.

        Raises:
            KeyError: If the object has no id
        """
        video_id = data[FIELD_ID]
        if video_id is None or str(video_id) == "":
            raise KeyError(FIELD_ID)

        return cls(
            id=str(video_id),
            content_type=data.get(FIELD_CONTENT_TYPE) or DEFAULT_CONTENT_TYPE,
            title=data.get(FIELD_TITLE) or "",
            duration_ms=_optional_int(data.get(FIELD_DURATION)),
            data_url=data.get(FIELD_DATA_URL),
        )


@dataclass(frozen=True)
class VideoStatus:
    """Result of a data upload: the server's processing state"""

    state: VideoState

    @property
    def is_ready(self) -> bool:
        """True only when the server finished processing the content"""
        return self.state == VideoState.READY

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "VideoStatus":
        return cls(state=VideoState.parse(data.get(FIELD_STATE)))


def metadata_to_dict(metadata: VideoMetadata) -> Dict[str, Any]:
    """Convert local metadata to the registration request body"""
    return {
        FIELD_TITLE: metadata.title,
        FIELD_DURATION: metadata.duration_ms or 0,
        FIELD_CONTENT_TYPE: metadata.content_type,
        FIELD_SIZE: metadata.size_bytes,
    }


def metadata_from_dict(data: Dict[str, Any]) -> VideoMetadata:
    """Convert a registry listing entry to VideoMetadata (no local path)"""
    return VideoMetadata(
        local_path=None,
        size_bytes=_optional_int(data.get(FIELD_SIZE)) or 0,
        content_type=data.get(FIELD_CONTENT_TYPE) or DEFAULT_CONTENT_TYPE,
        title=data.get(FIELD_TITLE) or "",
        duration_ms=_optional_int(data.get(FIELD_DURATION)),
    )


def _optional_int(value: Any) -> Optional[int]:
    if value is None:
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None
