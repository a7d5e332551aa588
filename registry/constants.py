"""
Registry Constants

Centralized configuration for the Video Registry client.
Following the same pattern as upload/constants.py for consistency.
"""

from enum import Enum

# =============================================================================
# REST API PATHS
# =============================================================================

# Register metadata (POST) and list videos (GET)
VIDEO_SVC_PATH = "/video"

# Upload video bytes for a registered video
VIDEO_DATA_PATH = "/video/{id}/data"

# Multipart field carrying the video file
DATA_PARAMETER = "data"

# HTTP methods accepted for the data upload call
SUPPORTED_DATA_METHODS = ("POST", "PUT")

# =============================================================================
# JSON FIELD NAMES
# =============================================================================

FIELD_ID = "id"
FIELD_TITLE = "title"
FIELD_DURATION = "duration"
FIELD_CONTENT_TYPE = "contentType"
FIELD_SIZE = "size"
FIELD_DATA_URL = "dataUrl"
FIELD_STATE = "state"

# Content type assumed when the registry omits one
DEFAULT_CONTENT_TYPE = "video/mp4"

# =============================================================================
# VIDEO STATE
# =============================================================================


class VideoState(Enum):
    """Processing state reported by the registry after a data upload"""

    READY = "READY"
    PROCESSING = "PROCESSING"
    UNKNOWN = "UNKNOWN"

    @classmethod
    def parse(cls, value) -> "VideoState":
        """Map a wire value to a state; anything unrecognised is UNKNOWN"""
        if isinstance(value, str):
            try:
                return cls(value.strip().upper())
            except ValueError:
                pass
        return cls.UNKNOWN


# =============================================================================
# REGISTRY ERRORS
# =============================================================================


class RegistryErrorCode(Enum):
    """Why a registry call failed"""

    NETWORK_ERROR = "network_error"
    TIMEOUT = "timeout"
    HTTP_ERROR = "http_error"
    EMPTY_RESPONSE = "empty_response"
    INVALID_RESPONSE = "invalid_response"
    FILE_ERROR = "file_error"
