"""
Media Constants

Centralized configuration for the local media module.
Following the same pattern as upload/constants.py for consistency.
"""

from enum import Enum

# =============================================================================
# SUPPORTED FORMATS
# =============================================================================

# File extension -> content type sent to the registry
VIDEO_CONTENT_TYPES = {
    ".mp4": "video/mp4",
    ".m4v": "video/mp4",
    ".3gp": "video/3gpp",
    ".webm": "video/webm",
    ".mkv": "video/x-matroska",
    ".mov": "video/quicktime",
    ".avi": "video/x-msvideo",
}

SUPPORTED_VIDEO_FORMATS = list(VIDEO_CONTENT_TYPES)

# =============================================================================
# REFERENCE FORMAT
# =============================================================================

# Local references may be plain paths or file:// URIs
FILE_URI_SCHEME = "file"

# =============================================================================
# RESOLVER ERRORS
# =============================================================================


class MediaErrorCode(Enum):
    """Why a local video reference could not be resolved"""

    NOT_FOUND = "not_found"
    UNSUPPORTED_FORMAT = "unsupported_format"
    UNREADABLE = "unreadable"
    INVALID_REFERENCE = "invalid_reference"
