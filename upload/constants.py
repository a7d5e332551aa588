"""
Upload Constants

Centralized configuration for the upload module.
Following the same pattern as registry/constants.py for consistency.
"""

from enum import Enum

# =============================================================================
# UPLOAD CONFIGURATION
# =============================================================================

# Default size threshold when neither config file nor settings override it.
# Files at or above this size are rejected before any byte transfer.
DEFAULT_MAX_UPLOAD_SIZE_BYTES = 50 * 1024 * 1024  # 50 MB

# Background upload pool size
DEFAULT_UPLOAD_WORKERS = 2

# =============================================================================
# UPLOAD STATUS
# =============================================================================


class UploadStatus(Enum):
    """Terminal outcome of one upload attempt"""

    SUCCESS = "success"
    TOO_LARGE = "too_large"
    NOT_FOUND = "not_found"
    REGISTRATION_FAILED = "registration_failed"
    UPLOAD_FAILED = "upload_failed"


# Status strings shown to the user by result reporters
STATUS_UPLOAD_SUCCESSFUL = "Upload succeeded"
STATUS_UPLOAD_ERROR_FILE_TOO_LARGE = "Upload failed: File too big"
STATUS_UPLOAD_ERROR = "Upload failed"

STATUS_MESSAGES = {
    UploadStatus.SUCCESS: STATUS_UPLOAD_SUCCESSFUL,
    UploadStatus.TOO_LARGE: STATUS_UPLOAD_ERROR_FILE_TOO_LARGE,
    UploadStatus.NOT_FOUND: STATUS_UPLOAD_ERROR,
    UploadStatus.REGISTRATION_FAILED: STATUS_UPLOAD_ERROR,
    UploadStatus.UPLOAD_FAILED: STATUS_UPLOAD_ERROR,
}

# Failure reasons carried by UploadResult
REASON_NOT_FOUND = "not found"
REASON_REGISTRATION_FAILED = "registration failed"
REASON_TOO_LARGE = "file too large"
REASON_UPLOAD_ERROR = "upload error"
