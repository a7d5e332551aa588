"""
Models Package

Upload outcome data structures.
"""

from upload.models.upload_result import UploadResult

__all__ = [
    "UploadResult",
]
