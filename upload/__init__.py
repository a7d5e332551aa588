"""
Upload Module

Uploads locally stored videos to the Video Registry.

Public API:
    - UploadController: Blocking three-step upload coordinator
    - UploadManager: Runs uploads on background worker threads
    - UploadResult: Upload operation result
    - UploadStatus: Status codes
    - create_upload_controller: Factory function

Usage:
    from upload import create_upload_controller

    controller = create_upload_controller()
    result = controller.upload_video("/path/to/video.mp4")
    print(result.message)
"""

from upload.config import UploadConfig
from upload.constants import UploadStatus
from upload.controllers.upload_controller import UploadController
from upload.factory import create_upload_controller
from upload.interfaces.reporter_interface import ResultReporterInterface
from upload.models.upload_result import UploadResult
from upload.upload_manager import UploadManager

# Public API
__all__ = [
    "ResultReporterInterface",
    "UploadConfig",
    "UploadController",
    "UploadManager",
    "UploadResult",
    "UploadStatus",
    "create_upload_controller",
]
