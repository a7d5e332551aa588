"""
Upload Result Model

The single terminal value returned for every upload attempt.
"""

from dataclasses import dataclass
from typing import Optional

from upload.constants import (
    REASON_TOO_LARGE,
    STATUS_MESSAGES,
    UploadStatus,
)


@dataclass(frozen=True)
class UploadResult:
    """
    Result of an upload operation.

    Attributes:
        status: Outcome category (the discriminator)
        reason: Short failure reason ("not found", "upload error", ...)
        video_id: Registry video ID (once registration succeeded)
        file_size: Size of the local file in bytes (0 if never resolved)
        upload_duration: Time taken by the whole attempt in seconds
    """

    status: UploadStatus
    reason: Optional[str] = None
    video_id: Optional[str] = None
    file_size: int = 0
    upload_duration: float = 0.0

    @property
    def success(self) -> bool:
        """True only for a completed upload the registry marked ready"""
        return self.status == UploadStatus.SUCCESS

    @property
    def message(self) -> str:
        """Status string for display to the user"""
        return STATUS_MESSAGES[self.status]

    @classmethod
    def succeeded(
        cls,
        video_id: str,
        file_size: int,
        upload_duration: float = 0.0,
    ) -> "UploadResult":
        return cls(
            status=UploadStatus.SUCCESS,
            video_id=video_id,
            file_size=file_size,
            upload_duration=upload_duration,
        )

    @classmethod
    def too_large(
        cls,
        file_size: int,
        video_id: Optional[str] = None,
        upload_duration: float = 0.0,
    ) -> "UploadResult":
        return cls(
            status=UploadStatus.TOO_LARGE,
            reason=REASON_TOO_LARGE,
            video_id=video_id,
            file_size=file_size,
            upload_duration=upload_duration,
        )

    @classmethod
    def failed(
        cls,
        status: UploadStatus,
        reason: str,
        video_id: Optional[str] = None,
        file_size: int = 0,
        upload_duration: float = 0.0,
    ) -> "UploadResult":
        """
        Build a failure result.

        Raises:
            ValueError: If status is SUCCESS
        """
        if status == UploadStatus.SUCCESS:
            raise ValueError("A failed result cannot have SUCCESS status")
        return cls(
            status=status,
            reason=reason,
            video_id=video_id,
            file_size=file_size,
            upload_duration=upload_duration,
        )

    def __str__(self) -> str:
        if self.reason and not self.success:
            return f"{self.message} ({self.reason})"
        return self.message
