"""
Result Reporter Interface

Abstract interface for surfacing upload outcomes to the user
(console, UI callback, log, ...).
"""

from abc import ABC, abstractmethod

from upload.models.upload_result import UploadResult


class ResultReporterInterface(ABC):
    """
    Abstract base class for result reporters.

    The upload controller calls report() exactly once per upload attempt.
    """

    @abstractmethod
    def report(self, ref: str, result: UploadResult) -> None:
        """
        Surface the outcome of one upload.

        Args:
            ref: Local video reference that was uploaded
            result: Terminal result of the attempt

        Example:
            reporter.report("file:///videos/clip.mp4", result)
        """
