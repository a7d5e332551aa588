"""
Mock Reporter Implementation

Records reported results for test verification.
"""

import logging
from typing import List, Optional, Tuple

from upload.interfaces.reporter_interface import ResultReporterInterface
from upload.models.upload_result import UploadResult


class MockReporter(ResultReporterInterface):
    """Reporter that keeps every (ref, result) pair in memory"""

    def __init__(self):
        self.logger = logging.getLogger(__name__)
        self.reports: List[Tuple[str, UploadResult]] = []

    def report(self, ref: str, result: UploadResult) -> None:
        self.reports.append((ref, result))
        self.logger.debug(f"[MOCK] Reported {result.status.value} for {ref}")

    # =========================================================================
    # TESTING HELPER METHODS
    # =========================================================================

    def get_last_report(self) -> Optional[Tuple[str, UploadResult]]:
        """Most recent (ref, result) pair, or None"""
        return self.reports[-1] if self.reports else None

    def get_messages(self) -> List[str]:
        """All reported user-facing messages, in order"""
        return [result.message for _, result in self.reports]

    def clear(self) -> None:
        self.reports.clear()
