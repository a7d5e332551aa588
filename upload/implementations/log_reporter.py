"""
Log Reporter Implementation

Reports upload outcomes through the logging system.
Default reporter when no UI is attached.
"""

import logging
from typing import Optional

from upload.interfaces.reporter_interface import ResultReporterInterface
from upload.models.upload_result import UploadResult


class LogReporter(ResultReporterInterface):
    """Write each upload outcome as one log line (INFO or ERROR)"""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)

    def report(self, ref: str, result: UploadResult) -> None:
        if result.success:
            self.logger.info(f"✅ {result.message}: {ref} (video {result.video_id})")
        else:
            self.logger.error(f"❌ {result}: {ref}")
