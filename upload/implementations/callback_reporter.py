"""
Callback Reporter Implementation

Forwards the status string to a caller-supplied function, e.g. a UI
hook that shows a toast message.
"""

import logging
from typing import Callable

from upload.interfaces.reporter_interface import ResultReporterInterface
from upload.models.upload_result import UploadResult


class CallbackReporter(ResultReporterInterface):
    """
    Reporter that calls back with the user-facing message.

    Usage:
        reporter = CallbackReporter(lambda message: print(message))
    """

    def __init__(self, callback: Callable[[str], None]):
        """
        Args:
            callback: Called with result.message for every upload
        """
        self.logger = logging.getLogger(__name__)
        self.callback = callback

    def report(self, ref: str, result: UploadResult) -> None:
        self.logger.debug(f"Reporting '{result.message}' for {ref}")
        self.callback(result.message)
