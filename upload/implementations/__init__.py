"""
Implementations Package

Concrete result reporter implementations.
"""

from upload.implementations.callback_reporter import CallbackReporter
from upload.implementations.log_reporter import LogReporter
from upload.implementations.mock_reporter import MockReporter

__all__ = [
    "CallbackReporter",
    "LogReporter",
    "MockReporter",
]
