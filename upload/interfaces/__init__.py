"""
Interfaces Package

Abstract interfaces for upload result reporting.
"""

from upload.interfaces.reporter_interface import ResultReporterInterface

__all__ = [
    "ResultReporterInterface",
]
