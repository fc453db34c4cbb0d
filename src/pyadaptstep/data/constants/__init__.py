"""Processing constants for PyAdaptStep."""

from .processing_constants import ScanConstants, ErrorMessages

__all__ = [
    "ScanConstants",
    "ErrorMessages"
]
