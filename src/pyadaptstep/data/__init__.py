"""
Constants shared across PyAdaptStep.

This package provides the processing constants and error message templates
used by the scanner, the curvature estimators and the configuration parser.
"""

from .constants.processing_constants import ScanConstants, ErrorMessages

__all__ = [
    "ScanConstants",
    "ErrorMessages"
]
