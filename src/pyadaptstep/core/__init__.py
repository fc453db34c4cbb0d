"""
Core data structures and error types.

This module contains the exception hierarchy shared by the scanner and the
configuration layer, and the symbolic function wrapper that serves both as the
sampled function and its exact curvature estimator.
"""

from .exceptions import ScanError, ScanValidationError, CurvatureError
from .symbolic_function import SymbolicFunction

__all__ = [
    "ScanError",
    "ScanValidationError",
    "CurvatureError",
    "SymbolicFunction"
]
