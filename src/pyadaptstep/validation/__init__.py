"""Validation utilities for PyAdaptStep."""

from .input_validator import validate_domain, validate_tolerance, validate_scan_step, validate_singularities

__all__ = [
    "validate_domain",
    "validate_tolerance",
    "validate_scan_step",
    "validate_singularities"
]
