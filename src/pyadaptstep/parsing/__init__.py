"""
Parsing and configuration modules for PyAdaptStep.

This package handles YAML scan descriptions: loading, validation, building the
symbolic function and its curvature estimator, and running the scan.
"""

from .api import sample_from_yaml, validate_yaml_file, get_scan_info
from .config.scan_yaml_parser import ScanYAMLParser

__all__ = [
    'sample_from_yaml',
    'validate_yaml_file',
    'get_scan_info',
    'ScanYAMLParser'
]
