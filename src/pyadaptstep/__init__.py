"""
PyAdaptStep - A Python library for adaptive piecewise-linear sampling of scalar functions.

This library computes the minimum amount of points needed to linearly
interpolate a function on an interval within a desired tolerance. It is meant
for expensive black-box functions: the cost of evaluating the function is paid
once, during the scan, and later evaluations use the cheap interpolant.

Key Features:
- Greedy forward scan driven by a running maximum of the curvature
- Singular points handled by splitting the domain into sub-intervals
- Exact (SymPy) or finite-difference curvature estimators
- Symbolic and numeric evaluation of the resulting interpolant
- YAML-based scan descriptions

Main Components:
- Core: Exceptions and the symbolic function wrapper
- Algorithms: Scanner, curvature estimators and interpolant helpers
- Parsing: YAML configuration parsing and scan execution
- Validation: Input checks shared by the scanner and the parser
- Data: Processing constants
"""

try:
    from importlib.metadata import version, PackageNotFoundError
    try:
        __version__ = version("pyadaptstep")
    except PackageNotFoundError:
        __version__ = "0.1.0+unknown"  # Fallback version
except ImportError:
    __version__ = "0.1.0+unknown"

# Core definitions
from .core.exceptions import ScanError, ScanValidationError, CurvatureError
from .core.symbolic_function import SymbolicFunction

# Algorithms
from .algorithms.scanner import scan_interval, scan_with_singularities
from .algorithms.curvature import FiniteDifferenceCurvature, SymbolicCurvature, constant_curvature
from .algorithms.interpolation import interpolate_value, ensure_ascending_order, max_interpolation_error
from .algorithms.piecewise_builder import PiecewiseBuilder

# Main configuration API
from .parsing.api import sample_from_yaml, validate_yaml_file, get_scan_info

__all__ = [
    # Version
    '__version__',

    # Core classes
    'ScanError',
    'ScanValidationError',
    'CurvatureError',
    'SymbolicFunction',

    # Scanning
    'scan_interval',
    'scan_with_singularities',

    # Curvature
    'FiniteDifferenceCurvature',
    'SymbolicCurvature',
    'constant_curvature',

    # Interpolant helpers
    'interpolate_value',
    'ensure_ascending_order',
    'max_interpolation_error',
    'PiecewiseBuilder',

    # Configuration API
    'sample_from_yaml',
    'validate_yaml_file',
    'get_scan_info'
]
