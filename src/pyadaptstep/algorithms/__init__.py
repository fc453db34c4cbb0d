"""
Core computational algorithms.

This module provides the adaptive scan that places piecewise-linear
interpolation nodes, the curvature estimators it relies on, and helpers to
evaluate and symbolically represent the resulting interpolant.
"""

from .curvature import FiniteDifferenceCurvature, SymbolicCurvature, constant_curvature
from .scanner import scan_interval, scan_with_singularities, error_upper_bound
from .interpolation import interpolate_value, ensure_ascending_order, max_interpolation_error
from .piecewise_builder import PiecewiseBuilder

__all__ = [
    "FiniteDifferenceCurvature",
    "SymbolicCurvature",
    "constant_curvature",
    "scan_interval",
    "scan_with_singularities",
    "error_upper_bound",
    "interpolate_value",
    "ensure_ascending_order",
    "max_interpolation_error",
    "PiecewiseBuilder"
]
