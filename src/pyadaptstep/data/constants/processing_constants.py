import sys
from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True)
class ScanConstants:
    """Processing constants used by the adaptive scanner."""
    # Scan resolution
    DEFAULT_SCAN_DIVISIONS: Final[int] = 100
    # Running maximum of |f''| restarts from here after every accepted node
    CURVATURE_SENTINEL: Final[float] = -sys.float_info.max
    # Linear interpolation error bound: h**2 * max|f''| / ERROR_BOUND_DIVISOR
    ERROR_BOUND_DIVISOR: Final[float] = 8.0
    # Finite-difference curvature
    DEFAULT_DIFFERENCE_ORDER: Final[int] = 2
    SUPPORTED_DIFFERENCE_ORDERS: Final[tuple] = (2, 4)
    # Interpolant behaviour outside the node range
    CONSTANT_BOUND: Final[str] = "constant"
    EXTRAPOLATE_BOUND: Final[str] = "extrapolate"
    # Result checks
    MIN_POINTS: Final[int] = 2
    DEFAULT_SAMPLES_PER_SEGMENT: Final[int] = 10
    # Floating-point comparisons on node arrays
    FLOATING_POINT_TOLERANCE: Final[float] = 1e-12


@dataclass(frozen=True)
class ErrorMessages:
    """Standardized error message templates."""
    INVALID_DOMAIN: Final[str] = "Domain lower bound must be smaller than upper bound, got ({a}, {b})"
    NON_FINITE_VALUE: Final[str] = "{name} must be a finite number, got {value}"
    NON_POSITIVE_VALUE: Final[str] = "{name} must be positive, got {value}"
    SINGULARITY_OUTSIDE_DOMAIN: Final[str] = "Singularity {s} must lie strictly inside the domain ({a}, {b})"
    NON_FINITE_CURVATURE: Final[str] = "Curvature estimate at x={x} is not finite: {value}"
