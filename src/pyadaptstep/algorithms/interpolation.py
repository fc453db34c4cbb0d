import logging
import numpy as np
from typing import Callable, Tuple

from pyadaptstep.data.constants import ScanConstants

logger = logging.getLogger(__name__)

CONSTANT_KEY = ScanConstants.CONSTANT_BOUND
EXTRAPOLATE_KEY = ScanConstants.EXTRAPOLATE_BOUND


def interpolate_value(x: float, xs: np.ndarray, ys: np.ndarray,
                      lower_bound_type: str = CONSTANT_KEY, upper_bound_type: str = CONSTANT_KEY) -> float:
    """Evaluate the piecewise-linear interpolant through (xs, ys) at x."""
    if not np.isfinite(x):
        raise ValueError(f"x must be finite, got {x}")
    if len(xs) == 0 or len(ys) == 0:
        raise ValueError("Input arrays cannot be empty")
    if len(xs) != len(ys):
        raise ValueError(f"Array length mismatch: xs({len(xs)}) != ys({len(ys)})")
    logger.debug("Interpolating value at x=%s with bounds: lower=%s, upper=%s",
                 x, lower_bound_type, upper_bound_type)
    if len(xs) == 1:
        logger.debug("Single-point array: returning constant value %.6f", ys[0])
        return float(ys[0])
    if x < xs[0]:
        if lower_bound_type == CONSTANT_KEY:
            return float(ys[0])
        denominator = xs[1] - xs[0]
        if denominator == 0:
            raise ValueError("Cannot extrapolate: first two x values are equal.")
        slope = (ys[1] - ys[0]) / denominator
        result = float(ys[0] + slope * (x - xs[0]))
        logger.debug("Lower linear extrapolation: slope=%.6f, result=%.6f", slope, result)
        return result
    if x > xs[-1]:
        if upper_bound_type == CONSTANT_KEY:
            return float(ys[-1])
        denominator = xs[-1] - xs[-2]
        if denominator == 0:
            raise ValueError("Cannot extrapolate: last two x values are equal.")
        slope = (ys[-1] - ys[-2]) / denominator
        result = float(ys[-1] + slope * (x - xs[-1]))
        logger.debug("Upper linear extrapolation: slope=%.6f, result=%.6f", slope, result)
        return result
    return float(np.interp(x, xs, ys))


def ensure_ascending_order(xs: np.ndarray, *value_arrays: np.ndarray) -> Tuple[np.ndarray, ...]:
    """Ensure the node array is in ascending order, flipping all provided arrays if needed."""
    if len(xs) < 2:
        return (xs,) + value_arrays
    diffs = np.diff(xs)
    tolerance = ScanConstants.FLOATING_POINT_TOLERANCE
    if np.all(diffs > tolerance):
        return (xs,) + value_arrays
    if np.all(diffs < -tolerance):
        logger.debug("Array is descending, flipping %d arrays", len(value_arrays) + 1)
        return (np.flip(xs),) + tuple(np.flip(arr) for arr in value_arrays)
    logger.error("Array is neither strictly ascending nor descending: %s",
                 xs.tolist() if len(xs) <= 20 else f"[{xs[0]}, ..., {xs[-1]}] (length={len(xs)})")
    raise ValueError(f"Array is not strictly ascending or strictly descending: {xs}")


def max_interpolation_error(f: Callable[[float], float], xs: np.ndarray, ys: np.ndarray,
                            samples_per_segment: int = ScanConstants.DEFAULT_SAMPLES_PER_SEGMENT) -> float:
    """
    Largest observed |f(x) - interpolant(x)| over interior samples of every segment.

    Each segment [xs[i], xs[i+1]] is probed at ``samples_per_segment`` equally spaced
    interior points; the segment end points are interpolation nodes and carry no error.
    """
    xs = np.asarray(xs, dtype=float)
    ys = np.asarray(ys, dtype=float)
    if len(xs) != len(ys):
        raise ValueError(f"Array length mismatch: xs({len(xs)}) != ys({len(ys)})")
    if samples_per_segment < 1:
        raise ValueError(f"samples_per_segment must be at least 1, got {samples_per_segment}")
    fractions = np.arange(1, samples_per_segment + 1) / (samples_per_segment + 1)
    worst = 0.0
    for x_left, x_right, y_left, y_right in zip(xs[:-1], xs[1:], ys[:-1], ys[1:]):
        for t in fractions:
            x = x_left + t * (x_right - x_left)
            approximation = y_left + t * (y_right - y_left)
            worst = max(worst, abs(f(x) - approximation))
    logger.debug("Maximum observed interpolation error over %d segments: %.3e", len(xs) - 1, worst)
    return float(worst)
