import logging
import math
from typing import Callable, List, Sequence, Tuple

import numpy as np

from pyadaptstep.algorithms.curvature import CurvatureFunction, FiniteDifferenceCurvature
from pyadaptstep.core.exceptions import CurvatureError, ScanValidationError
from pyadaptstep.data.constants import ScanConstants
from pyadaptstep.validation.input_validator import (
    validate_domain, validate_scan_step, validate_singularities, validate_tolerance)

logger = logging.getLogger(__name__)

PointList = Tuple[np.ndarray, np.ndarray]


def default_scan_step(domain: Sequence[float]) -> float:
    """Scan step dividing the domain into ScanConstants.DEFAULT_SCAN_DIVISIONS intervals."""
    a, b = domain
    return (b - a) / ScanConstants.DEFAULT_SCAN_DIVISIONS


def error_upper_bound(h: float, max_curvature: float) -> float:
    """Taylor-remainder bound of the linear interpolation error on a segment of width h."""
    return h ** 2 * max_curvature / ScanConstants.ERROR_BOUND_DIVISOR


def _check_callables(f: Callable, curvature: Callable) -> None:
    if not callable(f):
        raise ScanValidationError(f"Function to sample must be callable, got {type(f).__name__}")
    if not callable(curvature):
        raise ScanValidationError(f"Curvature estimator must be callable, got {type(curvature).__name__}")


def scan_interval(f: Callable[[float], float], domain: Sequence[float], tol: float,
                  scan_step: float = None, curvature: CurvatureFunction = None) -> PointList:
    """
    Compute the points needed to linearly interpolate ``f`` on ``domain`` within ``tol``.

    The domain is scanned from left to right in increments of ``scan_step``. A
    segment starting at the last accepted node keeps growing while the error
    bound h**2 * max|f''| / 8 stays below ``tol``, where max|f''| is the running
    maximum of the curvature seen at the probes of the segment. When the bound
    is reached, the segment start is stored as a node and the failing probe
    becomes the new segment start. The segment still open when the probe
    reaches b is closed by b itself: its start is not stored, so the last
    segment can span up to twice the admissible width.

    Args:
        f: Function to interpolate, f(x) -> float. It must have a continuous
            second derivative on the open interval (a, b).
        domain: Pair (a, b) with a < b.
        tol: Required upper bound of the interpolation error, tol > 0.
        scan_step: Minimum step used to scan the domain. Defaults to (b - a) / 100.
            Very small values produce long execution times.
        curvature: Curvature estimator, curvature(f, x) -> estimate of f''(x).
            Defaults to a central finite-difference estimator.
    Returns:
        (xs, ys): Arrays of nodes, xs strictly increasing from a to b and ys = f(xs).
    Raises:
        ScanValidationError: If the domain, tolerance, step or callables are invalid.
        CurvatureError: If the curvature estimate at a probe is not finite.
    Notes:
        The curvature is never evaluated at a or b. If the result contains just the
        endpoints, try decreasing ``scan_step``. The scanner evaluates ``f`` at most
        floor((b - a) / scan_step) + 2 times; a finite-difference curvature estimator
        adds its own stencil evaluations on top of that.
    """
    a, b = validate_domain(domain)
    tol = validate_tolerance(tol)
    if scan_step is None:
        scan_step = default_scan_step((a, b))
    scan_step = validate_scan_step(scan_step, (a, b))
    if curvature is None:
        curvature = FiniteDifferenceCurvature()
    _check_callables(f, curvature)
    logger.info("Scanning [%s, %s] with tol=%s, scan_step=%s", a, b, tol, scan_step)

    xs: List[float] = []
    ys: List[float] = []
    # Guards against float drift of the probe keeping it below b
    max_iter = math.floor((b - a) / scan_step)
    current_iter = 0
    f_evaluations = 0
    curvature_evaluations = 0
    peak_curvature = 0.0

    x0 = a
    y0 = f(x0)
    f_evaluations += 1
    x1 = x0 + scan_step
    max_curvature = ScanConstants.CURVATURE_SENTINEL

    # x1 < b keeps every curvature probe strictly inside the domain
    while x1 < b and current_iter < max_iter:
        y1 = f(x1)
        f_evaluations += 1
        h = x1 - x0
        estimate = curvature(f, x1)
        curvature_evaluations += 1
        if not np.isfinite(estimate):
            raise CurvatureError(x1, estimate)
        abs_curvature = abs(float(estimate))
        max_curvature = max(max_curvature, abs_curvature)
        peak_curvature = max(peak_curvature, abs_curvature)

        bound = error_upper_bound(h, max_curvature)
        if bound < tol:
            x1 += scan_step
        else:
            logger.debug("Error bound %.3e >= %.3e at x=%s, node accepted at x=%s", bound, tol, x1, x0)
            xs.append(x0)
            ys.append(y0)
            x0 = x1
            y0 = y1
            x1 = x0 + scan_step
            max_curvature = ScanConstants.CURVATURE_SENTINEL
        current_iter += 1

    if x1 < b:
        logger.debug("Iteration cap %d reached at x=%s before the end of the domain", max_iter, x1)

    # The pending anchor is dropped; b closes the last segment
    if not xs:
        xs.append(a)
        ys.append(y0)

    if xs[-1] < b:
        xs.append(b)
        ys.append(f(b))
        f_evaluations += 1

    logger.debug("Scan of [%s, %s] finished: %d iterations, %d function evaluations by the scanner "
                 "(excluding the curvature estimator), %d curvature evaluations",
                 a, b, current_iter, f_evaluations, curvature_evaluations)
    if len(xs) == ScanConstants.MIN_POINTS:
        if peak_curvature > 0:
            logger.warning("Only the endpoints of [%s, %s] were returned; "
                           "consider decreasing scan_step (%s)", a, b, scan_step)
        else:
            logger.info("No curvature detected on [%s, %s]; function treated as linear", a, b)
    logger.info("Scan of [%s, %s] produced %d points", a, b, len(xs))
    return np.asarray(xs, dtype=float), np.asarray(ys, dtype=float)


def scan_with_singularities(f: Callable[[float], float], domain: Sequence[float],
                            singularities: Sequence[float], tol: float,
                            scan_step: float = None, curvature: CurvatureFunction = None) -> PointList:
    """
    Compute interpolation points of ``f`` on ``domain`` treating ``singularities`` as segment bounds.

    A singularity is a point where ``f`` is not well-behaved, like abs(x) at x = 0, where
    the function is continuous but not differentiable. The domain is split at each
    singularity, ``scan_interval`` is applied on every sub-interval and the results are
    joined, dropping the point shared by consecutive sub-intervals.

    Args:
        f: Function to interpolate. It is evaluated at the singularities, so it must
            handle those points itself.
        domain: Pair (a, b) with a < b.
        singularities: Points strictly inside (a, b), in strictly ascending order.
        tol: Required upper bound of the interpolation error.
        scan_step: Scan step shared by every sub-interval. Defaults to (b - a) / 100
            computed on the whole domain.
        curvature: Curvature estimator, see ``scan_interval``.
    Returns:
        (xs, ys): Arrays of nodes spanning the whole domain.
    Notes:
        For piecewise functions with jumps it is usually safer to interpolate each
        piece separately; the joined result does not record where a jump happens.
    """
    a, b = validate_domain(domain)
    singular_points = validate_singularities(singularities, (a, b))
    if scan_step is None:
        scan_step = default_scan_step((a, b))
    bounds = [a, *singular_points, b]
    logger.info("Scanning [%s, %s] split into %d sub-intervals at %s",
                a, b, len(bounds) - 1, list(singular_points))

    xs_parts = []
    ys_parts = []
    for new_a, new_b in zip(bounds[:-1], bounds[1:]):
        sub_xs, sub_ys = scan_interval(f, (new_a, new_b), tol, scan_step=scan_step, curvature=curvature)
        # new_a of this sub-interval is new_b of the previous one
        if xs_parts:
            sub_xs = sub_xs[1:]
            sub_ys = sub_ys[1:]
        xs_parts.append(sub_xs)
        ys_parts.append(sub_ys)

    xs = np.concatenate(xs_parts)
    ys = np.concatenate(ys_parts)
    logger.info("Scan with %d singularities produced %d points", len(singular_points), len(xs))
    return xs, ys
