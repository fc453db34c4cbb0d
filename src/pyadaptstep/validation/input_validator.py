"""Fail-fast validation of scan inputs."""

import logging
import math
import numpy as np
from typing import Sequence, Tuple

from pyadaptstep.core.exceptions import ScanValidationError
from pyadaptstep.data.constants import ErrorMessages

logger = logging.getLogger(__name__)


def _as_finite_float(value, name: str) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError) as e:
        raise ScanValidationError(f"{name} must be a real number, got {value!r}") from e
    if not math.isfinite(number):
        raise ScanValidationError(ErrorMessages.NON_FINITE_VALUE.format(name=name, value=value))
    return number


def validate_domain(domain: Sequence[float]) -> Tuple[float, float]:
    """Return the domain as a pair of floats, rejecting anything but a finite a < b."""
    try:
        a, b = domain
    except (TypeError, ValueError) as e:
        raise ScanValidationError(f"Domain must be a pair (a, b), got {domain!r}") from e
    a = _as_finite_float(a, "Domain lower bound")
    b = _as_finite_float(b, "Domain upper bound")
    if not a < b:
        raise ScanValidationError(ErrorMessages.INVALID_DOMAIN.format(a=a, b=b))
    logger.debug("Validated domain [%s, %s]", a, b)
    return a, b


def validate_tolerance(tol: float) -> float:
    tol = _as_finite_float(tol, "Tolerance")
    if tol <= 0:
        raise ScanValidationError(ErrorMessages.NON_POSITIVE_VALUE.format(name="Tolerance", value=tol))
    return tol


def validate_scan_step(scan_step: float, domain: Tuple[float, float] = None) -> float:
    """Validate the scan step; warns when it does not fit at least once in the domain."""
    scan_step = _as_finite_float(scan_step, "Scan step")
    if scan_step <= 0:
        raise ScanValidationError(ErrorMessages.NON_POSITIVE_VALUE.format(name="Scan step", value=scan_step))
    if domain is not None and scan_step >= domain[1] - domain[0]:
        logger.warning("Scan step %s is not smaller than the domain width %s; only the endpoints will be sampled",
                       scan_step, domain[1] - domain[0])
    return scan_step


def validate_singularities(singularities: Sequence[float], domain: Tuple[float, float]) -> Tuple[float, ...]:
    """
    Validate singular points against the domain.
    Args:
        singularities: Singular points in ascending order
        domain: Already validated (a, b) pair
    Returns:
        Tuple of the singular points as floats
    Raises:
        ScanValidationError: If a point is not finite, lies on or outside the domain
            boundary, or the points are not strictly ascending
    """
    a, b = domain
    if singularities is None:
        return ()
    points = tuple(_as_finite_float(s, "Singularity") for s in singularities)
    for s in points:
        if not a < s < b:
            raise ScanValidationError(ErrorMessages.SINGULARITY_OUTSIDE_DOMAIN.format(s=s, a=a, b=b))
    violations = np.flatnonzero(np.diff(points) <= 0)
    if violations.size:
        i = int(violations[0]) + 1
        raise ScanValidationError(
            f"Singularities must be strictly ascending without duplicates: "
            f"{points[i]} at index {i} follows {points[i - 1]}")
    logger.debug("Validated %d singularities: %s", len(points), points)
    return points
