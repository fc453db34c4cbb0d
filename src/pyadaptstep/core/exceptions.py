"""Custom exceptions for pyadaptstep core functionality."""
import logging

from pyadaptstep.data.constants import ErrorMessages

logger = logging.getLogger(__name__)


class ScanError(Exception):
    """Base exception for all scan-related errors."""

    def __init__(self, message):
        super().__init__(message)
        logger.error("ScanError raised: %s", message)


class ScanValidationError(ScanError, ValueError):
    """Exception raised when scan inputs or configuration fail validation."""

    def __init__(self, message):
        super().__init__(message)
        logger.error("ScanValidationError raised: %s", message)


class CurvatureError(ScanError, ArithmeticError):
    """Exception raised when a curvature estimate is not a finite number."""

    def __init__(self, x: float, value: float, message: str = None):
        self.x = x
        self.value = value
        if message is None:
            message = ErrorMessages.NON_FINITE_CURVATURE.format(x=x, value=value)
        super().__init__(message)
        logger.error("CurvatureError raised at x=%s: %s", x, value)
