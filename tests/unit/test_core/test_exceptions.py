"""Unit tests for the exception hierarchy."""

import logging

import pytest

from pyadaptstep.core.exceptions import CurvatureError, ScanError, ScanValidationError


class TestExceptions:
    """Test cases for custom exceptions."""

    def test_validation_error_hierarchy(self):
        """Test that validation errors are scan errors and value errors."""
        error = ScanValidationError("bad domain")
        assert isinstance(error, ScanError)
        assert isinstance(error, ValueError)
        assert str(error) == "bad domain"

    def test_curvature_error_attributes(self):
        """Test that curvature errors carry the offending probe."""
        error = CurvatureError(0.25, float('nan'))
        assert isinstance(error, ScanError)
        assert isinstance(error, ArithmeticError)
        assert error.x == 0.25
        assert "x=0.25" in str(error)
        assert "nan" in str(error)

    def test_curvature_error_custom_message(self):
        """Test that an explicit message replaces the template."""
        error = CurvatureError(1.0, float('inf'), "diverges")
        assert str(error) == "diverges"

    def test_errors_are_logged(self, caplog):
        """Test that raising a scan error logs it."""
        with caplog.at_level(logging.ERROR, logger="pyadaptstep.core.exceptions"):
            with pytest.raises(ScanError):
                raise ScanError("scan failed")
        assert "scan failed" in caplog.text
