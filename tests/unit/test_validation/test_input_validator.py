"""Unit tests for scan input validation."""

import pytest

from pyadaptstep.core.exceptions import ScanValidationError
from pyadaptstep.validation.input_validator import (
    validate_domain, validate_scan_step, validate_singularities, validate_tolerance)


class TestValidateDomain:
    """Test cases for validate_domain."""

    def test_valid_domain(self):
        """Test that valid domains are returned as floats."""
        assert validate_domain((0, 2)) == (0.0, 2.0)
        assert validate_domain([-1.5, 1.5]) == (-1.5, 1.5)

    @pytest.mark.parametrize("domain", [(2.0, 1.0), (1.0, 1.0)])
    def test_reversed_or_empty_domain(self, domain):
        """Test that a >= b is rejected."""
        with pytest.raises(ScanValidationError, match="smaller than upper bound"):
            validate_domain(domain)

    @pytest.mark.parametrize("domain", [None, 1.0, (1.0,), ("a", 1.0), (0.0, float('inf'))])
    def test_malformed_domain(self, domain):
        """Test that malformed domains are rejected."""
        with pytest.raises(ScanValidationError):
            validate_domain(domain)

    def test_validation_error_is_value_error(self):
        """Test that validation errors can be caught as ValueError."""
        with pytest.raises(ValueError):
            validate_domain((1.0, 0.0))


class TestValidateScalars:
    """Test cases for tolerance and scan step validation."""

    def test_valid_tolerance(self):
        """Test that a positive tolerance is accepted."""
        assert validate_tolerance(1e-3) == 1e-3

    @pytest.mark.parametrize("tol", [0, -1.0, float('nan'), "small"])
    def test_invalid_tolerance(self, tol):
        """Test that non-positive or non-numeric tolerances are rejected."""
        with pytest.raises(ScanValidationError):
            validate_tolerance(tol)

    def test_valid_scan_step(self):
        """Test that a positive step is accepted."""
        assert validate_scan_step(0.01, (0.0, 1.0)) == 0.01

    @pytest.mark.parametrize("scan_step", [0.0, -0.01, float('inf')])
    def test_invalid_scan_step(self, scan_step):
        """Test that non-positive steps are rejected."""
        with pytest.raises(ScanValidationError):
            validate_scan_step(scan_step)

    def test_scan_step_wider_than_domain_warns(self, caplog):
        """Test the warning for a step that does not fit in the domain."""
        assert validate_scan_step(5.0, (0.0, 1.0)) == 5.0
        assert "only the endpoints will be sampled" in caplog.text


class TestValidateSingularities:
    """Test cases for validate_singularities."""

    def test_valid_singularities(self):
        """Test that interior ascending points are accepted."""
        assert validate_singularities([-0.5, 0, 0.5], (-1.0, 1.0)) == (-0.5, 0.0, 0.5)

    def test_none_and_empty(self):
        """Test that missing singularities give an empty tuple."""
        assert validate_singularities(None, (0.0, 1.0)) == ()
        assert validate_singularities([], (0.0, 1.0)) == ()

    @pytest.mark.parametrize("singularities", [[0.0], [1.0], [1.5], [-2.0, 0.5]])
    def test_on_or_outside_boundary(self, singularities):
        """Test that points on or outside the domain bounds are rejected."""
        with pytest.raises(ScanValidationError, match="strictly inside"):
            validate_singularities(singularities, (0.0, 1.0))

    @pytest.mark.parametrize("singularities", [[0.5, 0.5], [0.7, 0.3]])
    def test_not_strictly_ascending(self, singularities):
        """Test that duplicates and unsorted points are rejected."""
        with pytest.raises(ScanValidationError, match="strictly ascending"):
            validate_singularities(singularities, (0.0, 1.0))

    def test_violation_reports_position(self):
        """Test that the first out-of-order point is named with its index."""
        with pytest.raises(ScanValidationError, match="0.2 at index 2 follows 0.6"):
            validate_singularities([0.1, 0.6, 0.2, 0.9], (0.0, 1.0))

    @pytest.mark.parametrize("singularities", [[], [0.5]])
    def test_short_lists_are_ascending(self, singularities):
        """Test that empty and single-point lists pass the ordering check."""
        assert validate_singularities(singularities, (0.0, 1.0)) == tuple(singularities)
