"""Unit tests for interpolant evaluation helpers."""

import numpy as np
import pytest

from pyadaptstep.algorithms.interpolation import (
    ensure_ascending_order, interpolate_value, max_interpolation_error)


class TestInterpolateValue:
    """Test cases for interpolate_value."""

    def test_within_range(self, sample_nodes):
        """Test linear interpolation between nodes."""
        xs, ys = sample_nodes
        assert interpolate_value(0.5, xs, ys) == 1.0
        assert interpolate_value(2.0, xs, ys) == 1.0

    def test_at_nodes(self, sample_nodes):
        """Test that the interpolant passes through the nodes."""
        xs, ys = sample_nodes
        for x, y in zip(xs, ys):
            assert interpolate_value(x, xs, ys) == y

    def test_constant_bounds(self, sample_nodes):
        """Test constant extension outside the node range."""
        xs, ys = sample_nodes
        assert interpolate_value(-1.0, xs, ys, 'constant', 'constant') == 0.0
        assert interpolate_value(4.0, xs, ys, 'constant', 'constant') == 0.0

    def test_extrapolated_bounds(self, sample_nodes):
        """Test linear continuation of the end segments."""
        xs, ys = sample_nodes
        assert interpolate_value(-1.0, xs, ys, 'extrapolate', 'constant') == pytest.approx(-2.0)
        assert interpolate_value(4.0, xs, ys, 'constant', 'extrapolate') == pytest.approx(-1.0)

    def test_single_point(self):
        """Test that a single node gives a constant."""
        assert interpolate_value(10.0, np.array([1.0]), np.array([3.0])) == 3.0

    def test_equal_boundary_points(self):
        """Test extrapolation with duplicate end nodes."""
        with pytest.raises(ValueError, match="Cannot extrapolate.*equal"):
            interpolate_value(-1.0, np.array([0.0, 0.0, 1.0]), np.array([1.0, 1.0, 2.0]),
                              'extrapolate', 'constant')

    def test_invalid_inputs(self, sample_nodes):
        """Test input validation."""
        xs, ys = sample_nodes
        with pytest.raises(ValueError, match="finite"):
            interpolate_value(float('nan'), xs, ys)
        with pytest.raises(ValueError, match="empty"):
            interpolate_value(0.0, np.array([]), np.array([]))
        with pytest.raises(ValueError, match="mismatch"):
            interpolate_value(0.0, xs, ys[:2])


class TestEnsureAscendingOrder:
    """Test cases for ensure_ascending_order."""

    def test_ascending_unchanged(self, sample_nodes):
        """Test that ascending arrays are returned as is."""
        xs, ys = sample_nodes
        out_xs, out_ys = ensure_ascending_order(xs, ys)
        assert out_xs is xs
        assert out_ys is ys

    def test_descending_flipped(self):
        """Test that descending arrays are flipped together."""
        out_xs, out_ys = ensure_ascending_order(np.array([3.0, 1.0, 0.0]), np.array([0.0, 2.0, 0.5]))
        assert out_xs.tolist() == [0.0, 1.0, 3.0]
        assert out_ys.tolist() == [0.5, 2.0, 0.0]

    def test_unordered_rejected(self):
        """Test that mixed order is rejected."""
        with pytest.raises(ValueError, match="not strictly ascending"):
            ensure_ascending_order(np.array([0.0, 2.0, 1.0]), np.array([0.0, 1.0, 2.0]))


class TestMaxInterpolationError:
    """Test cases for max_interpolation_error."""

    def test_linear_function_has_no_error(self):
        """Test that a linear function is reproduced exactly."""
        xs = np.array([0.0, 1.0])
        ys = 2.0 * xs + 1.0
        assert max_interpolation_error(lambda x: 2.0 * x + 1.0, xs, ys) == pytest.approx(0.0, abs=1e-15)

    def test_quadratic_error(self):
        """Test the error of a single chord of x**2, largest at the midpoint."""
        xs = np.array([0.0, 1.0])
        ys = xs ** 2
        error = max_interpolation_error(lambda x: x * x, xs, ys, samples_per_segment=1)
        assert error == pytest.approx(0.25)

    def test_invalid_samples(self):
        """Test that at least one sample per segment is required."""
        with pytest.raises(ValueError, match="samples_per_segment"):
            max_interpolation_error(abs, [0.0, 1.0], [0.0, 1.0], samples_per_segment=0)
