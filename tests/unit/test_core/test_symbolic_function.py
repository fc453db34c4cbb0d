"""Unit tests for SymbolicFunction."""

import numpy as np
import pytest
import sympy as sp

from pyadaptstep.core.exceptions import ScanValidationError
from pyadaptstep.core.symbolic_function import SymbolicFunction


class TestSymbolicFunction:
    """Test cases for SymbolicFunction."""

    def test_evaluate_string_expression(self):
        """Test evaluation of a parsed expression."""
        f = SymbolicFunction("sin(x) + x**2")
        assert f(0.5) == pytest.approx(np.sin(0.5) + 0.25)
        assert isinstance(f(0.5), float)

    def test_curvature_matches_expression(self):
        """Test the attached exact curvature."""
        f = SymbolicFunction("sin(x) + x**2")
        assert f.curvature(f, 0.5) == pytest.approx(-np.sin(0.5) + 2.0)

    def test_sympy_expression(self):
        """Test construction from a SymPy expression."""
        t = sp.Symbol('t')
        f = SymbolicFunction(sp.exp(t), t)
        assert f(1.0) == pytest.approx(np.e)
        assert f.curvature(f, 1.0) == pytest.approx(np.e)

    def test_custom_variable_name(self):
        """Test an expression in a variable other than x."""
        f = SymbolicFunction("u**3", variable='u')
        assert f(2.0) == 8.0
        assert f.curvature(f, 2.0) == 12.0

    def test_abs_expression(self):
        """Test an expression with a kink."""
        f = SymbolicFunction("abs(x)")
        assert f(-2.0) == 2.0
        assert f.curvature(f, 0.3) == 0.0

    def test_invalid_symbols(self):
        """Test that extra free symbols are rejected."""
        with pytest.raises(ScanValidationError, match="Invalid symbols"):
            SymbolicFunction("x + y")

    def test_unparseable_expression(self):
        """Test that syntax errors are reported as validation errors."""
        with pytest.raises(ScanValidationError, match="Failed to parse"):
            SymbolicFunction("x +* (")
