"""
Curvature (second-derivative) estimators.

The scanner only needs a callable ``curvature(f, x) -> float`` returning an
estimate of f''(x). Two interchangeable strategies are provided:

- ``FiniteDifferenceCurvature``: central difference stencils, works with any
  black-box ``f``.
- ``SymbolicCurvature``: exact second derivative of a SymPy expression.
"""

import logging
from typing import Callable, Union

import numpy as np
import sympy as sp

from pyadaptstep.data.constants import ScanConstants

logger = logging.getLogger(__name__)

CurvatureFunction = Callable[[Callable[[float], float], float], float]

# Central second-derivative stencils: offsets (in units of the step) and weights
_STENCILS = {
    2: (np.array([-1.0, 0.0, 1.0]), np.array([1.0, -2.0, 1.0])),
    4: (np.array([-2.0, -1.0, 0.0, 1.0, 2.0]), np.array([-1.0, 16.0, -30.0, 16.0, -1.0]) / 12.0),
}


class FiniteDifferenceCurvature:
    """
    Estimate f''(x) with a central finite-difference stencil.

    Args:
        step: Absolute finite-difference step. If None, a step scaled to the
            magnitude of x is chosen: eps**(1/4) for order 2, eps**(1/6) for
            order 4, which balances truncation and round-off error.
        order: Accuracy order of the stencil, 2 (default) or 4.
    Raises:
        ValueError: If the order is not supported or the step is not a
            positive finite number.
    Notes:
        The stencil evaluates ``f`` at ``x + k*step`` for every offset k,
        including ``f(x)`` itself: 3 calls per estimate for order 2, 5 for
        order 4. Keep the step well below the scan step so that probes close
        to a domain boundary or a singularity do not reach across it.
    """

    def __init__(self, step: float = None, order: int = ScanConstants.DEFAULT_DIFFERENCE_ORDER):
        if order not in ScanConstants.SUPPORTED_DIFFERENCE_ORDERS:
            raise ValueError(f"order must be one of {ScanConstants.SUPPORTED_DIFFERENCE_ORDERS}, got {order}")
        if step is not None and not (np.isfinite(step) and step > 0):
            raise ValueError(f"step must be a positive finite number, got {step}")
        self.step = step
        self.order = order
        self._offsets, self._weights = _STENCILS[order]
        logger.debug("Created finite-difference curvature estimator: order=%d, step=%s", order, step)

    def _step_at(self, x: float) -> float:
        if self.step is not None:
            return self.step
        eps = np.finfo(float).eps
        exponent = 1.0 / (self.order + 2)
        return eps ** exponent * max(1.0, abs(x))

    def __call__(self, f: Callable[[float], float], x: float) -> float:
        h = self._step_at(x)
        values = np.array([f(x + k * h) for k in self._offsets], dtype=float)
        return float(np.dot(self._weights, values) / h ** 2)

    def __repr__(self):
        return f"FiniteDifferenceCurvature(step={self.step}, order={self.order})"


def resolve_symbol(expression: Union[str, sp.Expr], name: str) -> sp.Symbol:
    """Return the symbol called ``name`` in ``expression``, or a new real symbol."""
    if isinstance(expression, sp.Basic):
        for sym in expression.free_symbols:
            if sym.name == name:
                return sym
    # Real symbols keep derivatives of abs/sign free of re()/im() terms
    return sp.Symbol(name, real=True)


class SymbolicCurvature:
    """Exact second derivative of a SymPy expression, ignoring the numeric ``f``."""

    def __init__(self, expression: Union[str, sp.Expr], symbol: Union[str, sp.Symbol] = 'x'):
        if isinstance(symbol, str):
            symbol = resolve_symbol(expression, symbol)
        if isinstance(expression, str):
            expression = sp.sympify(expression, locals={symbol.name: symbol})
        self.symbol = symbol
        self.expression = sp.sympify(expression)
        # Probes never sit on a kink or jump, where the delta terms are supported
        self.second_derivative = sp.diff(self.expression, symbol, 2).replace(
            sp.DiracDelta, lambda *args: sp.S.Zero)
        self._evaluate = sp.lambdify(symbol, self.second_derivative, modules='numpy')
        logger.debug("Symbolic second derivative of %s: %s", self.expression, self.second_derivative)

    def __call__(self, f: Callable[[float], float], x: float) -> float:
        return float(self._evaluate(x))

    def __repr__(self):
        return f"SymbolicCurvature({self.second_derivative})"


def constant_curvature(value: float) -> CurvatureFunction:
    """Return a curvature capability that always reports ``value``."""
    value = float(value)

    def curvature(f, x):
        return value

    return curvature
