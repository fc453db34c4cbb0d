import logging
from typing import Union

import sympy as sp

from pyadaptstep.algorithms.curvature import SymbolicCurvature, resolve_symbol
from pyadaptstep.core.exceptions import ScanValidationError

logger = logging.getLogger(__name__)


class SymbolicFunction:
    """
    A scalar function of one variable defined by a SymPy expression.

    The instance is callable as ``f(x) -> float`` and carries the matching exact
    curvature estimator in ``curvature``, so it can be passed to the scanner as
    both the function and its curvature capability.
    """

    def __init__(self, expression: Union[str, sp.Expr], variable: Union[str, sp.Symbol] = 'x'):
        name = variable.name if isinstance(variable, sp.Symbol) else str(variable)
        symbol = variable if isinstance(variable, sp.Symbol) else resolve_symbol(expression, name)
        try:
            if isinstance(expression, str):
                expr = sp.sympify(expression, locals={name: symbol})
            else:
                expr = sp.sympify(expression)
        except Exception as e:
            raise ScanValidationError(f"Failed to parse expression '{expression}': {e}") from e
        invalid_symbols = sorted(str(sym) for sym in expr.free_symbols if sym != symbol)
        if invalid_symbols:
            raise ScanValidationError(
                f"Invalid symbols {invalid_symbols} in expression '{expression}'. Only '{name}' is allowed.")
        self.expression = expr
        self.symbol = symbol
        self._evaluate = sp.lambdify(symbol, expr, modules='numpy')
        self.curvature = SymbolicCurvature(expr, symbol)
        logger.debug("Created symbolic function %s of %s", expr, symbol)

    def __call__(self, x: float) -> float:
        return float(self._evaluate(x))

    def __repr__(self):
        return f"SymbolicFunction({self.expression})"
