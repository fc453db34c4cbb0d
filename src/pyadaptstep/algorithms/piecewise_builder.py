import logging
from typing import Union

import numpy as np
import sympy as sp

from pyadaptstep.algorithms.interpolation import CONSTANT_KEY, EXTRAPOLATE_KEY, ensure_ascending_order

logger = logging.getLogger(__name__)


class PiecewiseBuilder:
    """Symbolic piecewise-linear interpolants built from scanned nodes."""

    @staticmethod
    def build_from_points(xs: np.ndarray, ys: np.ndarray, x: Union[str, sp.Symbol] = 'x',
                          lower_bound_type: str = CONSTANT_KEY,
                          upper_bound_type: str = CONSTANT_KEY) -> sp.Piecewise:
        """
        Create the piecewise-linear interpolant through (xs, ys).
        Args:
            xs: Interpolation nodes (ascending or descending)
            ys: Function values at the nodes
            x: Symbol (or its name) of the independent variable
            lower_bound_type: Behaviour below xs[0], 'constant' or 'extrapolate'
            upper_bound_type: Behaviour above xs[-1], 'constant' or 'extrapolate'
        Returns:
            sp.Piecewise: Linear interpolation piecewise function
        """
        if isinstance(x, str):
            x = sp.Symbol(x)
        if xs is None or ys is None:
            raise ValueError("Node arrays cannot be None")
        if len(xs) != len(ys):
            logger.error("Array length mismatch: xs=%d, ys=%d", len(xs), len(ys))
            raise ValueError(f"Node arrays must have same length, got {len(xs)} and {len(ys)}")
        if len(xs) < 2:
            raise ValueError(f"At least 2 nodes required for a piecewise interpolant, got {len(xs)}")
        for bound in (lower_bound_type, upper_bound_type):
            if bound not in (CONSTANT_KEY, EXTRAPOLATE_KEY):
                raise ValueError(f"Invalid boundary type '{bound}', must be '{CONSTANT_KEY}' or '{EXTRAPOLATE_KEY}'")
        xs, ys = ensure_ascending_order(np.asarray(xs, dtype=float), np.asarray(ys, dtype=float))
        logger.info("Building piecewise interpolant from %d nodes, bounds=(%s,%s)",
                    len(xs), lower_bound_type, upper_bound_type)
        conditions = []
        # Below the first node
        if lower_bound_type == CONSTANT_KEY:
            conditions.append((sp.Float(ys[0]), x < xs[0]))
        else:
            conditions.append((PiecewiseBuilder._segment(xs, ys, 0, x), x < xs[0]))
        for i in range(len(xs) - 1):
            condition = sp.And(x >= xs[i], x < xs[i + 1])
            conditions.append((PiecewiseBuilder._segment(xs, ys, i, x), condition))
        # At and above the last node
        if upper_bound_type == CONSTANT_KEY:
            conditions.append((sp.Float(ys[-1]), x >= xs[-1]))
        else:
            conditions.append((PiecewiseBuilder._segment(xs, ys, len(xs) - 2, x), x >= xs[-1]))
        logger.debug("Created piecewise function with %d conditions", len(conditions))
        return sp.Piecewise(*conditions)

    @staticmethod
    def _segment(xs: np.ndarray, ys: np.ndarray, i: int, x: sp.Symbol) -> sp.Expr:
        slope = (ys[i + 1] - ys[i]) / (xs[i + 1] - xs[i])
        return sp.Float(ys[i]) + sp.Float(slope) * (x - sp.Float(xs[i]))
