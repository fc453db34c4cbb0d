"""Demonstration script for adaptive sampling of scalar functions."""
import logging
from pathlib import Path

import numpy as np

from pyadaptstep import (SymbolicFunction, max_interpolation_error, sample_from_yaml, scan_interval,
                         scan_with_singularities)


def setup_logging():
    """Setup logging configuration."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s -> %(message)s"
    )


def demonstrate_sampling():
    """Sample a smooth function, a kinked function and the bundled YAML scans."""
    setup_logging()
    print(f"\n{'=' * 80}")
    xs, ys = scan_interval(np.sin, (0.0, 2 * np.pi), 1e-3)
    print(f"sin(x) on [0, 2*pi]: {len(xs)} points, max error {max_interpolation_error(np.sin, xs, ys):.2e}")

    kink = SymbolicFunction("abs(x) + x**2")
    xs, ys = scan_with_singularities(kink, (-1.0, 1.0), [0.0], 1e-3, curvature=kink.curvature)
    print(f"{kink.expression} on [-1, 1]: {len(xs)} points, max error {max_interpolation_error(kink, xs, ys):.2e}")

    scans_dir = Path(__file__).parent.parent / "src" / "pyadaptstep" / "data" / "scans"
    for yaml_path in sorted(scans_dir.glob("*.yaml")):
        xs, ys = sample_from_yaml(yaml_path)
        print(f"{yaml_path.name}: {len(xs)} points in [{xs[0]}, {xs[-1]}]")
    print(f"{'=' * 80}\n")


if __name__ == "__main__":
    demonstrate_sampling()
