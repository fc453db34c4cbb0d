"""Shared pytest fixtures for PyAdaptStep tests."""
import pytest
import numpy as np
from pathlib import Path
from ruamel.yaml import YAML

from pyadaptstep.algorithms.curvature import constant_curvature


class CountingFunction:
    """Wraps a function and records every point it is evaluated at."""

    def __init__(self, func):
        self.func = func
        self.calls = []

    def __call__(self, x):
        self.calls.append(x)
        return self.func(x)


class RecordingCurvature:
    """Wraps a curvature estimator and records every probe."""

    def __init__(self, curvature):
        self.curvature = curvature
        self.probes = []

    def __call__(self, f, x):
        self.probes.append(x)
        return self.curvature(f, x)


@pytest.fixture
def quadratic():
    """f(x) = x**2, f'' = 2 everywhere."""
    return lambda x: x * x


@pytest.fixture
def quadratic_curvature():
    """Exact curvature of x**2."""
    return constant_curvature(2.0)


@pytest.fixture
def counting_function():
    """Factory for call-counting function wrappers."""
    return CountingFunction


@pytest.fixture
def recording_curvature():
    """Factory for probe-recording curvature wrappers."""
    return RecordingCurvature


@pytest.fixture
def scans_dir():
    """Path to the bundled scan configurations."""
    return Path(__file__).parent.parent / "src" / "pyadaptstep" / "data" / "scans"


@pytest.fixture
def write_yaml(tmp_path):
    """Write a configuration dictionary to a YAML file and return its path."""
    def _write(config, name="scan.yaml"):
        path = tmp_path / name
        yaml = YAML()
        with open(path, 'w') as f:
            yaml.dump(config, f)
        return path
    return _write


@pytest.fixture
def sample_scan_config():
    """Minimal valid scan configuration."""
    return {
        'name': 'quadratic',
        'function': 'x**2',
        'domain': [0.0, 1.0],
        'tolerance': 1.0e-2,
        'scan_step': 0.001,
    }


@pytest.fixture
def sample_nodes():
    """Nodes of a small piecewise-linear function."""
    return np.array([0.0, 1.0, 3.0]), np.array([0.0, 2.0, 0.0])
