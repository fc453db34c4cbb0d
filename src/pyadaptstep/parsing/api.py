import logging
from pathlib import Path
from typing import Tuple, Union

import numpy as np

from pyadaptstep.parsing.config.scan_yaml_parser import ScanYAMLParser

logger = logging.getLogger(__name__)


def sample_from_yaml(yaml_path: Union[str, Path]) -> Tuple[np.ndarray, np.ndarray]:
    """
    Compute interpolation points for the scan described in a YAML configuration file.

    This function serves as the main entry point for configuration-driven scans.
    Args:
        yaml_path: Path to the YAML configuration file
    Returns:
        (xs, ys): Interpolation nodes and function values
    Examples:
        # abs_kink.yaml
        # function: abs(x)
        # domain: [-1.0, 1.0]
        # tolerance: 1.0e-2
        # singularities: [0.0]
        xs, ys = sample_from_yaml('abs_kink.yaml')
    """
    logger.info("Sampling function from: %s", yaml_path)
    try:
        parser = ScanYAMLParser(yaml_path)
        xs, ys = parser.run()
        logger.info("Successfully sampled '%s' with %d points", parser.name, len(xs))
        return xs, ys
    except Exception as e:
        logger.error("Failed to sample function from %s: %s", yaml_path, e, exc_info=True)
        raise


def validate_yaml_file(yaml_path: Union[str, Path]) -> bool:
    """
    Validate a YAML file without running the scan.
    Args:
        yaml_path: Path to the YAML configuration file to validate
    Returns:
        True if the file is valid
    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the YAML content is invalid
    """
    logger.info("Validating YAML file: %s", yaml_path)
    try:
        _ = ScanYAMLParser(yaml_path)
        logger.info("YAML validation successful for: %s", yaml_path)
        return True
    except FileNotFoundError as e:
        logger.error("YAML file not found: %s", yaml_path)
        raise FileNotFoundError(f"YAML file not found: {yaml_path}") from e
    except ValueError as e:
        logger.error("YAML validation failed for %s: %s", yaml_path, e)
        raise ValueError(f"YAML validation failed: {str(e)}") from e
    except Exception as e:
        logger.error("Unexpected error validating YAML %s: %s", yaml_path, e, exc_info=True)
        raise ValueError(f"Unexpected error validating YAML: {str(e)}") from e


def get_scan_info(yaml_path: Union[str, Path]) -> dict:
    """
    Get basic information about a scan configuration without running it.
    Args:
        yaml_path: Path to the YAML configuration file
    Returns:
        Dictionary with the parsed function, domain, tolerance, scan step,
        singularities, curvature method and iteration cap per sub-interval
    """
    try:
        return ScanYAMLParser(yaml_path).info()
    except Exception as e:
        logger.error("Failed to get scan info from %s: %s", yaml_path, e, exc_info=True)
        raise
