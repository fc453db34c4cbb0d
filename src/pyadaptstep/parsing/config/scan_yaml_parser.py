import logging
from difflib import get_close_matches
from pathlib import Path
from typing import Any, Dict, Tuple, Union

import numpy as np
from ruamel.yaml import YAML, constructor, scanner

from pyadaptstep.algorithms.curvature import CurvatureFunction, FiniteDifferenceCurvature
from pyadaptstep.algorithms.scanner import scan_interval, scan_with_singularities
from pyadaptstep.core.exceptions import ScanValidationError
from pyadaptstep.core.symbolic_function import SymbolicFunction
from pyadaptstep.data.constants import ScanConstants
from pyadaptstep.validation.input_validator import (
    validate_domain, validate_scan_step, validate_singularities, validate_tolerance)
from pyadaptstep.parsing.config.yaml_keys import NAME_KEY, FUNCTION_KEY, VARIABLE_KEY, DOMAIN_KEY, \
    TOLERANCE_KEY, SCAN_STEP_KEY, SINGULARITIES_KEY, CURVATURE_KEY, METHOD_KEY, ORDER_KEY, STEP_KEY, \
    SYMBOLIC_KEY, FINITE_DIFFERENCE_KEY, DEFAULT_VARIABLE

logger = logging.getLogger(__name__)


class YAMLFileParser:
    """Loads a YAML configuration file with duplicate keys rejected."""

    def __init__(self, config_path: Union[str, Path]) -> None:
        self.config_path = Path(config_path)
        self.config = self._load_config()
        logger.info("Successfully loaded configuration from: %s", self.config_path)

    def _load_config(self) -> Dict[str, Any]:
        yaml = YAML(typ='safe')
        yaml.allow_duplicate_keys = False
        try:
            logger.debug("Loading YAML file: %s", self.config_path)
            with open(self.config_path, 'r') as f:
                config = yaml.load(f)
            logger.debug("YAML file loaded successfully, found %d top-level keys", len(config) if config else 0)
            return config
        except FileNotFoundError as e:
            logger.error("YAML file not found: %s", self.config_path)
            raise FileNotFoundError(f"YAML file not found: {self.config_path}") from e
        except constructor.DuplicateKeyError as e:
            logger.error("Duplicate key found in YAML file %s: %s", self.config_path, e)
            raise constructor.DuplicateKeyError(f"Duplicate key in {self.config_path}: {str(e)}") from e
        except scanner.ScannerError as e:
            logger.error("YAML syntax error in file %s: %s", self.config_path, e)
            raise scanner.ScannerError(f"YAML syntax error in {self.config_path}: {str(e)}") from e
        except Exception as e:
            logger.error("Unexpected error parsing YAML file %s: %s", self.config_path, e, exc_info=True)
            raise ValueError(f"Error parsing {self.config_path}: {str(e)}") from e


class ScanYAMLParser(YAMLFileParser):
    """Parser for scan configuration files in YAML format."""

    VALID_KEYS = {NAME_KEY, FUNCTION_KEY, VARIABLE_KEY, DOMAIN_KEY, TOLERANCE_KEY,
                  SCAN_STEP_KEY, SINGULARITIES_KEY, CURVATURE_KEY}
    REQUIRED_KEYS = {FUNCTION_KEY, DOMAIN_KEY, TOLERANCE_KEY}
    VALID_CURVATURE_KEYS = {METHOD_KEY, ORDER_KEY, STEP_KEY}
    CURVATURE_METHODS = (SYMBOLIC_KEY, FINITE_DIFFERENCE_KEY)

    # --- Constructor ---
    def __init__(self, yaml_path: Union[str, Path]) -> None:
        super().__init__(yaml_path)
        self._validate_config()
        self.name = self.config.get(NAME_KEY, self.config_path.stem)
        self.domain = validate_domain(self.config[DOMAIN_KEY])
        self.tolerance = validate_tolerance(self.config[TOLERANCE_KEY])
        self.scan_step = self._parse_scan_step()
        self.singularities = validate_singularities(self.config.get(SINGULARITIES_KEY) or [], self.domain)
        self.function = SymbolicFunction(str(self.config[FUNCTION_KEY]),
                                         self.config.get(VARIABLE_KEY, DEFAULT_VARIABLE))
        self.curvature = self._build_curvature()
        logger.info("ScanYAMLParser initialized for '%s': f=%s on %s", self.name, self.function.expression, self.domain)

    # --- Public API ---
    def run(self) -> Tuple[np.ndarray, np.ndarray]:
        """Scan the configured function and return the interpolation nodes."""
        logger.info("Running scan '%s' from configuration: %s", self.name, self.config_path)
        if self.singularities:
            return scan_with_singularities(self.function, self.domain, self.singularities, self.tolerance,
                                           scan_step=self.scan_step, curvature=self.curvature)
        return scan_interval(self.function, self.domain, self.tolerance,
                             scan_step=self.scan_step, curvature=self.curvature)

    def info(self) -> Dict[str, Any]:
        """Summary of the configuration without running the scan."""
        curvature_config = self.config.get(CURVATURE_KEY) or {}
        return {
            'name': self.name,
            'function': str(self.function.expression),
            'variable': str(self.function.symbol),
            'domain': self.domain,
            'tolerance': self.tolerance,
            'scan_step': self.scan_step,
            'singularities': list(self.singularities),
            'curvature_method': curvature_config.get(METHOD_KEY, SYMBOLIC_KEY),
            'max_iterations': int(np.floor((self.domain[1] - self.domain[0]) / self.scan_step)),
        }

    # --- Validation Methods ---
    def _validate_config(self) -> None:
        """Validate the configuration structure and content."""
        logger.debug("Starting configuration validation")
        if not isinstance(self.config, dict):
            raise ScanValidationError("The YAML file must start with a dictionary/object structure with key-value "
                                      "pairs, not a list or scalar value")
        missing = sorted(self.REQUIRED_KEYS - set(self.config))
        if missing:
            raise ScanValidationError(f"Missing required field(s): {', '.join(missing)}")
        self._validate_keys(self.config, self.VALID_KEYS, "scan configuration")
        singularities = self.config.get(SINGULARITIES_KEY)
        if singularities is not None and not isinstance(singularities, list):
            raise ScanValidationError(f"'{SINGULARITIES_KEY}' must be a list, got {type(singularities).__name__}")
        curvature = self.config.get(CURVATURE_KEY)
        if curvature is not None:
            if not isinstance(curvature, dict):
                raise ScanValidationError(f"'{CURVATURE_KEY}' must be a dictionary, got {type(curvature).__name__}")
            self._validate_keys(curvature, self.VALID_CURVATURE_KEYS, f"'{CURVATURE_KEY}' section")
        logger.debug("Configuration validation completed successfully")

    @staticmethod
    def _validate_keys(section: Dict[str, Any], valid_keys: set, section_name: str) -> None:
        for key in section:
            if key not in valid_keys:
                suggestions = get_close_matches(str(key), sorted(valid_keys), n=1, cutoff=0.6)
                hint = f" Did you mean '{suggestions[0]}'?" if suggestions else ""
                raise ScanValidationError(f"Unknown key '{key}' in {section_name}.{hint}")

    def _parse_scan_step(self) -> float:
        scan_step = self.config.get(SCAN_STEP_KEY)
        if scan_step is None:
            a, b = self.domain
            return (b - a) / ScanConstants.DEFAULT_SCAN_DIVISIONS
        return validate_scan_step(scan_step, self.domain)

    def _build_curvature(self) -> CurvatureFunction:
        curvature_config = self.config.get(CURVATURE_KEY) or {}
        method = curvature_config.get(METHOD_KEY, SYMBOLIC_KEY)
        if method not in self.CURVATURE_METHODS:
            raise ScanValidationError(f"Invalid curvature method '{method}'. Must be one of {self.CURVATURE_METHODS}")
        if method == SYMBOLIC_KEY:
            extra = sorted({ORDER_KEY, STEP_KEY} & set(curvature_config))
            if extra:
                raise ScanValidationError(f"Keys {extra} only apply to the '{FINITE_DIFFERENCE_KEY}' method")
            logger.debug("Using exact curvature %s", self.function.curvature.second_derivative)
            return self.function.curvature
        try:
            return FiniteDifferenceCurvature(step=curvature_config.get(STEP_KEY),
                                             order=curvature_config.get(ORDER_KEY,
                                                                        ScanConstants.DEFAULT_DIFFERENCE_ORDER))
        except (TypeError, ValueError) as e:
            raise ScanValidationError(f"Invalid finite difference settings: {e}") from e
