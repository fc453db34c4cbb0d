"""Constants used for YAML scan configuration parsing."""

# Scan description keys
NAME_KEY = "name"
FUNCTION_KEY = "function"
VARIABLE_KEY = "variable"
DOMAIN_KEY = "domain"
TOLERANCE_KEY = "tolerance"
SCAN_STEP_KEY = "scan_step"
SINGULARITIES_KEY = "singularities"

# Curvature keys
CURVATURE_KEY = "curvature"
METHOD_KEY = "method"
ORDER_KEY = "order"
STEP_KEY = "step"

# Curvature methods
SYMBOLIC_KEY = "symbolic"
FINITE_DIFFERENCE_KEY = "finite_difference"

# Defaults
DEFAULT_VARIABLE = "x"

# Automatically export all constants (those that don't start with underscore)
__all__ = [name for name in globals() if not name.startswith('_') and name.isupper()]
