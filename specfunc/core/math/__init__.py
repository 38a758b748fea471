"""
Core math modules для specfunc

Машинные константы, границы режимов и вспомогательные специальные функции.
"""

# Numerical Safeguards
from specfunc.core.math.numerical_safeguards import (
    # Machine constants
    DBL_EPSILON,
    DBL_MAX,
    DBL_MIN,
    LOG_DBL_MAX,
    LOG_DBL_MIN,
    ROOT3_DBL_EPSILON,
    SQRT_DBL_MAX,
    # Regime thresholds
    SERIES_CUT,
    # Sign and validity
    is_nan,
    is_valid_float,
    sign,
    # Comparisons
    relative_difference,
)

# Gamma
from specfunc.core.math.gamma import (
    FACT_EXACT_MAX,
    lnfact_e,
    lngamma_e,
)

__all__ = [
    # Numerical Safeguards — Machine constants
    "DBL_EPSILON",
    "DBL_MAX",
    "DBL_MIN",
    "LOG_DBL_MAX",
    "LOG_DBL_MIN",
    "ROOT3_DBL_EPSILON",
    "SQRT_DBL_MAX",
    # Numerical Safeguards — Regime thresholds
    "SERIES_CUT",
    # Numerical Safeguards — Sign and validity
    "is_nan",
    "is_valid_float",
    "sign",
    # Numerical Safeguards — Comparisons
    "relative_difference",
    # Gamma
    "FACT_EXACT_MAX",
    "lnfact_e",
    "lngamma_e",
]
