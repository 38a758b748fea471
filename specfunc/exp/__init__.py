"""
Экспоненциальное семейство: exp, exp_sgn, expm1, exprel, exprel_2, exprel_N.

Value-формы (*_e) возвращают SFResult; quick-формы возвращают float
и выдают SpecFuncWarning при сбое.
"""

# Elementary
from specfunc.exp.elementary import exp_e, exp_sgn_e, expm1_e

# Exprel low-order
from specfunc.exp.exprel import exprel_2_e, exprel_e

# Continued fraction
from specfunc.exp.continued_fraction import (
    CF_MAX_ITER_DEFAULT,
    CF_REL_TOL_DEFAULT,
    CFState,
    ContinuedFractionConfig,
    cf_initial_state,
    cf_partial_terms,
    cf_step,
    exprel_n_cf,
)

# Exprel N dispatcher
from specfunc.exp.exprel_n import (
    LARGE_X_FACTOR,
    NEG_X_FACTOR,
    OVERFLOW_MARGIN,
    ExprelRegime,
    exprel_n_e,
    select_regime,
)

# Quick forms
from specfunc.exp.quick import exp, exp_sgn, expm1, exprel, exprel_2, exprel_n

__all__ = [
    # Elementary
    "exp_e",
    "exp_sgn_e",
    "expm1_e",
    # Exprel low-order
    "exprel_e",
    "exprel_2_e",
    # Continued fraction — Constants
    "CF_MAX_ITER_DEFAULT",
    "CF_REL_TOL_DEFAULT",
    # Continued fraction — Types
    "CFState",
    "ContinuedFractionConfig",
    # Continued fraction — Functions
    "cf_initial_state",
    "cf_partial_terms",
    "cf_step",
    "exprel_n_cf",
    # Exprel N — Constants
    "LARGE_X_FACTOR",
    "NEG_X_FACTOR",
    "OVERFLOW_MARGIN",
    # Exprel N — Types
    "ExprelRegime",
    # Exprel N — Functions
    "exprel_n_e",
    "select_regime",
    # Quick forms
    "exp",
    "exp_sgn",
    "expm1",
    "exprel",
    "exprel_2",
    "exprel_n",
]
