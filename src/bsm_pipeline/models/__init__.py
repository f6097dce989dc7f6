"""
Black-Scholes Models
====================
Normal distribution primitives, analytic call/put formulas and the
pricing policies that select between them.
"""

from bsm_pipeline.models.normal import density, cumulative
from bsm_pipeline.models.black_scholes import (
    OptionParameters, PricingResult, evaluate_call, evaluate_put,
    validate_inputs, put_call_parity_check,
)
from bsm_pipeline.models.policy import PricingPolicy

__all__ = [
    "density", "cumulative",
    "OptionParameters", "PricingResult", "evaluate_call", "evaluate_put",
    "validate_inputs", "put_call_parity_check",
    "PricingPolicy",
]
