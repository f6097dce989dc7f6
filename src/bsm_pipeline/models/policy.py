"""
Pricing Policies
================

The single dispatch point of the pipeline: a policy turns option
parameters and an underlying price into a PricingResult without the
Pipeline knowing which formula runs underneath.

Usage:
    >>> PricingPolicy.CALL.evaluate(params, 60.0)
    >>> PricingPolicy("put").evaluate(params, 60.0)

Author: Jose Orlando Bobadilla Fuentes | CQF
"""

from enum import Enum

from bsm_pipeline.models.black_scholes import (
    OptionParameters, PricingResult, evaluate_call, evaluate_put)


class PricingPolicy(Enum):
    """Closed set of Black-Scholes formulas a Pipeline can apply."""
    CALL = "call"
    PUT = "put"

    def evaluate(self, params: OptionParameters, S: float) -> PricingResult:
        return _FORMULAS[self](params, S)


_FORMULAS = {
    PricingPolicy.CALL: evaluate_call,
    PricingPolicy.PUT: evaluate_put,
}
