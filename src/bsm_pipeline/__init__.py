"""
Black-Scholes Pricing Pipeline
==============================
Closed-form European option price, delta and gamma, delivered through a
Source -> Transform -> Sink pipeline with swappable pricing policies.

Author: Jose Orlando Bobadilla Fuentes | CQF
"""

from bsm_pipeline.errors import (
    PricingError, InvalidParameters, DataUnavailable, SinkWriteFailed,
)
from bsm_pipeline.models import (
    density, cumulative,
    OptionParameters, PricingResult, evaluate_call, evaluate_put,
    validate_inputs, put_call_parity_check, PricingPolicy,
)
from bsm_pipeline.pipeline import Pipeline, PipelineState, Source, Sink, Policy
from bsm_pipeline.collaborators import (
    StaticSource, QueueSource, ConsoleSink, FrameSink, REFERENCE_CONTRACT,
)

__version__ = "1.0.0"
__author__ = "Jose Orlando Bobadilla Fuentes"

__all__ = [
    "PricingError", "InvalidParameters", "DataUnavailable", "SinkWriteFailed",
    "density", "cumulative",
    "OptionParameters", "PricingResult", "evaluate_call", "evaluate_put",
    "validate_inputs", "put_call_parity_check", "PricingPolicy",
    "Pipeline", "PipelineState", "Source", "Sink", "Policy",
    "StaticSource", "QueueSource", "ConsoleSink", "FrameSink",
    "REFERENCE_CONTRACT",
]
