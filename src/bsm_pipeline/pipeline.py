"""
Source -> Transform -> Sink Pricing Pipeline
=============================================

A Pipeline owns three collaborators, all supplied at construction:

    source  : fetch() -> OptionParameters
    policy  : evaluate(params, S) -> PricingResult
    sink    : accept(result), finish()

Each ``run(S)`` walks IDLE -> FETCHED -> COMPLETED once. Nothing is kept
between runs except the collaborators themselves, so one Pipeline can be
reused for any number of underlying prices. Failures from any
collaborator propagate to the caller untouched; there are no retries.

Usage:
    >>> pricer = Pipeline(StaticSource(), ConsoleSink(), PricingPolicy.CALL)
    >>> pricer.run(60.0)
    (2.13337,0.372483,0.0420428)
    end

Author: Jose Orlando Bobadilla Fuentes | CQF
"""

import logging
from enum import Enum
from typing import Protocol, runtime_checkable

from bsm_pipeline.errors import InvalidParameters
from bsm_pipeline.models.black_scholes import (
    OptionParameters, PricingResult, validate_inputs)
from bsm_pipeline.utils import timeit

logger = logging.getLogger(__name__)


@runtime_checkable
class Source(Protocol):
    """Supplies the option parameters of one run."""

    def fetch(self) -> OptionParameters:
        """Return a complete parameter set or raise DataUnavailable."""


@runtime_checkable
class Sink(Protocol):
    """Consumes the result of one run."""

    def accept(self, result: PricingResult) -> None:
        """Take ownership of one result; may raise SinkWriteFailed."""

    def finish(self) -> None:
        """Signal that no further results follow for this run."""


@runtime_checkable
class Policy(Protocol):
    """Any pricing formula the Pipeline can apply."""

    def evaluate(self, params: OptionParameters, S: float) -> PricingResult:
        """Return price, delta and gamma for the underlying price S."""


class PipelineState(Enum):
    """Progress of the current run."""
    IDLE = "idle"
    FETCHED = "fetched"
    COMPLETED = "completed"


class Pipeline:
    """
    Prices one option per ``run`` by chaining source, policy and sink.

    Parameters:
        source: Provider of OptionParameters
        sink: Consumer of PricingResult
        policy: Formula applied to the fetched parameters
        validate: Reject out-of-domain inputs with InvalidParameters before
            pricing (default). When False the raw formulas run and NaN/Inf
            reach the sink.
    """

    def __init__(self, source: Source, sink: Sink, policy: Policy,
                 validate: bool = True):
        self.source = source
        self.sink = sink
        self.policy = policy
        self.validate = validate
        self._state = PipelineState.IDLE

    @property
    def state(self) -> PipelineState:
        """Last state reached by the most recent run."""
        return self._state

    def _enter(self, state: PipelineState) -> None:
        logger.debug("%s -> %s", self._state.name, state.name)
        self._state = state

    @timeit
    def run(self, S: float) -> PricingResult:
        """
        Price the source's option at underlying price S.

        Returns:
            The PricingResult handed to the sink.

        Raises:
            DataUnavailable: from the source
            InvalidParameters: when validation is on and inputs are invalid
            SinkWriteFailed: from the sink
        """
        self._state = PipelineState.IDLE

        params = self.source.fetch()
        self._enter(PipelineState.FETCHED)

        if self.validate:
            try:
                validate_inputs(params, S)
            except InvalidParameters as exc:
                logger.warning("Rejected run at S=%r: %s", S, exc)
                raise

        result = self.policy.evaluate(params, S)

        self.sink.accept(result)
        self._enter(PipelineState.COMPLETED)
        self.sink.finish()

        logger.debug("Run at S=%r priced %r", S, result)
        return result
