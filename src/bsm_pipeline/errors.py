"""
Error taxonomy for the pricing pipeline.

Every error raised by the package derives from ``PricingError`` so callers
can catch the family at once. Nothing here is retried or recovered: each
failure ends the current ``Pipeline.run`` and is handed back unchanged.
"""

from typing import Iterable


class PricingError(Exception):
    """Base class for all pipeline errors."""


class InvalidParameters(PricingError, ValueError):
    """
    Option inputs outside the Black-Scholes domain.

    Raised when strike, time to expiry, volatility or the underlying price
    is non-positive or not finite.

    Attributes:
        fields: Names of the offending inputs, in check order.
    """

    def __init__(self, fields: Iterable[str], message: str = ""):
        self.fields = tuple(fields)
        if not message:
            message = "Invalid option inputs: " + ", ".join(self.fields)
        super().__init__(message)


class DataUnavailable(PricingError):
    """A source could not supply option parameters."""


class SinkWriteFailed(PricingError):
    """A sink could not accept a result or signal the end of a run."""
