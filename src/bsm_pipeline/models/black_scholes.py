"""
Black-Scholes Analytic Price, Delta and Gamma
==============================================

Closed-form valuation of European calls and puts on a single underlying.
The cost-of-carry b equals the risk-free rate r (no dividends), so the
carry factor exp((b - r) * T) is identically one; it is kept in the
formulas so a future carry model only has to change b.

Mathematical Framework:

    d1 = [ln(S/K) + (b + 0.5 * v^2) * T] / (v * sqrt(T))
    d2 = d1 - v * sqrt(T)

    Call = S * exp((b-r)T) * N(d1)  - K * exp(-rT) * N(d2)
    Put  = K * exp(-rT)    * N(-d2) - S * exp((b-r)T) * N(-d1)

    Delta_call = exp((b-r)T) * N(d1)
    Delta_put  = exp((b-r)T) * (N(-d1) - 1)
    Gamma      = n(d1) * exp((b-r)T) / (S * v * sqrt(T))   [calls and puts]

The evaluators are pure: no validation, no side effects. Inputs outside
the domain (K, T, v or S non-positive) yield NaN or Inf under IEEE-754
rules; ``validate_inputs`` is the explicit guard for callers that want a
named error instead.

Author: Jose Orlando Bobadilla Fuentes | CQF
"""

import math
import numpy as np
from dataclasses import dataclass
from typing import Tuple

from bsm_pipeline.errors import InvalidParameters
from bsm_pipeline.models.normal import cumulative, density


@dataclass(frozen=True)
class OptionParameters:
    """
    Contract and market inputs for one pricing run.

    Attributes:
        strike: Strike price K (K > 0)
        time_to_expiry: Time to expiration in years (T > 0)
        risk_free_rate: Annualized risk-free rate r (continuous compounding)
        volatility: Annualized volatility v (v > 0)

    Example:
        >>> params = OptionParameters(65.0, 0.25, 0.08, 0.30)
    """
    strike: float
    time_to_expiry: float
    risk_free_rate: float
    volatility: float


@dataclass(frozen=True)
class PricingResult:
    """Price and first/second spot sensitivities of one option."""
    price: float
    delta: float
    gamma: float

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.price, self.delta, self.gamma)


@dataclass(frozen=True)
class _Terms:
    d1: float
    d2: float
    std_dev: float
    carry: float
    discount: float


def _terms(params: OptionParameters, S: float) -> _Terms:
    """Shared d1/d2 and discounting terms of the call and put formulas."""
    K = np.float64(params.strike)
    T = np.float64(params.time_to_expiry)
    r = np.float64(params.risk_free_rate)
    v = np.float64(params.volatility)
    S = np.float64(S)
    b = r

    std_dev = v * np.sqrt(T)
    d1 = (np.log(S / K) + (b + 0.5 * v * v) * T) / std_dev
    d2 = d1 - std_dev
    return _Terms(
        d1=d1,
        d2=d2,
        std_dev=std_dev,
        carry=np.exp((b - r) * T),
        discount=np.exp(-r * T),
    )


def evaluate_call(params: OptionParameters, S: float) -> PricingResult:
    """
    Black-Scholes European call.

    Parameters:
        params: Strike, expiry, rate and volatility
        S: Underlying price

    Returns:
        PricingResult(price, delta, gamma)
    """
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        t = _terms(params, S)
        N_d1 = cumulative(t.d1)
        N_d2 = cumulative(t.d2)

        price = S * t.carry * N_d1 - params.strike * t.discount * N_d2
        delta = t.carry * N_d1
        gamma = density(t.d1) * t.carry / (np.float64(S) * t.std_dev)

    return PricingResult(float(price), float(delta), float(gamma))


def evaluate_put(params: OptionParameters, S: float) -> PricingResult:
    """
    Black-Scholes European put.

    Same d1/d2 as the call; gamma coincides with the call gamma.
    """
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        t = _terms(params, S)
        N_md1 = cumulative(-t.d1)
        N_md2 = cumulative(-t.d2)

        price = params.strike * t.discount * N_md2 - S * t.carry * N_md1
        delta = t.carry * (N_md1 - 1.0)
        gamma = density(t.d1) * t.carry / (np.float64(S) * t.std_dev)

    return PricingResult(float(price), float(delta), float(gamma))


def validate_inputs(params: OptionParameters, S: float) -> None:
    """
    Reject inputs outside the Black-Scholes domain.

    Raises:
        InvalidParameters: listing every non-positive or non-finite value
            among strike, time_to_expiry, volatility and the underlying,
            plus a non-finite risk_free_rate.
    """
    positive = (
        ("strike", params.strike),
        ("time_to_expiry", params.time_to_expiry),
        ("volatility", params.volatility),
        ("underlying", S),
    )
    bad = [(name, value) for name, value in positive
           if not (math.isfinite(value) and value > 0)]
    if not math.isfinite(params.risk_free_rate):
        bad.append(("risk_free_rate", params.risk_free_rate))

    if bad:
        detail = ", ".join(f"{name}={value!r}" for name, value in bad)
        raise InvalidParameters([name for name, _ in bad],
                                f"Invalid option inputs: {detail}")


def put_call_parity_check(params: OptionParameters, S: float) -> dict:
    """
    Verify put-call parity: C - P = S*exp((b-r)T) - K*exp(-rT).
    Fundamental no-arbitrage relationship.
    """
    call = evaluate_call(params, S).price
    put = evaluate_put(params, S).price
    T = params.time_to_expiry
    r = params.risk_free_rate
    b = r
    theoretical = S * np.exp((b - r) * T) - params.strike * np.exp(-r * T)
    actual = call - put
    return {
        "call_price": call, "put_price": put,
        "theoretical_C_minus_P": float(theoretical), "actual_C_minus_P": actual,
        "parity_error": float(abs(actual - theoretical)),
        "parity_holds": bool(abs(actual - theoretical) < 1e-10),
    }
