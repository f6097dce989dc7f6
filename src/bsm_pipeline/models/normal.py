"""
Standard Normal Distribution Primitives
========================================

Density n(x) and cumulative distribution N(x) of the standard normal law,
the two building blocks of every closed-form Black-Scholes expression.

The CDF is written through the error function,

    N(x) = 0.5 * (1 - erf(-x / sqrt(2)))

which stays accurate in both tails and keeps N(x) + N(-x) = 1 to machine
precision. Both functions accept scalars or NumPy arrays.

Author: Jose Orlando Bobadilla Fuentes | CQF
"""

import numpy as np
from scipy.special import erf
from typing import Union

ArrayLike = Union[float, np.ndarray]

INV_SQRT_2PI = 1.0 / np.sqrt(2.0 * np.pi)
SQRT_2 = np.sqrt(2.0)


def density(x: ArrayLike) -> ArrayLike:
    """
    Standard normal probability density.

        n(x) = exp(-x^2 / 2) / sqrt(2*pi)

    Underflows to 0 for large |x|; never raises for finite input.
    """
    return INV_SQRT_2PI * np.exp(-x * x * 0.5)


def cumulative(x: ArrayLike) -> ArrayLike:
    """Standard normal CDF via the complementary error function identity."""
    return 0.5 * (1.0 - erf(-x / SQRT_2))
