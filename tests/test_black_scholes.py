"""
Unit Tests for Black-Scholes Formulas
======================================

Validates the normal primitives, call/put price, delta and gamma,
put-call parity and boundary behaviour.

Author: Jose Orlando Bobadilla Fuentes | CQF
"""

import math
import pytest
import numpy as np
import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from bsm_pipeline.errors import InvalidParameters
from bsm_pipeline.models.normal import density, cumulative
from bsm_pipeline.models.black_scholes import (
    OptionParameters, PricingResult, evaluate_call, evaluate_put,
    validate_inputs, put_call_parity_check)
from bsm_pipeline.models.policy import PricingPolicy


@pytest.fixture
def atm_params():
    return OptionParameters(strike=100.0, time_to_expiry=1.0,
                            risk_free_rate=0.0, volatility=0.20)


@pytest.fixture
def reference_params():
    return OptionParameters(strike=65.0, time_to_expiry=0.25,
                            risk_free_rate=0.08, volatility=0.30)


class TestNormal:
    def test_density_at_zero(self):
        assert abs(density(0.0) - 1.0 / math.sqrt(2.0 * math.pi)) < 1e-12

    def test_cumulative_at_zero(self):
        assert abs(cumulative(0.0) - 0.5) < 1e-12

    def test_cumulative_known_quantile(self):
        assert abs(cumulative(1.959963984540054) - 0.975) < 1e-12

    def test_cumulative_monotone(self):
        x = np.linspace(-12.0, 12.0, 4001)
        assert np.all(np.diff(cumulative(x)) >= 0.0)

    def test_cumulative_symmetry(self):
        x = np.linspace(-10.0, 10.0, 2001)
        np.testing.assert_allclose(cumulative(x) + cumulative(-x), 1.0,
                                   atol=1e-9)

    def test_density_underflows(self):
        assert density(50.0) == 0.0
        assert density(-50.0) == 0.0

    def test_matches_scipy(self):
        from scipy.stats import norm
        x = np.linspace(-6.0, 6.0, 121)
        np.testing.assert_allclose(cumulative(x), norm.cdf(x), atol=1e-14)
        np.testing.assert_allclose(density(x), norm.pdf(x), rtol=1e-12)


class TestCall:
    def test_atm_sanity(self, atm_params):
        res = evaluate_call(atm_params, 100.0)
        assert isinstance(res, PricingResult)
        assert res.price > 0.0
        assert 0.0 < res.delta < 1.0
        assert res.gamma > 0.0

    def test_atm_known_value(self, atm_params):
        # r=0, ATM: C = S * (2N(v*sqrt(T)/2) - 1)
        expected = 100.0 * (2.0 * cumulative(0.1) - 1.0)
        assert abs(evaluate_call(atm_params, 100.0).price - expected) < 1e-10
        assert abs(evaluate_call(atm_params, 100.0).price - 7.9656) < 1e-4

    def test_reference_contract(self, reference_params):
        # Haug (2007), p. 3: call value 2.1334
        res = evaluate_call(reference_params, 60.0)
        assert res.price == pytest.approx(2.1333684449162007, rel=1e-12)
        assert res.delta == pytest.approx(0.37248279796197303, rel=1e-12)
        assert res.gamma == pytest.approx(0.042042755753785174, rel=1e-12)

    def test_delta_finite_diff(self, reference_params):
        h = 1e-4
        fd = (evaluate_call(reference_params, 60.0 + h).price
              - evaluate_call(reference_params, 60.0 - h).price) / (2 * h)
        assert abs(fd - evaluate_call(reference_params, 60.0).delta) < 1e-6

    def test_gamma_finite_diff(self, reference_params):
        h = 1e-3
        fd = (evaluate_call(reference_params, 60.0 + h).delta
              - evaluate_call(reference_params, 60.0 - h).delta) / (2 * h)
        assert abs(fd - evaluate_call(reference_params, 60.0).gamma) < 1e-6

    def test_low_vol_converges_to_intrinsic(self):
        S, K, r, T = 110.0, 100.0, 0.05, 1.0
        intrinsic = S - K * math.exp(-r * T)
        errors = []
        for v in (0.3, 0.1, 0.03, 1e-6):
            p = OptionParameters(K, T, r, v)
            errors.append(abs(evaluate_call(p, S).price - intrinsic))
        assert errors[-1] < 1e-9
        assert all(a >= b for a, b in zip(errors, errors[1:]))

    def test_deterministic(self, reference_params):
        assert (evaluate_call(reference_params, 60.0)
                == evaluate_call(reference_params, 60.0))


class TestPut:
    def test_atm_sanity(self, atm_params):
        res = evaluate_put(atm_params, 100.0)
        assert res.price > 0.0
        assert res.delta < 0.0
        assert res.gamma > 0.0

    def test_gamma_matches_call(self, atm_params, reference_params):
        for params, S in ((atm_params, 100.0), (reference_params, 60.0)):
            assert abs(evaluate_put(params, S).gamma
                       - evaluate_call(params, S).gamma) < 1e-9

    def test_delta_is_carry_times_shifted_tail(self, reference_params):
        # delta = carry * (N(-d1) - 1); carry is 1 when b = r, giving -N(d1)
        call = evaluate_call(reference_params, 60.0)
        put = evaluate_put(reference_params, 60.0)
        assert abs(put.delta + call.delta) < 1e-12

    def test_delta_formula(self, reference_params):
        S, K, T, r, v = 60.0, 65.0, 0.25, 0.08, 0.30
        d1 = (math.log(S / K) + (r + 0.5 * v * v) * T) / (v * math.sqrt(T))
        expected = cumulative(-d1) - 1.0
        assert abs(evaluate_put(reference_params, S).delta - expected) < 1e-12

    def test_reference_contract(self, reference_params):
        res = evaluate_put(reference_params, 60.0)
        assert res.price == pytest.approx(5.846282209855289, rel=1e-12)
        assert res.delta == pytest.approx(-0.37248279796197303, rel=1e-12)


class TestParity:
    @pytest.mark.parametrize("K,T,r,v,S", [
        (100.0, 1.0, 0.0, 0.20, 100.0),
        (65.0, 0.25, 0.08, 0.30, 60.0),
        (50.0, 2.0, 0.03, 0.45, 80.0),
        (120.0, 0.05, -0.01, 0.10, 95.0),
        (10.0, 5.0, 0.12, 0.80, 3.0),
    ])
    def test_put_call_parity(self, K, T, r, v, S):
        params = OptionParameters(K, T, r, v)
        diff = evaluate_call(params, S).price - evaluate_put(params, S).price
        assert abs(diff - (S - K * math.exp(-r * T))) < 1e-6

    def test_parity_check_report(self, reference_params):
        report = put_call_parity_check(reference_params, 60.0)
        assert report["parity_holds"]
        assert report["parity_error"] < 1e-10
        assert report["theoretical_C_minus_P"] == pytest.approx(
            60.0 - 65.0 * math.exp(-0.02))


class TestDomain:
    def test_raw_formulas_propagate_nan(self):
        bad = OptionParameters(strike=-65.0, time_to_expiry=0.25,
                               risk_free_rate=0.08, volatility=0.30)
        res = evaluate_call(bad, 60.0)
        assert math.isnan(res.price)
        assert math.isnan(res.delta)

    def test_zero_expiry_does_not_raise(self):
        p = OptionParameters(65.0, 0.0, 0.08, 0.30)
        res = evaluate_put(p, 60.0)
        assert not math.isfinite(res.gamma)

    def test_valid_inputs_pass(self, reference_params):
        validate_inputs(reference_params, 60.0)

    @pytest.mark.parametrize("field,value", [
        ("strike", 0.0),
        ("time_to_expiry", -1.0),
        ("volatility", 0.0),
        ("volatility", float("nan")),
    ])
    def test_invalid_parameter_rejected(self, reference_params, field, value):
        from dataclasses import replace
        params = replace(reference_params, **{field: value})
        with pytest.raises(InvalidParameters) as info:
            validate_inputs(params, 60.0)
        assert info.value.fields == (field,)

    def test_invalid_underlying_rejected(self, reference_params):
        with pytest.raises(InvalidParameters) as info:
            validate_inputs(reference_params, -60.0)
        assert info.value.fields == ("underlying",)

    def test_every_offending_field_reported(self):
        params = OptionParameters(0.0, 0.0, float("inf"), -0.2)
        with pytest.raises(InvalidParameters) as info:
            validate_inputs(params, 0.0)
        assert info.value.fields == ("strike", "time_to_expiry", "volatility",
                                     "underlying", "risk_free_rate")

    def test_invalid_parameters_is_value_error(self):
        with pytest.raises(ValueError):
            validate_inputs(OptionParameters(0.0, 1.0, 0.0, 0.2), 100.0)


class TestPolicy:
    def test_call_policy_dispatch(self, reference_params):
        assert (PricingPolicy.CALL.evaluate(reference_params, 60.0)
                == evaluate_call(reference_params, 60.0))

    def test_put_policy_dispatch(self, reference_params):
        assert (PricingPolicy.PUT.evaluate(reference_params, 60.0)
                == evaluate_put(reference_params, 60.0))

    def test_lookup_by_name(self):
        assert PricingPolicy("call") is PricingPolicy.CALL
        assert PricingPolicy("put") is PricingPolicy.PUT


if __name__ == "__main__":
    pytest.main([__file__, "-v", "--tb=short"])
