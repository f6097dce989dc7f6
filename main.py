"""
Black-Scholes Pricing Pipeline - Reference Run
===============================================

Demonstrates:
    1. Pricing a European call through a Source -> Policy -> Sink pipeline
    2. Swapping the policy to price the put without touching orchestration
    3. Put-call parity on the same contract

Reference contract: K=65, T=0.25, r=0.08, v=0.30, S=60.

Author: Jose Orlando Bobadilla Fuentes | CQF
"""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "src"))

from bsm_pipeline import (
    ConsoleSink, Pipeline, PricingPolicy, StaticSource, put_call_parity_check)
from bsm_pipeline.config import AppConfig
from bsm_pipeline.utils import get_logger


def main():
    cfg = AppConfig()
    logger = get_logger("bsm_pipeline", cfg.logging.log_dir, cfg.logging.level)

    params = cfg.demo.option_parameters()
    S = cfg.demo.underlying
    logger.info("Pricing K=%s T=%s r=%s v=%s at S=%s", params.strike,
                params.time_to_expiry, params.risk_free_rate,
                params.volatility, S)

    source = StaticSource(params)
    sink = ConsoleSink()

    call_pricer = Pipeline(source, sink, PricingPolicy.CALL)
    call_pricer.run(S)

    put_pricer = Pipeline(source, sink, PricingPolicy.PUT)
    put_pricer.run(S)

    parity = put_call_parity_check(params, S)
    logger.info("Put-call parity error %.2e (holds=%s)",
                parity["parity_error"], parity["parity_holds"])


if __name__ == "__main__":
    main()
