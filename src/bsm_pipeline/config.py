"""
config.py
---------
Centralised configuration for the pricing demo and its logging.

Environment variables are read when a config object is built, not at
import. Nothing here reaches the pricing formulas or the Pipeline: the
policy, the source and the underlying price are always passed in
explicitly.
"""

import os
from dataclasses import dataclass, field
from typing import Optional

from bsm_pipeline.models.black_scholes import OptionParameters


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


@dataclass
class LoggingConfig:
    """Logger level and optional log file directory."""
    level: str             = field(
        default_factory=lambda: os.getenv("BSM_LOG_LEVEL", "INFO"))
    log_dir: Optional[str] = field(
        default_factory=lambda: os.getenv("BSM_LOG_DIR") or None)


@dataclass
class DemoConfig:
    """Reference contract priced by ``main.py`` (Haug's textbook example)."""
    underlying: float      = field(
        default_factory=lambda: _env_float("BSM_UNDERLYING", 60.0))
    strike: float          = 65.0
    time_to_expiry: float  = 0.25     # years
    risk_free_rate: float  = 0.08
    volatility: float      = 0.30

    def option_parameters(self) -> OptionParameters:
        return OptionParameters(
            strike=self.strike,
            time_to_expiry=self.time_to_expiry,
            risk_free_rate=self.risk_free_rate,
            volatility=self.volatility,
        )


@dataclass
class AppConfig:
    """Master configuration aggregating all sub-configs."""
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    demo: DemoConfig       = field(default_factory=DemoConfig)
