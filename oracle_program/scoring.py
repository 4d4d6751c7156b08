# oracle_program/scoring.py
"""
Dynamic loan-to-value (LTV) heuristic.

Base LTV of 70%, adjusted by three market signals:
  - Volume:     higher 24h volume raises LTV (up to +5 points)
  - Volatility: a 24h move lowers LTV; downside moves count double
                (up to -10 points), upside moves up to -5 points
  - Trend:      a positive 24h move adds a small bonus (up to +3 points)

The final score is rounded to a whole percentage and clamped to
[LTV_MIN, LTV_MAX] (50-80 by default).
"""

import math
from dataclasses import dataclass

from oracle_program.codec import round_half_away
from oracle_program.config import LTV_MAX, LTV_MIN
from oracle_program.errors import DecodeError
from oracle_program.models import MarketQuote

BASE_LTV = 0.70
VOLUME_SCALE = 1_000_000.0
MAX_VOLUME_IMPACT = 0.05
MAX_DOWNSIDE_IMPACT = 0.10
MAX_UPSIDE_IMPACT = 0.05
MAX_TREND_IMPACT = 0.03


@dataclass(frozen=True)
class LtvBreakdown:
    base: float
    volume_impact: float
    volatility_impact: float
    trend_impact: float
    score: int

    def components(self):
        """Component contributions in percentage points."""
        return {
            "base": self.base * 100,
            "volume": self.volume_impact * 100,
            "volatility": self.volatility_impact * 100,
            "trend": self.trend_impact * 100,
        }


def volume_impact(quote: MarketQuote) -> float:
    return min(quote.volume_24h / (quote.price * VOLUME_SCALE), MAX_VOLUME_IMPACT)


def volatility_impact(quote: MarketQuote) -> float:
    change = quote.percent_change_24h
    if change < 0:
        return min(abs(change) / 50.0, MAX_DOWNSIDE_IMPACT)
    return min(change / 100.0, MAX_UPSIDE_IMPACT)


def trend_impact(quote: MarketQuote) -> float:
    if quote.percent_change_24h > 0:
        return min(quote.percent_change_24h / 100.0, MAX_TREND_IMPACT)
    return 0.0


def compute_ltv(quote: MarketQuote, ltv_min: int = LTV_MIN, ltv_max: int = LTV_MAX) -> LtvBreakdown:
    """Score a quote. Raises DecodeError on a quote the formula cannot use."""
    if not 0 <= ltv_min <= ltv_max <= 100:
        raise ValueError(f"invalid LTV bounds [{ltv_min}, {ltv_max}]")
    for name in ("price", "percent_change_24h", "volume_24h"):
        if not math.isfinite(getattr(quote, name)):
            raise DecodeError(f"quote field {name} is not finite")
    if quote.price <= 0:
        raise DecodeError(f"quote price must be positive, got {quote.price}")
    if quote.volume_24h < 0:
        raise DecodeError(f"quote volume must not be negative, got {quote.volume_24h}")

    vol = volume_impact(quote)
    volat = volatility_impact(quote)
    trend = trend_impact(quote)
    ltv = BASE_LTV + vol - volat + trend

    score = min(max(round_half_away(ltv * 100), ltv_min), ltv_max)
    return LtvBreakdown(
        base=BASE_LTV,
        volume_impact=vol,
        volatility_impact=volat,
        trend_impact=trend,
        score=score,
    )
