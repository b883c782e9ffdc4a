"""Trend classification and multi-timeframe resonance"""

from typing import Sequence

import structlog

from ..data.models import IndicatorCandle
from .models import ResonanceState, TrendClassification

logger = structlog.get_logger(__name__)


def classify_trend(candle: IndicatorCandle) -> TrendClassification:
    """
    Classify a candle's trend from its close vs EMA

    A close exactly at the EMA counts as BEARISH; only a strictly higher
    close is BULLISH.

    Args:
        candle: Indicator candle to classify

    Returns:
        NEUTRAL when the EMA is absent, otherwise BULLISH or BEARISH
    """
    if candle.ema is None:
        return TrendClassification.NEUTRAL

    if candle.close > candle.ema:
        return TrendClassification.BULLISH
    return TrendClassification.BEARISH


def compute_resonance(short_series: Sequence[IndicatorCandle],
                      medium_series: Sequence[IndicatorCandle],
                      long_series: Sequence[IndicatorCandle]) -> ResonanceState:
    """
    Compute trend resonance from the last candle of each timeframe

    Pure and idempotent: identical inputs always give an identical state.

    Args:
        short_series: Short timeframe indicator series
        medium_series: Medium timeframe indicator series
        long_series: Long timeframe indicator series

    Returns:
        ResonanceState; a neutral, non-resonant state if any series is empty
    """
    if not short_series or not medium_series or not long_series:
        return ResonanceState()

    return ResonanceState.from_trends(
        classify_trend(short_series[-1]),
        classify_trend(medium_series[-1]),
        classify_trend(long_series[-1]),
    )


class ResonanceDetector:
    """Resonance computation with logging of degraded inputs"""

    def __init__(self):
        self.logger = logger

    def detect(self, short_series: Sequence[IndicatorCandle],
               medium_series: Sequence[IndicatorCandle],
               long_series: Sequence[IndicatorCandle]) -> ResonanceState:
        """Compute resonance, logging when a timeframe has no data."""
        empty = [
            label for label, series in
            (("short", short_series), ("medium", medium_series), ("long", long_series))
            if not series
        ]
        if empty:
            self.logger.warning(
                "Resonance computed without data for some timeframes",
                empty_timeframes=empty
            )

        return compute_resonance(short_series, medium_series, long_series)
