"""EMA (Exponential Moving Average) calculation"""

import math
from itertools import accumulate
from typing import Sequence

from ..data.models import Candle


def calculate_ema(candles: Sequence[Candle], period: int) -> list[float]:
    """
    Calculate a trailing EMA over candle closes

    The seed is the mean of the first min(period, len) valid closes and sits
    at index period-1. Afterwards:

        ema[i] = (close[i] - ema[i-1]) * k + ema[i-1],  k = 2 / (period + 1)

    A NaN close carries the previous EMA forward unchanged.

    Args:
        candles: Candles in chronological order
        period: EMA period (values below 1 are treated as 1)

    Returns:
        List the same length as candles; NaN marks indices without a value
    """
    n = len(candles)
    if n == 0:
        return []

    period = max(1, period)
    k = 2 / (period + 1)
    closes = [c.close for c in candles]

    warmup = [close for close in closes[:period] if not math.isnan(close)]
    if not warmup:
        return [math.nan] * n

    seed = sum(warmup) / len(warmup)

    def step(prev: float, close: float) -> float:
        if math.isnan(close):
            return prev
        return (close - prev) * k + prev

    smoothed = list(accumulate(closes[period:], step, initial=seed))

    # Shorter series keep only the warm-up prefix, so only len == period gets the seed
    return ([math.nan] * (period - 1) + smoothed)[:n]
