"""RSI (Relative Strength Index) calculation with Wilder smoothing"""

import math
from itertools import accumulate
from typing import Sequence

from ..data.models import Candle


def _rsi_from_averages(avg_gain: float, avg_loss: float) -> float:
    """Steady-state RSI: a zero average loss pins RSI to 100."""
    if avg_loss == 0:
        return 100.0
    rs = avg_gain / avg_loss
    return 100 - (100 / (1 + rs))


def calculate_rsi(candles: Sequence[Candle], period: int = 14) -> list[float]:
    """
    Calculate RSI over candle closes

    RSI = 100 - (100 / (1 + RS)),  RS = avg_gain / avg_loss

    The seed averages are the simple mean of the first `period` changes and
    produce the value at index `period`. Later values use Wilder smoothing:

        avg = (avg * (period - 1) + current) / period

    The seed treats avg_loss == 0 as RS = 100 (RSI ~ 99.01), while the
    smoothed values treat it as RSI = 100 exactly.

    Args:
        candles: Candles in chronological order
        period: RSI period (default 14, values below 1 are treated as 1)

    Returns:
        List the same length as candles; NaN marks indices without a value
    """
    n = len(candles)
    if n == 0:
        return []

    period = max(1, period)
    changes = [candles[i].close - candles[i - 1].close for i in range(1, n)]
    gains = [change if change > 0 else 0.0 for change in changes]
    losses = [abs(change) if change < 0 else 0.0 for change in changes]

    if len(changes) < period:
        return [math.nan] * n

    avg_gain = sum(gains[:period]) / period
    avg_loss = sum(losses[:period]) / period

    rs = 100 if avg_loss == 0 else avg_gain / avg_loss
    seed_rsi = 100 - (100 / (1 + rs))

    def smooth(prev: tuple[float, float], move: tuple[float, float]) -> tuple[float, float]:
        prev_gain, prev_loss = prev
        gain, loss = move
        return (
            (prev_gain * (period - 1) + gain) / period,
            (prev_loss * (period - 1) + loss) / period,
        )

    averages = accumulate(
        zip(gains[period:], losses[period:]),
        smooth,
        initial=(avg_gain, avg_loss),
    )
    next(averages)  # the seed pair is reported via seed_rsi

    smoothed = [_rsi_from_averages(gain, loss) for gain, loss in averages]

    return [math.nan] * period + [seed_rsi] + smoothed
