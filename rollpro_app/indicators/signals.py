"""EMA crossover signals filtered by RSI momentum"""

import math
from typing import Optional, Sequence

from ..data.models import Candle, SignalType


def _missing(value: Optional[float]) -> bool:
    return value is None or math.isnan(value)


def detect_signal(candles: Sequence[Candle], ema: Sequence[Optional[float]],
                  rsi: Sequence[Optional[float]], index: int,
                  rsi_overbought: float = 70.0,
                  rsi_oversold: float = 30.0) -> Optional[SignalType]:
    """
    Detect a crossover event on a single candle

    BUY: close crosses above EMA (prev close <= prev EMA, close > EMA) while
    RSI is rising and below the overbought level.
    SELL: close crosses below EMA (prev close >= prev EMA, close < EMA) while
    RSI is falling and above the oversold level.

    Args:
        candles: Candles in chronological order
        ema: EMA values aligned with candles (NaN or None when absent)
        rsi: RSI values aligned with candles (NaN or None when absent)
        index: Candle index to evaluate
        rsi_overbought: BUY is rejected at or above this RSI
        rsi_oversold: SELL is rejected at or below this RSI

    Returns:
        SignalType.BUY, SignalType.SELL, or None
    """
    if index <= 0 or index >= len(candles):
        return None

    curr_ema, prev_ema = ema[index], ema[index - 1]
    curr_rsi, prev_rsi = rsi[index], rsi[index - 1]

    if any(_missing(v) for v in (curr_ema, prev_ema, curr_rsi, prev_rsi)):
        return None

    prev_close = candles[index - 1].close
    close = candles[index].close

    if prev_close <= prev_ema and close > curr_ema:
        if curr_rsi > prev_rsi and curr_rsi < rsi_overbought:
            return SignalType.BUY
    elif prev_close >= prev_ema and close < curr_ema:
        if curr_rsi < prev_rsi and curr_rsi > rsi_oversold:
            return SignalType.SELL

    return None
