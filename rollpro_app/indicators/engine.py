"""Indicator engine composing EMA, RSI and crossover signals per candle"""

from typing import Optional, Sequence

from ..config.defaults import IndicatorParams, SignalParams
from ..data.models import Candle, IndicatorCandle
from ..errors import InsufficientDataError
from .ema import calculate_ema
from .rsi import calculate_rsi
from .signals import detect_signal


def process_candles(candles: Sequence[Candle], ema_period: int = 20,
                    rsi_period: int = 14, rsi_overbought: float = 70.0,
                    rsi_oversold: float = 30.0) -> list[IndicatorCandle]:
    """
    Attach EMA, RSI and crossover signals to every candle

    Pure function of its input: source candles are copied, never mutated.

    Args:
        candles: Candles in chronological order
        ema_period: EMA period (default 20)
        rsi_period: RSI period (default 14)
        rsi_overbought: BUY filter level
        rsi_oversold: SELL filter level

    Returns:
        IndicatorCandle list aligned 1:1 with candles
    """
    if not candles:
        return []

    ema = calculate_ema(candles, ema_period)
    rsi = calculate_rsi(candles, rsi_period)

    return [
        IndicatorCandle.from_candle(
            candle,
            ema=ema[i],
            rsi=rsi[i],
            signal=detect_signal(candles, ema, rsi, i,
                                 rsi_overbought=rsi_overbought,
                                 rsi_oversold=rsi_oversold),
        )
        for i, candle in enumerate(candles)
    ]


class IndicatorEngine:
    """Stateless indicator pipeline bound to configured periods"""

    def __init__(self, indicators: Optional[IndicatorParams] = None,
                 signals: Optional[SignalParams] = None):
        self.indicators = indicators or IndicatorParams()
        self.signals = signals or SignalParams()

    def process(self, candles: Sequence[Candle]) -> list[IndicatorCandle]:
        """Compute the indicator series for one symbol/timeframe."""
        return process_candles(
            candles,
            ema_period=self.indicators.ema_period,
            rsi_period=self.indicators.rsi_period,
            rsi_overbought=self.signals.rsi_overbought,
            rsi_oversold=self.signals.rsi_oversold,
        )

    def require_history(self, candles: Sequence[Candle]) -> None:
        """
        Raise when the series is too short for every indicator to warm up.

        The pipeline itself never raises on short input; this is for callers
        that must not act on a series with absent values.

        Raises:
            InsufficientDataError: If fewer candles than the warm-up needs
        """
        # RSI needs period changes plus the seed candle
        required = max(self.indicators.ema_period, self.indicators.rsi_period + 1)
        if len(candles) < required:
            raise InsufficientDataError(
                f"Need at least {required} candles for indicators, got {len(candles)}",
                required_count=required,
                available_count=len(candles),
            )
