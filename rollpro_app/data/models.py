"""
Canonical data models for candles, prices and sentiment readings.

This module defines immutable data structures that represent validated
market data after parsing from raw exchange formats. Candles are produced by
the external data source and are never mutated.
"""

import math
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional


class Timeframe(str, Enum):
    """Resonance timeframes, short to long."""
    H1 = "1h"
    H4 = "4h"
    D1 = "1d"


class SignalType(str, Enum):
    """Per-candle crossover event marker."""
    BUY = "BUY"
    SELL = "SELL"


class TradeDirection(str, Enum):
    """Position direction. NONE is only produced by resonance detection."""
    LONG = "LONG"
    SHORT = "SHORT"
    NONE = "NONE"


@dataclass(frozen=True)
class Candle:
    """OHLCV candlestick with UTC timestamp."""
    ts: datetime        # UTC open time
    open: float        # Opening price
    high: float        # High price
    low: float         # Low price
    close: float       # Closing price
    volume: float      # Base volume

    @property
    def is_green(self) -> bool:
        """True when the candle closed at or above its open."""
        return self.close >= self.open


def _present(value: Optional[float]) -> Optional[float]:
    """Map NaN placeholders to None."""
    if value is None or math.isnan(value):
        return None
    return value


@dataclass(frozen=True)
class IndicatorCandle(Candle):
    """Candle extended with the indicator values computed at the same index."""
    ema: Optional[float] = None
    rsi: Optional[float] = None              # 0-100 scale
    signal: Optional[SignalType] = None      # Crossover event on this candle only

    @classmethod
    def from_candle(cls, candle: Candle, ema: Optional[float] = None,
                    rsi: Optional[float] = None,
                    signal: Optional[SignalType] = None) -> "IndicatorCandle":
        """Copy the source candle fields and attach indicator values."""
        return cls(
            ts=candle.ts,
            open=candle.open,
            high=candle.high,
            low=candle.low,
            close=candle.close,
            volume=candle.volume,
            ema=_present(ema),
            rsi=_present(rsi),
            signal=signal,
        )


@dataclass(frozen=True)
class TickerPrice:
    """Latest traded price for a symbol."""
    symbol: str
    price: float
    ts: Optional[datetime] = None


@dataclass(frozen=True)
class FearGreedReading:
    """Market sentiment index reading (0 = extreme fear, 100 = extreme greed)."""
    value: int
    classification: str
    ts: Optional[datetime] = None
