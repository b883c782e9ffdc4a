"""
Candle data models and collaborator payload parsers.
"""

from .models import (
    Candle,
    FearGreedReading,
    IndicatorCandle,
    SignalType,
    TickerPrice,
    Timeframe,
    TradeDirection,
)

__all__ = [
    "Candle",
    "FearGreedReading",
    "IndicatorCandle",
    "SignalType",
    "TickerPrice",
    "Timeframe",
    "TradeDirection",
]
