"""Indicator pipeline: EMA, RSI and EMA/RSI crossover signals"""

from .ema import calculate_ema
from .engine import IndicatorEngine, process_candles
from .rsi import calculate_rsi
from .signals import detect_signal

__all__ = [
    "IndicatorEngine",
    "calculate_ema",
    "calculate_rsi",
    "detect_signal",
    "process_candles",
]
