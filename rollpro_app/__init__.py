"""
RollPro App - Trend Resonance and Rolling Position Engine

A quantitative engine for a retail trading dashboard. Overlays EMA/RSI
indicators on price candles, detects multi-timeframe trend resonance and
projects compounding leveraged position steps with protected stop-losses.
"""

__version__ = "0.1.0"
__author__ = "RollPro Team"
