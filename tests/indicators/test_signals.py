"""Tests for EMA/RSI crossover signals"""

import math

import pytest

from rollpro_app.data.models import SignalType
from rollpro_app.indicators.signals import detect_signal


class TestBuySignal:
    """Bullish crossover with rising, non-overbought RSI"""

    def test_buy_when_all_conditions_hold(self, candle_factory):
        candles = candle_factory([9.0, 11.0])
        assert detect_signal(candles, [10.0, 10.0], [50.0, 55.0], 1) == SignalType.BUY

    def test_previous_close_equal_to_ema_still_crosses(self, candle_factory):
        candles = candle_factory([10.0, 11.0])
        assert detect_signal(candles, [10.0, 10.0], [50.0, 55.0], 1) == SignalType.BUY

    def test_previous_close_above_ema_suppresses(self, candle_factory):
        candles = candle_factory([10.5, 11.0])
        assert detect_signal(candles, [10.0, 10.0], [50.0, 55.0], 1) is None

    def test_close_at_ema_suppresses(self, candle_factory):
        candles = candle_factory([9.0, 10.0])
        assert detect_signal(candles, [10.0, 10.0], [50.0, 55.0], 1) is None

    def test_falling_rsi_suppresses(self, candle_factory):
        candles = candle_factory([9.0, 11.0])
        assert detect_signal(candles, [10.0, 10.0], [55.0, 50.0], 1) is None

    def test_flat_rsi_suppresses(self, candle_factory):
        candles = candle_factory([9.0, 11.0])
        assert detect_signal(candles, [10.0, 10.0], [55.0, 55.0], 1) is None

    @pytest.mark.parametrize("rsi", [70.0, 85.0])
    def test_overbought_rsi_suppresses(self, candle_factory, rsi):
        candles = candle_factory([9.0, 11.0])
        assert detect_signal(candles, [10.0, 10.0], [50.0, rsi], 1) is None

    def test_rsi_just_below_overbought(self, candle_factory):
        candles = candle_factory([9.0, 11.0])
        assert detect_signal(candles, [10.0, 10.0], [50.0, 69.9], 1) == SignalType.BUY


class TestSellSignal:
    """Bearish crossover with falling, non-oversold RSI"""

    def test_sell_when_all_conditions_hold(self, candle_factory):
        candles = candle_factory([11.0, 9.0])
        assert detect_signal(candles, [10.0, 10.0], [50.0, 45.0], 1) == SignalType.SELL

    def test_rising_rsi_suppresses(self, candle_factory):
        candles = candle_factory([11.0, 9.0])
        assert detect_signal(candles, [10.0, 10.0], [45.0, 50.0], 1) is None

    @pytest.mark.parametrize("rsi", [30.0, 12.0])
    def test_oversold_rsi_suppresses(self, candle_factory, rsi):
        candles = candle_factory([11.0, 9.0])
        assert detect_signal(candles, [10.0, 10.0], [50.0, rsi], 1) is None

    def test_previous_close_below_ema_suppresses(self, candle_factory):
        candles = candle_factory([9.5, 9.0])
        assert detect_signal(candles, [10.0, 10.0], [50.0, 45.0], 1) is None


class TestSignalPreconditions:
    """Signals need index > 0 and present indicator values"""

    def test_first_index_never_signals(self, candle_factory):
        candles = candle_factory([9.0, 11.0])
        assert detect_signal(candles, [10.0, 10.0], [50.0, 55.0], 0) is None

    def test_out_of_range_index(self, candle_factory):
        candles = candle_factory([9.0, 11.0])
        assert detect_signal(candles, [10.0, 10.0], [50.0, 55.0], 2) is None

    @pytest.mark.parametrize("ema,rsi", [
        ([math.nan, 10.0], [50.0, 55.0]),
        ([10.0, math.nan], [50.0, 55.0]),
        ([10.0, 10.0], [50.0, math.nan]),
        ([10.0, 10.0], [math.nan, 55.0]),
        ([None, 10.0], [50.0, 55.0]),
        ([10.0, 10.0], [None, 55.0]),
    ])
    def test_absent_values_suppress(self, candle_factory, ema, rsi):
        candles = candle_factory([9.0, 11.0])
        assert detect_signal(candles, ema, rsi, 1) is None

    def test_custom_thresholds(self, candle_factory):
        candles = candle_factory([9.0, 11.0])
        ema, rsi = [10.0, 10.0], [50.0, 62.0]

        assert detect_signal(candles, ema, rsi, 1, rsi_overbought=60.0) is None
        assert detect_signal(candles, ema, rsi, 1, rsi_overbought=65.0) == SignalType.BUY
