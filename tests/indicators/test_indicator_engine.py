"""Tests for the composed indicator pipeline"""

import pytest

from rollpro_app.config.defaults import IndicatorParams, SignalParams
from rollpro_app.data.models import IndicatorCandle, SignalType
from rollpro_app.errors import InsufficientDataError
from rollpro_app.indicators.engine import IndicatorEngine, process_candles


class TestProcessCandles:
    """Test process_candles"""

    def test_empty_series(self):
        assert process_candles([]) == []

    def test_aligned_with_source(self, candle_factory):
        candles = candle_factory([100.0 + (i % 9) for i in range(40)])
        result = process_candles(candles)

        assert len(result) == len(candles)
        for source, processed in zip(candles, result):
            assert isinstance(processed, IndicatorCandle)
            assert processed.ts == source.ts
            assert processed.open == source.open
            assert processed.high == source.high
            assert processed.low == source.low
            assert processed.close == source.close
            assert processed.volume == source.volume
            assert processed.is_green == source.is_green

    def test_warmup_values_absent(self, candle_factory):
        result = process_candles(candle_factory([100.0 + (i % 9) for i in range(40)]))

        assert all(c.ema is None for c in result[:19])
        assert all(c.ema is not None for c in result[19:])
        assert all(c.rsi is None for c in result[:14])
        assert all(c.rsi is not None for c in result[14:])

    def test_short_series_has_no_indicators(self, candle_factory):
        result = process_candles(candle_factory([100.0, 101.0, 102.0]))

        assert len(result) == 3
        assert all(c.ema is None and c.rsi is None and c.signal is None for c in result)

    def test_buy_signal_on_rebound(self, candle_factory, downtrend_then_rebound):
        result = process_candles(candle_factory(downtrend_then_rebound))

        assert result[-1].signal == SignalType.BUY
        assert all(c.signal is None for c in result[:-1])

    def test_sell_signal_on_drop(self, candle_factory, uptrend_then_drop):
        result = process_candles(candle_factory(uptrend_then_drop))

        assert result[-1].signal == SignalType.SELL
        assert all(c.signal is None for c in result[:-1])

    def test_signal_is_event_not_state(self, candle_factory, downtrend_then_rebound):
        """The candle after a crossover carries no signal of its own"""
        closes = downtrend_then_rebound + [94.0]
        result = process_candles(candle_factory(closes))

        assert result[-2].signal == SignalType.BUY
        assert result[-1].signal is None

    def test_pure_function(self, candle_factory, downtrend_then_rebound):
        candles = candle_factory(downtrend_then_rebound)
        assert process_candles(candles) == process_candles(candles)


class TestIndicatorEngine:
    """Test the configured engine wrapper"""

    def test_default_periods(self):
        engine = IndicatorEngine()
        assert engine.indicators.ema_period == 20
        assert engine.indicators.rsi_period == 14
        assert engine.signals.rsi_overbought == 70.0

    def test_custom_periods(self, candle_factory):
        engine = IndicatorEngine(IndicatorParams(ema_period=5, rsi_period=3), SignalParams())
        result = engine.process(candle_factory([100.0 + i for i in range(10)]))

        assert result[3].ema is None
        assert result[4].ema is not None
        assert result[2].rsi is None
        assert result[3].rsi is not None

    def test_require_history_passes(self, candle_factory):
        IndicatorEngine().require_history(candle_factory([100.0] * 20))

    def test_require_history_raises(self, candle_factory):
        with pytest.raises(InsufficientDataError) as exc_info:
            IndicatorEngine().require_history(candle_factory([100.0] * 19))

        assert exc_info.value.required_count == 20
        assert exc_info.value.available_count == 19
        assert exc_info.value.recoverable is True
