"""Tests for EMA calculation"""

import math

import pytest

from rollpro_app.indicators.ema import calculate_ema


class TestEMAWarmup:
    """Test EMA seeding and warm-up prefix"""

    def test_empty_series(self):
        """Empty input gives empty output"""
        assert calculate_ema([], 20) == []

    def test_exact_period_flat_series(self, candle_factory):
        """20 flat closes with period 20: 19 absents then the seed"""
        ema = calculate_ema(candle_factory([10.0] * 20), 20)

        assert len(ema) == 20
        assert all(math.isnan(v) for v in ema[:19])
        assert ema[19] == 10.0

    @pytest.mark.parametrize("length", [1, 5, 19])
    def test_shorter_than_period_is_all_absent(self, candle_factory, length):
        """Series shorter than the period never produce a value"""
        ema = calculate_ema(candle_factory([10.0 + i for i in range(length)]), 20)

        assert len(ema) == length
        assert all(math.isnan(v) for v in ema)

    def test_seed_is_simple_mean(self, candle_factory):
        """Seed is the mean of the first period closes"""
        ema = calculate_ema(candle_factory([1.0, 2.0, 3.0]), 3)
        assert ema[2] == 2.0

    def test_nan_closes_skipped_in_seed(self, candle_factory):
        """NaN closes are excluded from the seed average"""
        ema = calculate_ema(candle_factory([math.nan, 2.0, 4.0, 6.0]), 3)

        assert ema[2] == 3.0  # mean(2, 4)
        assert ema[3] == 4.5  # (6 - 3) * 0.5 + 3

    def test_all_nan_warmup(self, candle_factory):
        """No valid close in the warm-up window marks every output absent"""
        ema = calculate_ema(candle_factory([math.nan, math.nan, math.nan, 5.0]), 3)

        assert len(ema) == 4
        assert all(math.isnan(v) for v in ema)


class TestEMASmoothing:
    """Test the recursive EMA step"""

    def test_recursive_formula(self, candle_factory):
        """ema[i] = (close - prev) * k + prev with k = 2 / (period + 1)"""
        ema = calculate_ema(candle_factory([1.0, 2.0, 3.0, 4.0, 5.0]), 3)

        # k = 0.5, seed 2.0 at index 2
        assert ema[2] == 2.0
        assert ema[3] == 3.0
        assert ema[4] == 4.0

    def test_nan_close_carries_forward(self, candle_factory):
        """A NaN close repeats the previous EMA"""
        ema = calculate_ema(candle_factory([1.0, 2.0, 3.0, math.nan, 5.0]), 3)

        assert ema[3] == 2.0
        assert ema[4] == 3.5

    def test_period_one_tracks_closes(self, candle_factory):
        """Period 1 means k = 1, so EMA equals the close"""
        closes = [3.0, 7.0, 5.0, 9.0]
        assert calculate_ema(candle_factory(closes), 1) == closes

    @pytest.mark.parametrize("length,period", [(0, 5), (3, 5), (5, 5), (40, 20), (100, 9)])
    def test_output_length_matches_input(self, candle_factory, length, period):
        """Output is always aligned with the input"""
        ema = calculate_ema(candle_factory([100.0 + i for i in range(length)]), period)
        assert len(ema) == length

    def test_values_never_revert_to_absent(self, candle_factory):
        """Once present, EMA stays present"""
        ema = calculate_ema(candle_factory([100.0 + (i % 7) for i in range(60)]), 20)

        first = next(i for i, v in enumerate(ema) if not math.isnan(v))
        assert first == 19
        assert not any(math.isnan(v) for v in ema[first:])

    def test_input_not_mutated(self, candle_factory):
        """Calculation leaves the source candles untouched"""
        candles = candle_factory([1.0, 2.0, 3.0, 4.0])
        snapshot = list(candles)

        calculate_ema(candles, 2)

        assert candles == snapshot
