"""Pytest configuration and shared fixtures."""

from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

import pytest

from rollpro_app.data.models import Candle, IndicatorCandle

BASE_TS = datetime(2024, 1, 1, tzinfo=timezone.utc)


def _make_candles(closes: list[float], step: timedelta = timedelta(hours=1)) -> list[Candle]:
    candles = []
    for i, close in enumerate(closes):
        open_price = closes[i - 1] if i > 0 else close
        candles.append(Candle(
            ts=BASE_TS + i * step,
            open=open_price,
            high=max(open_price, close),
            low=min(open_price, close),
            close=close,
            volume=1000.0,
        ))
    return candles


def _make_indicator_candle(close: float, ema: Optional[float] = None,
                           rsi: Optional[float] = None) -> IndicatorCandle:
    return IndicatorCandle(
        ts=BASE_TS, open=close, high=close, low=close, close=close,
        volume=1000.0, ema=ema, rsi=rsi,
    )


@pytest.fixture
def candle_factory() -> Callable[..., list[Candle]]:
    """Build a chronological candle series from a list of closes."""
    return _make_candles


@pytest.fixture
def indicator_candle_factory() -> Callable[..., IndicatorCandle]:
    """Build a single indicator candle with a given close/EMA/RSI."""
    return _make_indicator_candle


@pytest.fixture
def downtrend_then_rebound() -> list[float]:
    """Steady 0.5 decline for 30 candles, then a rebound above the EMA."""
    return [100 - i * 0.5 for i in range(30)] + [93.0]


@pytest.fixture
def uptrend_then_drop() -> list[float]:
    """Steady 0.5 rise for 30 candles, then a drop below the EMA."""
    return [100 + i * 0.5 for i in range(30)] + [107.0]


@pytest.fixture
def sample_kline_rows() -> list[list]:
    """Binance kline rows for three hourly candles."""
    start_ms = int(BASE_TS.timestamp() * 1000)
    hour_ms = 3_600_000
    return [
        [start_ms, "100.0", "105.0", "99.0", "103.0", "12.5", start_ms + hour_ms - 1, "1287.5", 42, "6.0", "618.0", "0"],
        [start_ms + hour_ms, "103.0", "104.0", "101.0", "102.0", "8.0", start_ms + 2 * hour_ms - 1, "816.0", 30, "4.0", "408.0", "0"],
        [start_ms + 2 * hour_ms, "102.0", "108.0", "102.0", "107.5", "20.0", start_ms + 3 * hour_ms - 1, "2150.0", 55, "11.0", "1182.5", "0"],
    ]
