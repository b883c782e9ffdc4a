"""
Exchange and sentiment payload parsers.

Converts raw Binance kline rows, ticker responses and Fear & Greed index
responses into canonical data structures with proper type conversion and
error handling.
"""

import time
from typing import Any, Optional

import orjson

from ..utils.time import ms_to_utc, seconds_to_utc
from .models import Candle, FearGreedReading, TickerPrice


class ParseError(Exception):
    """Raised when parsing fails due to invalid data format."""
    pass


class InvalidPriceError(ParseError):
    """Raised when price data is invalid."""
    pass


class InvalidTimestampError(ParseError):
    """Raised when timestamp data is invalid."""
    pass


class InvalidVolumeError(ParseError):
    """Raised when volume data is invalid."""
    pass


class ParsingMetrics:
    """Simple metrics collection for parsing operations."""

    def __init__(self):
        self.total_parses = 0
        self.successful_parses = 0
        self.failed_parses = 0
        self.total_candles_parsed = 0
        self.total_parse_time = 0.0
        self.last_failure_time = None

    def record_parse_start(self):
        """Record the start of a parsing operation."""
        self.total_parses += 1
        return time.time()

    def record_parse_success(self, start_time: float, candle_count: int):
        """Record successful parsing."""
        self.successful_parses += 1
        self.total_candles_parsed += candle_count
        self.total_parse_time += time.time() - start_time

    def record_parse_failure(self, start_time: float):
        """Record parsing failure."""
        self.failed_parses += 1
        self.total_parse_time += time.time() - start_time
        self.last_failure_time = time.time()

    def get_stats(self) -> dict[str, Any]:
        """Get current metrics."""
        avg_parse_time = self.total_parse_time / max(self.total_parses, 1)
        success_rate = self.successful_parses / max(self.total_parses, 1)

        return {
            "total_parses": self.total_parses,
            "successful_parses": self.successful_parses,
            "failed_parses": self.failed_parses,
            "success_rate": success_rate,
            "total_candles_parsed": self.total_candles_parsed,
            "avg_parse_time_ms": avg_parse_time * 1000,
            "last_failure_time": self.last_failure_time
        }


# Global metrics instance
_parsing_metrics = ParsingMetrics()


def get_parsing_metrics() -> dict[str, Any]:
    """Get current parsing metrics."""
    return _parsing_metrics.get_stats()


def reset_parsing_metrics():
    """Reset parsing metrics."""
    global _parsing_metrics
    _parsing_metrics = ParsingMetrics()


def parse_kline_payload(rows: list[list[Any]]) -> list[Candle]:
    """
    Parse Binance kline rows into Candle objects, oldest first.

    Expected Binance format (one row per candle):
        [1499040000000, "0.01634790", "0.80000000", "0.01575800",
         "0.01577100", "148976.11427815", 1499644799999, ...]

    Row format: [open_time_ms, open, high, low, close, volume, ...trailing fields ignored]

    Args:
        rows: Raw kline rows as returned by the klines endpoint

    Returns:
        List of Candle objects sorted by open time ascending

    Raises:
        ParseError: If payload format is invalid
        InvalidPriceError: If price data is invalid
        InvalidTimestampError: If timestamp data is invalid
        InvalidVolumeError: If volume data is invalid
    """
    start_time = _parsing_metrics.record_parse_start()

    try:
        if not isinstance(rows, list):
            raise ParseError("Kline payload must be a list of rows")

        candles = []

        for i, row in enumerate(rows):
            try:
                candles.append(_parse_single_kline(row))
            except (InvalidPriceError, InvalidTimestampError, InvalidVolumeError):
                raise
            except (ValueError, IndexError, TypeError) as e:
                raise ParseError(f"Invalid kline data at index {i}: {e}")

        # Sources may deliver rows out of order; the engine needs most-recent last
        candles.sort(key=lambda c: c.ts)

        _parsing_metrics.record_parse_success(start_time, len(candles))
        return candles

    except ParseError:
        _parsing_metrics.record_parse_failure(start_time)
        raise


def _parse_single_kline(row: list[Any]) -> Candle:
    """Parse single Binance kline row into Candle object."""
    if not isinstance(row, list):
        raise ValueError("Kline row must be a list")

    if len(row) < 6:
        raise ValueError(f"Kline row must have at least 6 elements, got {len(row)}")

    try:
        ts = ms_to_utc(int(row[0]))
    except (ValueError, TypeError, OSError, OverflowError) as e:
        raise InvalidTimestampError(f"Invalid timestamp '{row[0]}': {e}")

    try:
        open_price = float(row[1])
        high_price = float(row[2])
        low_price = float(row[3])
        close_price = float(row[4])
    except (ValueError, TypeError) as e:
        raise InvalidPriceError(f"Invalid price data [O:{row[1]}, H:{row[2]}, L:{row[3]}, C:{row[4]}]: {e}")

    try:
        volume = float(row[5])
    except (ValueError, TypeError) as e:
        raise InvalidVolumeError(f"Invalid volume '{row[5]}': {e}")

    if any(price < 0 for price in [open_price, high_price, low_price, close_price]):
        raise InvalidPriceError(f"Prices must be non-negative: O={open_price}, H={high_price}, L={low_price}, C={close_price}")

    if volume < 0:
        raise InvalidVolumeError(f"Volume must be non-negative: {volume}")

    return Candle(
        ts=ts,
        open=open_price,
        high=high_price,
        low=low_price,
        close=close_price,
        volume=volume,
    )


def parse_ticker_payload(payload: dict[str, Any], symbol: Optional[str] = None) -> TickerPrice:
    """
    Parse a ticker price response.

    Expected Binance format: {"symbol": "BTCUSDT", "price": "64000.12000000"}

    Args:
        payload: Raw ticker response
        symbol: Symbol to use when the payload omits it

    Returns:
        TickerPrice for the symbol

    Raises:
        ParseError: If payload format is invalid
        InvalidPriceError: If the price is not a non-negative number
    """
    if not isinstance(payload, dict):
        raise ParseError("Ticker payload must be a dictionary")

    if "price" not in payload:
        raise ParseError("Missing 'price' field in ticker payload")

    resolved_symbol = payload.get("symbol") or symbol
    if not resolved_symbol:
        raise ParseError("Ticker payload has no symbol")

    try:
        price = float(payload["price"])
    except (ValueError, TypeError) as e:
        raise InvalidPriceError(f"Invalid ticker price '{payload['price']}': {e}")

    if price < 0:
        raise InvalidPriceError(f"Ticker price must be non-negative: {price}")

    return TickerPrice(symbol=resolved_symbol, price=price)


def parse_fear_greed_payload(payload: dict[str, Any]) -> Optional[FearGreedReading]:
    """
    Parse a Fear & Greed index response.

    Expected alternative.me format:
    {
        "name": "Fear and Greed Index",
        "data": [{"value": "40", "value_classification": "Fear", "timestamp": "1551157200"}]
    }

    Args:
        payload: Raw index response

    Returns:
        Latest reading, or None when the response carries no data

    Raises:
        ParseError: If payload format is invalid
    """
    if not isinstance(payload, dict):
        raise ParseError("Fear & Greed payload must be a dictionary")

    data = payload.get("data")
    if not data:
        return None

    if not isinstance(data, list) or not isinstance(data[0], dict):
        raise ParseError("'data' field must be a list of readings")

    entry = data[0]
    try:
        value = int(entry["value"])
    except (KeyError, ValueError, TypeError) as e:
        raise ParseError(f"Invalid Fear & Greed value: {e}")

    ts = None
    if entry.get("timestamp") is not None:
        try:
            ts = seconds_to_utc(int(entry["timestamp"]))
        except (ValueError, TypeError, OSError, OverflowError) as e:
            raise InvalidTimestampError(f"Invalid timestamp '{entry['timestamp']}': {e}")

    return FearGreedReading(
        value=value,
        classification=str(entry.get("value_classification", "")),
        ts=ts,
    )


def parse_json_payload(raw_data: str | bytes) -> Any:
    """
    Parse raw JSON text from an exchange or sentiment feed.

    Args:
        raw_data: Raw JSON string or bytes

    Returns:
        Parsed dictionary or list

    Raises:
        ParseError: If JSON parsing fails
    """
    try:
        return orjson.loads(raw_data)
    except orjson.JSONDecodeError as e:
        raise ParseError(f"Invalid JSON: {e}")
