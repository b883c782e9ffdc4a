"""
Resonance data models.

ResonanceState is recomputed wholesale from the latest indicator candle of
each timeframe and never partially updated.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from ..data.models import TradeDirection


class TrendClassification(str, Enum):
    """Trend of a single timeframe, derived from close vs EMA."""
    BULLISH = "BULLISH"
    BEARISH = "BEARISH"
    NEUTRAL = "NEUTRAL"


@dataclass(frozen=True)
class ResonanceState:
    """Trend agreement across the short, medium and long timeframes."""
    short_trend: TrendClassification = TrendClassification.NEUTRAL
    medium_trend: TrendClassification = TrendClassification.NEUTRAL
    long_trend: TrendClassification = TrendClassification.NEUTRAL
    is_resonant: bool = False
    direction: TradeDirection = TradeDirection.NONE

    @classmethod
    def from_trends(cls, short_trend: TrendClassification,
                    medium_trend: TrendClassification,
                    long_trend: TrendClassification) -> "ResonanceState":
        """Build a state, deriving resonance and direction from the trends."""
        is_resonant = (
            short_trend == medium_trend == long_trend
            and short_trend != TrendClassification.NEUTRAL
        )

        if not is_resonant:
            direction = TradeDirection.NONE
        elif short_trend == TrendClassification.BULLISH:
            direction = TradeDirection.LONG
        else:
            direction = TradeDirection.SHORT

        return cls(
            short_trend=short_trend,
            medium_trend=medium_trend,
            long_trend=long_trend,
            is_resonant=is_resonant,
            direction=direction,
        )

    @property
    def trends(self) -> tuple[TrendClassification, TrendClassification, TrendClassification]:
        return (self.short_trend, self.medium_trend, self.long_trend)

    def to_dict(self) -> dict[str, Any]:
        return {
            "short_trend": self.short_trend.value,
            "medium_trend": self.medium_trend.value,
            "long_trend": self.long_trend.value,
            "is_resonant": self.is_resonant,
            "direction": self.direction.value,
        }
