"""Market sentiment checks"""

from .fear_greed import is_extreme_greed, sentiment_alert

__all__ = ["is_extreme_greed", "sentiment_alert"]
