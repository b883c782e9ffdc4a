"""Fear & Greed index alerts"""

from typing import Optional

from ..data.models import FearGreedReading


def is_extreme_greed(reading: Optional[FearGreedReading], threshold: int = 75) -> bool:
    """
    Check whether the market is in an extreme greed state

    Args:
        reading: Latest index reading, None if the feed was unavailable
        threshold: Index value at or above which greed is extreme

    Returns:
        True if a reading is present and at or above the threshold
    """
    if reading is None:
        return False
    return reading.value >= threshold


def sentiment_alert(reading: Optional[FearGreedReading], threshold: int = 75) -> Optional[str]:
    """Short warning label for reports, None when no alert applies."""
    if not is_extreme_greed(reading, threshold):
        return None
    return (
        f"Extreme greed ({reading.value}): add to positions with caution "
        "and prepare for a pullback"
    )
