"""Cross-timeframe trend resonance detection"""

from .detector import ResonanceDetector, classify_trend, compute_resonance
from .models import ResonanceState, TrendClassification

__all__ = [
    "ResonanceDetector",
    "ResonanceState",
    "TrendClassification",
    "classify_trend",
    "compute_resonance",
]
