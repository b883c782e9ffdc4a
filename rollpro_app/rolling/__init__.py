"""Rolling (compounding leveraged) position strategy simulation"""

from .models import RollingParams, RollingPlan, RollingStep
from .simulator import RollingStrategySimulator, simulate_rolling

__all__ = [
    "RollingParams",
    "RollingPlan",
    "RollingStep",
    "RollingStrategySimulator",
    "simulate_rolling",
]
