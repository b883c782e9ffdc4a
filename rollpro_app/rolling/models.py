"""
Rolling strategy data models.

Steps form a chain: each step's end capital and target price are the next
step's start capital and entry price. A plan is always recomputed as a whole.
"""

from dataclasses import asdict, dataclass, field
from typing import Any

from ..data.models import TradeDirection


@dataclass(frozen=True)
class RollingStep:
    """One projected leveraged trade in the rolling chain."""
    step_index: int                  # 1-based
    start_capital: float
    profit: float
    end_capital: float
    risk_amount: float               # Capital lost if the stop-loss is hit
    entry_price: float
    target_price: float
    stop_loss_price: float
    is_capital_protected: bool       # Worst case unwinds to the original principal

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class RollingParams:
    """Caller-supplied simulation inputs."""
    initial_capital: float = 1000.0
    profit_target_pct: float = 30.0      # Margin ROI per step
    leverage: float = 10.0
    steps: int = 5
    entry_price: float = 0.0             # <= 0 falls back to the market price
    direction: TradeDirection = TradeDirection.LONG


@dataclass(frozen=True)
class RollingPlan:
    """A simulated step chain with its summary figures."""
    params: RollingParams
    steps: list[RollingStep] = field(default_factory=list)

    @property
    def final_capital(self) -> float:
        if not self.steps:
            return self.params.initial_capital
        return self.steps[-1].end_capital

    @property
    def total_profit(self) -> float:
        return self.final_capital - self.params.initial_capital

    @property
    def total_roi_pct(self) -> float:
        if not self.steps or self.params.initial_capital == 0:
            return 0.0
        return self.total_profit / self.params.initial_capital * 100

    @property
    def protected_steps(self) -> int:
        return sum(1 for step in self.steps if step.is_capital_protected)
