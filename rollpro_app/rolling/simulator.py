"""
Rolling strategy simulator.

Projects a chain of compounding leveraged trades. Every step targets the
same margin ROI; with leverage L a target of X% needs only an X/L% price
move. Profit is fully reinvested at the target price of the previous step.

Stop-loss policy:
- Step 1 risks a fixed share (5% by default) of capital. Principal is exposed.
- Later steps risk the whole buffer above the original principal, so the
  worst case unwinds to exactly the principal. With no buffer left the
  step falls back to the step-1 rule.
"""

from typing import Optional, Union

import structlog

from ..config.defaults import RollingDefaults
from ..data.models import TradeDirection
from .models import RollingParams, RollingPlan, RollingStep

logger = structlog.get_logger(__name__)


def _resolve_entry_price(entry_price: float, current_price: Optional[float],
                         fallback_price: float) -> float:
    if entry_price > 0:
        return entry_price
    if current_price is not None and current_price > 0:
        return current_price
    return fallback_price


def _project_step(step_index: int, capital: float, price: float,
                  initial_capital: float, roi: float, leverage: float,
                  is_long: bool, initial_risk_pct: float) -> RollingStep:
    """Project a single step from its starting capital and entry price."""
    price_move_pct = roi / leverage
    target_price = price * (1 + price_move_pct) if is_long else price * (1 - price_move_pct)

    profit = capital * roi
    end_capital = capital + profit

    buffer = capital - initial_capital
    if step_index > 1 and buffer > 0:
        risk_amount = buffer
        is_protected = True
    else:
        risk_amount = capital * initial_risk_pct
        is_protected = False

    # Zero capital has no equity to lose; keep the stop at the entry
    max_loss_pct = risk_amount / capital if capital != 0 else 0.0
    price_drop_pct = max_loss_pct / leverage
    stop_loss_price = price * (1 - price_drop_pct) if is_long else price * (1 + price_drop_pct)

    return RollingStep(
        step_index=step_index,
        start_capital=capital,
        profit=profit,
        end_capital=end_capital,
        risk_amount=risk_amount,
        entry_price=price,
        target_price=target_price,
        stop_loss_price=stop_loss_price,
        is_capital_protected=is_protected,
    )


def simulate_rolling(initial_capital: float, profit_target_pct: float,
                     leverage: float, step_count: int, entry_price: float,
                     direction: Union[TradeDirection, str] = TradeDirection.LONG,
                     current_price: Optional[float] = None,
                     initial_risk_pct: float = 0.05,
                     fallback_price: float = 1.0) -> list[RollingStep]:
    """
    Simulate a rolling strategy as a chain of steps.

    Deterministic: identical inputs always produce identical steps.

    Args:
        initial_capital: Starting margin capital (the protected principal)
        profit_target_pct: Margin ROI per step in percent (30 = 30%)
        leverage: Position leverage; values <= 0 are treated as 1
        step_count: Number of steps; values < 1 yield no steps
        entry_price: First entry; <= 0 falls back to current_price, then fallback_price
        direction: LONG or SHORT; anything other than SHORT is simulated long
        current_price: Latest market price used as the entry fallback
        initial_risk_pct: Share of capital risked while principal is exposed
        fallback_price: Entry used when no positive price is available

    Returns:
        List of step_count RollingStep objects
    """
    effective_leverage = leverage if leverage > 0 else 1
    roi = profit_target_pct / 100
    is_long = TradeDirection(direction) != TradeDirection.SHORT
    start_price = _resolve_entry_price(entry_price, current_price, fallback_price)

    steps: list[RollingStep] = []
    for step_index in range(1, step_count + 1):
        if steps:
            capital, price = steps[-1].end_capital, steps[-1].target_price
        else:
            capital, price = initial_capital, start_price

        steps.append(_project_step(
            step_index, capital, price, initial_capital, roi,
            effective_leverage, is_long, initial_risk_pct,
        ))

    return steps


class RollingStrategySimulator:
    """Rolling simulator bound to configured defaults"""

    def __init__(self, defaults: Optional[RollingDefaults] = None):
        self.defaults = defaults or RollingDefaults()
        self.logger = logger

    def default_params(self, **overrides) -> RollingParams:
        """Build simulation inputs from configured defaults."""
        values = {
            "initial_capital": self.defaults.initial_capital,
            "profit_target_pct": self.defaults.profit_target_pct,
            "leverage": self.defaults.leverage,
            "steps": self.defaults.steps,
        }
        values.update(overrides)
        return RollingParams(**values)

    def simulate(self, params: RollingParams,
                 current_price: Optional[float] = None) -> list[RollingStep]:
        """Simulate the step chain for the given inputs."""
        return simulate_rolling(
            initial_capital=params.initial_capital,
            profit_target_pct=params.profit_target_pct,
            leverage=params.leverage,
            step_count=params.steps,
            entry_price=params.entry_price,
            direction=params.direction,
            current_price=current_price,
            initial_risk_pct=self.defaults.initial_risk_pct,
            fallback_price=self.defaults.fallback_price,
        )

    def plan(self, params: RollingParams,
             current_price: Optional[float] = None) -> RollingPlan:
        """Simulate and wrap the steps with summary figures."""
        if params.leverage <= 0:
            self.logger.warning("Non-positive leverage treated as 1x", leverage=params.leverage)
        if params.entry_price <= 0:
            self.logger.debug(
                "Entry price not set, using market price fallback",
                current_price=current_price
            )

        plan = RollingPlan(params=params, steps=self.simulate(params, current_price))

        self.logger.info(
            "Rolling plan simulated",
            direction=TradeDirection(params.direction).value,
            steps=len(plan.steps),
            final_capital=round(plan.final_capital, 2),
            total_roi_pct=round(plan.total_roi_pct, 2),
        )
        return plan
