"""
Report builders for the notification sinks.

The engine exposes structured results only; these builders are the caller
side that turns a resonance state or a rolling plan into a report payload
with a rendered Markdown text.
"""

from typing import Any, Optional

from ..data.models import FearGreedReading, Timeframe, TradeDirection
from ..resonance.models import ResonanceState, TrendClassification
from ..rolling.models import RollingPlan
from ..sentiment.fear_greed import is_extreme_greed, sentiment_alert

_TREND_LABELS = {
    TrendClassification.BULLISH: "🟢 Bullish",
    TrendClassification.BEARISH: "🔴 Bearish",
    TrendClassification.NEUTRAL: "⚪ Neutral",
}

_TIMEFRAME_LABELS = {
    Timeframe.H1: "1H (short)",
    Timeframe.H4: "4H (swing)",
    Timeframe.D1: "1D (trend)",
}


def build_analysis_report(symbol: str, price: Optional[float],
                          resonance: ResonanceState,
                          fear_greed: Optional[FearGreedReading] = None,
                          greed_threshold: int = 75) -> dict[str, Any]:
    """
    Build a market analysis report.

    Args:
        symbol: Symbol the analysis was computed for
        price: Latest market price, None if unknown
        resonance: Resonance state of the three timeframes
        fear_greed: Latest sentiment reading
        greed_threshold: Extreme greed alert threshold

    Returns:
        Report dictionary including a rendered "text" field
    """
    trends = dict(zip((tf.value for tf in Timeframe), (t.value for t in resonance.trends)))
    extreme_greed = is_extreme_greed(fear_greed, greed_threshold)

    lines = [f"📊 *{symbol} Market Analysis*"]
    lines.append(f"💰 Price: ${price:.2f}" if price is not None else "💰 Price: n/a")
    if fear_greed is not None:
        lines.append(f"😨 Fear & Greed: {fear_greed.value} ({fear_greed.classification})")
    lines.append("")
    lines.append("*Trend resonance:*")
    for timeframe, trend in zip(Timeframe, resonance.trends):
        lines.append(f"{_TIMEFRAME_LABELS[timeframe]}: {_TREND_LABELS[trend]}")
    lines.append("")
    if resonance.is_resonant:
        side = "LONG" if resonance.direction == TradeDirection.LONG else "SHORT"
        lines.append(f"🔥 *Full resonance signal: {side}* 🔥")
    else:
        lines.append("⚠️ Timeframes disagree, stay on the sidelines")

    alert = sentiment_alert(fear_greed, greed_threshold)
    if alert:
        lines.append(f"🚨 {alert}")

    return {
        "kind": "analysis",
        "symbol": symbol,
        "price": price,
        "trends": trends,
        "is_resonant": resonance.is_resonant,
        "direction": resonance.direction.value,
        "fear_greed": (
            {"value": fear_greed.value, "classification": fear_greed.classification}
            if fear_greed is not None else None
        ),
        "extreme_greed": extreme_greed,
        "text": "\n".join(lines),
    }


def build_rolling_report(symbol: str, plan: RollingPlan) -> dict[str, Any]:
    """
    Build a rolling strategy report.

    Args:
        symbol: Symbol the plan was simulated for
        plan: Simulated rolling plan

    Returns:
        Report dictionary including a rendered "text" field
    """
    params = plan.params
    direction = TradeDirection(params.direction)

    lines = [
        f"🚀 *{symbol} Rolling Strategy*",
        "--------------------------------",
        f"Direction: *{'🟢 Long' if direction != TradeDirection.SHORT else '🔴 Short'}*",
        f"Leverage: {params.leverage:g}x",
        f"Capital: ${params.initial_capital:.0f} ➔ Target: ${plan.final_capital:.0f}",
        f"Total return: {plan.total_roi_pct:+.0f}%",
        "",
    ]

    for step in plan.steps:
        icon = "🛡️" if step.is_capital_protected else "⚠️"
        lines.append(f"*Step {step.step_index}* {icon}")
        lines.append(f"Entry: ${step.entry_price:.2f} ➔ Take profit: ${step.target_price:.2f}")
        lines.append(f"Stop loss: ${step.stop_loss_price:.2f} (risk: ${step.risk_amount:.0f})")
        lines.append(f"Step profit: ${step.profit:+.0f}")
        lines.append("")

    lines.append("💡 *Planning aid only, always honour the stop-loss*")

    return {
        "kind": "rolling",
        "symbol": symbol,
        "direction": direction.value,
        "leverage": params.leverage,
        "initial_capital": params.initial_capital,
        "final_capital": plan.final_capital,
        "total_profit": plan.total_profit,
        "total_roi_pct": plan.total_roi_pct,
        "steps": [step.to_dict() for step in plan.steps],
        "text": "\n".join(lines),
    }
