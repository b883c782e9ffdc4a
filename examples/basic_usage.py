#!/usr/bin/env python3
"""
Basic Usage Example - RollPro Resonance & Rolling Engine

This script demonstrates the basic usage of the dashboard engine with
simulated market data. It shows how to:
- Initialize the engine
- Feed Binance-format klines for the 1h/4h/1d timeframes
- Inspect indicators, crossover signals and trend resonance
- Simulate a rolling strategy plan from the latest price

Run: python examples/basic_usage.py
"""

import time
from typing import Any

from rollpro_app.data.models import Timeframe
from rollpro_app.engine import DashboardEngine, MarketAnalysis
from rollpro_app.rolling.models import RollingPlan

TIMEFRAME_MS = {
    Timeframe.H1: 3_600_000,
    Timeframe.H4: 4 * 3_600_000,
    Timeframe.D1: 24 * 3_600_000,
}


def create_kline_rows(closes: list[float], interval_ms: int) -> list[list[Any]]:
    """Create Binance-format kline rows ending at the current time."""
    start_ms = int(time.time() * 1000) - len(closes) * interval_ms
    rows = []
    for i, close in enumerate(closes):
        open_price = closes[i - 1] if i else close
        open_ms = start_ms + i * interval_ms
        rows.append([
            open_ms,
            str(open_price),
            str(max(open_price, close) * 1.002),
            str(min(open_price, close) * 0.998),
            str(close),
            "1250.5",
            open_ms + interval_ms - 1,
        ])
    return rows


def print_analysis(analysis: MarketAnalysis) -> None:
    """Print the latest indicator values per timeframe and the resonance."""
    print(f"📊 {analysis.symbol} @ ${analysis.price:.2f}")
    for timeframe in Timeframe:
        latest = analysis.latest(timeframe)
        if latest is None:
            print(f"  {timeframe.value}: no data")
            continue
        ema = f"{latest.ema:.2f}" if latest.ema is not None else "n/a"
        rsi = f"{latest.rsi:.1f}" if latest.rsi is not None else "n/a"
        signal = latest.signal.value if latest.signal else "-"
        print(f"  {timeframe.value}: close={latest.close:.2f} ema={ema} rsi={rsi} signal={signal}")

    resonance = analysis.resonance
    print(f"  Trends: {', '.join(t.value for t in resonance.trends)}")
    print(f"  Resonant: {resonance.is_resonant} ({resonance.direction.value})")
    print()


def print_plan(plan: RollingPlan) -> None:
    """Print the rolling step chain."""
    for step in plan.steps:
        shield = "🛡️" if step.is_capital_protected else "⚠️"
        print(
            f"  Step {step.step_index} {shield} capital ${step.start_capital:.0f} → "
            f"${step.end_capital:.0f} | entry {step.entry_price:.2f} "
            f"target {step.target_price:.2f} stop {step.stop_loss_price:.2f}"
        )
    print(f"  Final capital: ${plan.final_capital:.2f} ({plan.total_roi_pct:+.1f}%)")
    print()


def main():
    """Main demonstration function."""
    print("🚀 RollPro Resonance & Rolling Engine - Basic Usage Demo")
    print("=" * 60)

    print("1. Initializing the dashboard engine...")
    engine = DashboardEngine()
    print()

    print("2. Analyzing an aligned uptrend on all timeframes...")
    uptrend = [42000.0 + 150 * i + (300 if i % 4 == 0 else 0) for i in range(60)]
    analysis = engine.analyze_payloads(
        "BTCUSDT",
        {tf: create_kline_rows(uptrend, ms) for tf, ms in TIMEFRAME_MS.items()},
        ticker_payload={"symbol": "BTCUSDT", "price": str(uptrend[-1])},
        fear_greed_payload={"data": [{"value": "78", "value_classification": "Extreme Greed"}]},
    )
    print_analysis(analysis)

    print("3. Analyzing a market where the daily trend disagrees...")
    downtrend = [3500.0 - 12 * i for i in range(60)]
    mixed = engine.analyze_payloads(
        "ETHUSDT",
        {
            Timeframe.H1: create_kline_rows([3000.0 + 5 * i for i in range(60)], TIMEFRAME_MS[Timeframe.H1]),
            Timeframe.H4: create_kline_rows([3000.0 + 5 * i for i in range(60)], TIMEFRAME_MS[Timeframe.H4]),
            Timeframe.D1: create_kline_rows(downtrend, TIMEFRAME_MS[Timeframe.D1]),
        },
    )
    print_analysis(mixed)

    print("4. Simulating a rolling plan from the latest BTC price...")
    plan = engine.plan_rolling("BTCUSDT")
    print_plan(plan)

    print("5. Publishing reports to the configured sinks...")
    engine.notify_analysis(analysis)
    engine.notify_rolling("BTCUSDT", plan)
    print()

    print("✅ Demo completed successfully!")


if __name__ == "__main__":
    main()
