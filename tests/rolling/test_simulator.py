"""Tests for the rolling strategy simulator"""

import pytest

from rollpro_app.config.defaults import RollingDefaults
from rollpro_app.data.models import TradeDirection
from rollpro_app.rolling.models import RollingParams, RollingPlan
from rollpro_app.rolling.simulator import RollingStrategySimulator, simulate_rolling


class TestReferenceScenario:
    """1000 capital, 30% target, 10x, 2 steps from 100 long"""

    @pytest.fixture
    def steps(self):
        return simulate_rolling(
            initial_capital=1000, profit_target_pct=30, leverage=10,
            step_count=2, entry_price=100, direction=TradeDirection.LONG,
        )

    def test_first_step(self, steps):
        step = steps[0]
        assert step.step_index == 1
        assert step.start_capital == 1000
        assert step.entry_price == 100
        assert step.target_price == pytest.approx(103.0)
        assert step.profit == pytest.approx(300.0)
        assert step.end_capital == pytest.approx(1300.0)
        assert step.risk_amount == pytest.approx(50.0)
        assert step.stop_loss_price == pytest.approx(99.5)
        assert step.is_capital_protected is False

    def test_second_step(self, steps):
        step = steps[1]
        assert step.step_index == 2
        assert step.start_capital == pytest.approx(1300.0)
        assert step.entry_price == pytest.approx(103.0)
        assert step.risk_amount == pytest.approx(300.0)
        assert step.is_capital_protected is True
        assert step.stop_loss_price == pytest.approx(103 * (1 - (300 / 1300) / 10))
        assert step.stop_loss_price == pytest.approx(100.63, abs=0.01)

    def test_protected_stop_returns_principal(self, steps):
        """Hitting a protected stop loses exactly the buffer above principal"""
        step = steps[1]
        price_loss_pct = (step.entry_price - step.stop_loss_price) / step.entry_price
        equity_after_stop = step.start_capital * (1 - price_loss_pct * 10)

        assert equity_after_stop == pytest.approx(1000.0)


class TestStepChaining:
    """Properties that hold for any step count"""

    @pytest.mark.parametrize("step_count", [1, 2, 5, 12])
    def test_length_and_chaining(self, step_count):
        steps = simulate_rolling(500, 25, 20, step_count, 64000, TradeDirection.SHORT)

        assert len(steps) == step_count
        assert [s.step_index for s in steps] == list(range(1, step_count + 1))
        for prev, nxt in zip(steps, steps[1:]):
            assert nxt.start_capital == prev.end_capital
            assert nxt.entry_price == prev.target_price

    def test_step_one_never_protected(self):
        for direction in (TradeDirection.LONG, TradeDirection.SHORT):
            steps = simulate_rolling(1000, 50, 3, 4, 10, direction)
            assert steps[0].is_capital_protected is False

    def test_growth_above_principal_is_protected(self):
        steps = simulate_rolling(1000, 10, 5, 6, 10, TradeDirection.LONG)

        for step in steps:
            if step.start_capital > 1000:
                assert step.is_capital_protected is True

    def test_deterministic(self):
        args = (1000, 30, 10, 5, 100, TradeDirection.LONG)
        assert simulate_rolling(*args) == simulate_rolling(*args)

    def test_non_positive_step_count(self):
        assert simulate_rolling(1000, 30, 10, 0, 100) == []


class TestDirection:
    """Short positions mirror the long price arithmetic"""

    def test_short_targets_and_stops(self):
        steps = simulate_rolling(1000, 30, 10, 2, 100, TradeDirection.SHORT)

        assert steps[0].target_price == pytest.approx(97.0)
        assert steps[0].stop_loss_price == pytest.approx(100.5)
        assert steps[1].entry_price == pytest.approx(97.0)
        assert steps[1].stop_loss_price == pytest.approx(97 * (1 + (300 / 1300) / 10))

    def test_string_direction(self):
        assert simulate_rolling(1000, 30, 10, 1, 100, "SHORT")[0].target_price == pytest.approx(97.0)


class TestEdgeCases:
    """Clamping and fallback policies"""

    @pytest.mark.parametrize("leverage", [0, -5])
    def test_non_positive_leverage_is_one(self, leverage):
        steps = simulate_rolling(1000, 30, leverage, 1, 100)

        assert steps[0].target_price == pytest.approx(130.0)
        assert steps[0].stop_loss_price == pytest.approx(95.0)

    def test_entry_falls_back_to_current_price(self):
        steps = simulate_rolling(1000, 30, 10, 1, 0, current_price=250.0)
        assert steps[0].entry_price == 250.0

    @pytest.mark.parametrize("current_price", [None, 0, -3])
    def test_entry_falls_back_to_one(self, current_price):
        steps = simulate_rolling(1000, 30, 10, 1, -1, current_price=current_price)
        assert steps[0].entry_price == 1.0

    def test_positive_entry_wins_over_current_price(self):
        steps = simulate_rolling(1000, 30, 10, 1, 100, current_price=250.0)
        assert steps[0].entry_price == 100

    def test_eroded_capital_falls_back_to_fixed_risk(self):
        """A losing target leaves no buffer, so later steps risk 5% again"""
        steps = simulate_rolling(1000, -10, 10, 3, 100)

        assert steps[1].start_capital == pytest.approx(900.0)
        assert steps[1].risk_amount == pytest.approx(45.0)
        assert steps[1].is_capital_protected is False
        assert steps[2].is_capital_protected is False

    def test_zero_capital_keeps_stop_at_entry(self):
        steps = simulate_rolling(0, 30, 10, 2, 100)

        assert steps[0].stop_loss_price == 100
        assert steps[1].stop_loss_price == steps[1].entry_price

    def test_custom_initial_risk(self):
        steps = simulate_rolling(1000, 30, 10, 1, 100, initial_risk_pct=0.1)
        assert steps[0].risk_amount == pytest.approx(100.0)
        assert steps[0].stop_loss_price == pytest.approx(99.0)


class TestRollingStrategySimulator:
    """Test the configured simulator and plan summary"""

    def test_default_params(self):
        params = RollingStrategySimulator().default_params()

        assert params.initial_capital == 1000.0
        assert params.profit_target_pct == 30.0
        assert params.leverage == 10.0
        assert params.steps == 5
        assert params.direction == TradeDirection.LONG

    def test_default_params_overrides(self):
        params = RollingStrategySimulator().default_params(steps=3, direction=TradeDirection.SHORT)
        assert params.steps == 3
        assert params.direction == TradeDirection.SHORT

    def test_plan_summary(self):
        params = RollingParams(initial_capital=1000, profit_target_pct=30, leverage=10,
                               steps=2, entry_price=100)
        plan = RollingStrategySimulator().plan(params)

        assert isinstance(plan, RollingPlan)
        assert plan.final_capital == pytest.approx(1690.0)
        assert plan.total_profit == pytest.approx(690.0)
        assert plan.total_roi_pct == pytest.approx(69.0)
        assert plan.protected_steps == 1

    def test_plan_uses_configured_risk(self):
        simulator = RollingStrategySimulator(RollingDefaults(initial_risk_pct=0.02))
        plan = simulator.plan(RollingParams(steps=1, entry_price=100))

        assert plan.steps[0].risk_amount == pytest.approx(20.0)

    def test_plan_uses_current_price_fallback(self):
        plan = RollingStrategySimulator().plan(RollingParams(steps=1), current_price=3000.0)
        assert plan.steps[0].entry_price == 3000.0

    def test_empty_plan_summary(self):
        plan = RollingPlan(params=RollingParams(steps=0))

        assert plan.final_capital == 1000.0
        assert plan.total_profit == 0.0
        assert plan.total_roi_pct == 0.0
