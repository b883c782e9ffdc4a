"""Default configuration parameters for the resonance and rolling engine."""

from dataclasses import dataclass


@dataclass(frozen=True)
class IndicatorParams:
    """Indicator periods."""
    ema_period: int = 20                 # Trend EMA
    rsi_period: int = 14                 # Momentum RSI


@dataclass(frozen=True)
class SignalParams:
    """RSI filters applied to EMA crossovers."""
    rsi_overbought: float = 70.0         # BUY rejected at or above
    rsi_oversold: float = 30.0           # SELL rejected at or below


@dataclass(frozen=True)
class RollingDefaults:
    """Rolling strategy parameters used when the caller omits them."""
    initial_capital: float = 1000.0
    profit_target_pct: float = 30.0      # Margin ROI per step
    leverage: float = 10.0
    steps: int = 5
    initial_risk_pct: float = 0.05       # Risk budget while principal is exposed
    fallback_price: float = 1.0          # Entry when neither entry nor market price is known


@dataclass(frozen=True)
class RefreshParams:
    """Refresh cadence for the surrounding dashboard."""
    indicator_refresh_seconds: int = 60
    price_refresh_seconds: int = 5
    kline_limit: int = 100


@dataclass(frozen=True)
class SentimentParams:
    """Fear & Greed alert parameters."""
    extreme_greed_threshold: int = 75


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    indicators: IndicatorParams
    signals: SignalParams
    rolling: RollingDefaults
    refresh: RefreshParams
    sentiment: SentimentParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        indicators=IndicatorParams(),
        signals=SignalParams(),
        rolling=RollingDefaults(),
        refresh=RefreshParams(),
        sentiment=SentimentParams(),
    )
