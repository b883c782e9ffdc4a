"""
Main dashboard engine coordinator.

Orchestrates one refresh of the dashboard pipeline:
Candles (x3 timeframes) → Indicators → Resonance → Reports → Notification sinks,
and separately: Market price + parameters → Rolling simulation → Reports.

Each refresh is independent and supersedes the previous result for the
symbol wholesale. Callers should serialize refreshes per symbol; the last
one to complete wins.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

import structlog

from .config.defaults import DefaultConfig
from .config.loader import ConfigLoader
from .config.notification import (
    DeliveryDestination,
    NotificationConfig,
    get_default_notification_config,
)
from .data.models import (
    Candle,
    FearGreedReading,
    IndicatorCandle,
    Timeframe,
)
from .data.parsers import (
    ParseError,
    parse_fear_greed_payload,
    parse_kline_payload,
    parse_ticker_payload,
)
from .delivery.base import BaseReportDelivery, DeliveryResult, DeliveryStatus
from .delivery.factory import create_delivery
from .errors import MalformedDataError, MissingDataError
from .indicators.engine import IndicatorEngine
from .logging.config import get_analysis_logger, log_resonance_change, log_signal
from .reports.builder import build_analysis_report, build_rolling_report
from .resonance.detector import ResonanceDetector
from .resonance.models import ResonanceState
from .rolling.models import RollingParams, RollingPlan
from .rolling.simulator import RollingStrategySimulator
from .sentiment.fear_greed import is_extreme_greed

logger = structlog.get_logger(__name__)
analysis_logger = get_analysis_logger(__name__)


@dataclass(frozen=True)
class MarketAnalysis:
    """Result of one indicator refresh for a symbol."""
    symbol: str
    series: dict[Timeframe, list[IndicatorCandle]] = field(default_factory=dict)
    resonance: ResonanceState = field(default_factory=ResonanceState)
    price: Optional[float] = None
    fear_greed: Optional[FearGreedReading] = None
    extreme_greed: bool = False

    def latest(self, timeframe: Timeframe) -> Optional[IndicatorCandle]:
        """Latest indicator candle of a timeframe, None if the series is empty."""
        candles = self.series.get(timeframe) or []
        return candles[-1] if candles else None


class DashboardEngine:
    """
    Main coordinator for the resonance and rolling strategy dashboard.

    Holds no numeric state between refreshes apart from the last published
    analysis per symbol, which is only used to log resonance changes.
    """

    def __init__(self, config_dir: Optional[str] = None,
                 notification_config: Optional[NotificationConfig] = None) -> None:
        """Initialize the dashboard engine."""
        self.logger = logger
        self.analysis_logger = analysis_logger

        self.config_loader = ConfigLoader.create(config_dir)
        self.notification_config = notification_config or get_default_notification_config()
        self.detector = ResonanceDetector()

        # Per-symbol configuration and indicator engines
        self.configs: dict[str, DefaultConfig] = {}
        self.indicator_engines: dict[str, IndicatorEngine] = {}

        self.deliveries: list[tuple[DeliveryDestination, BaseReportDelivery]] = [
            (destination, create_delivery(destination))
            for destination in self.notification_config.destinations
            if destination.enabled
        ]

        self._last_analysis: dict[str, MarketAnalysis] = {}

        self.logger.info(
            "Dashboard engine initialized",
            deliveries=[destination.name for destination, _ in self.deliveries]
        )

    def config_for(self, symbol: str) -> DefaultConfig:
        """Merged configuration for a symbol, loaded once."""
        if symbol not in self.configs:
            self.configs[symbol] = self.config_loader.load(symbol)
        return self.configs[symbol]

    def _indicator_engine(self, symbol: str) -> IndicatorEngine:
        if symbol not in self.indicator_engines:
            config = self.config_for(symbol)
            self.indicator_engines[symbol] = IndicatorEngine(config.indicators, config.signals)
        return self.indicator_engines[symbol]

    def analyze(
        self,
        symbol: str,
        candles: dict[Timeframe, list[Candle]],
        current_price: Optional[float] = None,
        fear_greed: Optional[FearGreedReading] = None
    ) -> MarketAnalysis:
        """
        Run the indicator pipeline on all three timeframes and detect resonance.

        Args:
            symbol: Symbol being analyzed
            candles: Candle series per timeframe, most recent last; missing
                timeframes are treated as empty series
            current_price: Latest market price; defaults to the last short
                timeframe close
            fear_greed: Latest sentiment reading

        Returns:
            MarketAnalysis superseding any previous analysis for the symbol
        """
        if not symbol:
            raise MissingDataError("symbol required for analysis", data_type="symbol")

        config = self.config_for(symbol)
        indicator_engine = self._indicator_engine(symbol)

        series = {
            timeframe: indicator_engine.process(candles.get(timeframe) or [])
            for timeframe in Timeframe
        }

        resonance = self.detector.detect(
            series[Timeframe.H1], series[Timeframe.H4], series[Timeframe.D1]
        )

        price = current_price
        if price is None and series[Timeframe.H1]:
            price = series[Timeframe.H1][-1].close

        analysis = MarketAnalysis(
            symbol=symbol,
            series=series,
            resonance=resonance,
            price=price,
            fear_greed=fear_greed,
            extreme_greed=is_extreme_greed(fear_greed, config.sentiment.extreme_greed_threshold),
        )

        for timeframe in Timeframe:
            latest = analysis.latest(timeframe)
            if latest is not None and latest.signal is not None:
                log_signal(self.analysis_logger, symbol, timeframe.value,
                           latest.signal.value, latest.close)

        previous = self._last_analysis.get(symbol)
        if previous is None or previous.resonance != resonance:
            log_resonance_change(
                self.analysis_logger,
                symbol,
                previous.resonance.to_dict() if previous else None,
                resonance.to_dict(),
            )

        if analysis.extreme_greed:
            self.analysis_logger.warning(
                "Extreme greed detected",
                symbol=symbol,
                fear_greed=fear_greed.value
            )

        self._last_analysis[symbol] = analysis
        return analysis

    def analyze_payloads(
        self,
        symbol: str,
        kline_payloads: dict[Timeframe, Any],
        ticker_payload: Optional[dict[str, Any]] = None,
        fear_greed_payload: Optional[dict[str, Any]] = None
    ) -> MarketAnalysis:
        """
        Parse raw collaborator payloads and run the analysis.

        A payload that fails to parse degrades to an empty series (or a
        missing price / sentiment reading) rather than failing the refresh.
        """
        if not isinstance(kline_payloads, dict):
            raise MalformedDataError(
                "kline payloads must map timeframes to rows",
                raw_data=repr(kline_payloads)[:200],
                expected_format="dict[Timeframe, list]",
            )

        candles: dict[Timeframe, list[Candle]] = {}
        for timeframe in Timeframe:
            rows = kline_payloads.get(timeframe) or []
            try:
                candles[timeframe] = parse_kline_payload(rows)
            except ParseError as e:
                self.logger.warning(
                    "Kline payload rejected, using empty series",
                    symbol=symbol,
                    timeframe=timeframe.value,
                    error=str(e)
                )
                candles[timeframe] = []

        current_price = None
        if ticker_payload is not None:
            try:
                current_price = parse_ticker_payload(ticker_payload, symbol).price
            except ParseError as e:
                self.logger.warning("Ticker payload rejected", symbol=symbol, error=str(e))

        fear_greed = None
        if fear_greed_payload is not None:
            try:
                fear_greed = parse_fear_greed_payload(fear_greed_payload)
            except ParseError as e:
                self.logger.warning("Fear & Greed payload rejected", error=str(e))

        return self.analyze(symbol, candles, current_price=current_price, fear_greed=fear_greed)

    def last_analysis(self, symbol: str) -> Optional[MarketAnalysis]:
        """Most recently published analysis for a symbol."""
        return self._last_analysis.get(symbol)

    def plan_rolling(
        self,
        symbol: str,
        params: Optional[RollingParams] = None,
        current_price: Optional[float] = None
    ) -> RollingPlan:
        """
        Simulate a rolling strategy for a symbol.

        Args:
            symbol: Symbol the plan is for
            params: Simulation inputs; configured defaults when omitted
            current_price: Entry fallback; defaults to the last analysis price

        Returns:
            Simulated RollingPlan
        """
        simulator = RollingStrategySimulator(self.config_for(symbol).rolling)
        params = params or simulator.default_params()

        if current_price is None:
            previous = self._last_analysis.get(symbol)
            current_price = previous.price if previous else None

        return simulator.plan(params, current_price)

    def notify_analysis(self, analysis: MarketAnalysis) -> list[DeliveryResult]:
        """Render an analysis report and push it to every enabled sink."""
        report = build_analysis_report(
            analysis.symbol,
            analysis.price,
            analysis.resonance,
            analysis.fear_greed,
            self.config_for(analysis.symbol).sentiment.extreme_greed_threshold,
        )
        return self._dispatch(report)

    def notify_rolling(self, symbol: str, plan: RollingPlan) -> list[DeliveryResult]:
        """Render a rolling plan report and push it to every enabled sink."""
        return self._dispatch(build_rolling_report(symbol, plan))

    def _dispatch(self, report: dict[str, Any]) -> list[DeliveryResult]:
        if not self.notification_config.enabled:
            return []

        results = []
        for destination, delivery in self.deliveries:
            if destination.kinds_filter and report["kind"] not in destination.kinds_filter:
                continue
            if destination.resonant_only and report["kind"] == "analysis" and not report["is_resonant"]:
                continue

            delivery_results = delivery.deliver_with_retry(
                [report],
                max_retries=self.notification_config.failure_retry_attempts,
                retry_delay=self.notification_config.failure_retry_delay_seconds,
            )
            for result in delivery_results:
                if result.status != DeliveryStatus.SUCCESS:
                    self.logger.error(
                        "Report delivery failed",
                        destination=destination.name,
                        kind=report["kind"],
                        symbol=report.get("symbol"),
                        message=result.message
                    )
            results.extend(delivery_results)

        return results
