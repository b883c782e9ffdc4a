"""Report payloads rendered for the notification sinks"""

from .builder import build_analysis_report, build_rolling_report

__all__ = ["build_analysis_report", "build_rolling_report"]
