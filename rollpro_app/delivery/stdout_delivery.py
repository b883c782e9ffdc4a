"""Standard output report delivery mechanism."""

import json
import sys
from datetime import datetime, timezone
from typing import Any

from ..config.notification import StdoutDeliveryConfig
from .base import BaseReportDelivery, DeliveryResult, DeliveryStatus


class StdoutReportDelivery(BaseReportDelivery):
    """Standard output report delivery implementation."""

    def __init__(self, name: str, config: StdoutDeliveryConfig):
        super().__init__(name, config)
        self.config: StdoutDeliveryConfig = config

    def deliver(self, reports: list[dict[str, Any]]) -> list[DeliveryResult]:
        """Deliver reports to stdout."""
        results = []

        for report in reports:
            try:
                output = self._format_report(report)
                print(output, file=sys.stdout, flush=True)
            except (OSError, TypeError, ValueError) as e:
                self.logger.error(
                    "Failed to print report to stdout",
                    delivery_name=self.name,
                    symbol=report.get("symbol"),
                    error=str(e)
                )
                results.append(DeliveryResult(
                    status=DeliveryStatus.FAILED,
                    message=f"Stdout error: {str(e)}",
                    error=e
                ))
                continue

            self.logger.info(
                "Report printed to stdout",
                delivery_name=self.name,
                symbol=report.get("symbol"),
                kind=report.get("kind")
            )
            results.append(DeliveryResult(
                status=DeliveryStatus.SUCCESS,
                message="Printed to stdout"
            ))

        return results

    def _format_report(self, report: dict[str, Any]) -> str:
        """Format report for stdout output."""
        if self.config.format == "pretty":
            header = f"[{datetime.now(timezone.utc).isoformat()}] {report.get('kind', 'report').upper()}"
            return f"{header}\n{report.get('text', '')}"

        if self.config.include_timestamp:
            report_copy = report.copy()
            report_copy["stdout_timestamp"] = datetime.now(timezone.utc).isoformat()
            return json.dumps(report_copy, default=str, ensure_ascii=False)
        return json.dumps(report, default=str, ensure_ascii=False)

    def health_check(self) -> bool:
        """Check if stdout is available."""
        try:
            return sys.stdout.writable()
        except (OSError, ValueError):
            return False
