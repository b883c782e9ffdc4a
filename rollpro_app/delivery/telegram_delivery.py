"""Telegram bot report delivery mechanism."""

import json
import socket
from typing import Any
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

from ..config.notification import TelegramDeliveryConfig
from .base import (
    BaseReportDelivery,
    DeliveryResult,
    DeliveryStatus,
    ReportDeliveryError,
    ReportDeliveryPermanentError,
    ReportDeliveryRetryableError,
)


class TelegramReportDelivery(BaseReportDelivery):
    """Sends the rendered report text through the Telegram Bot API."""

    def __init__(self, name: str, config: TelegramDeliveryConfig):
        super().__init__(name, config)
        self.config: TelegramDeliveryConfig = config

    @property
    def send_url(self) -> str:
        return f"{self.config.api_base.rstrip('/')}/bot{self.config.bot_token}/sendMessage"

    def deliver(self, reports: list[dict[str, Any]]) -> list[DeliveryResult]:
        """Deliver reports as Telegram messages."""
        results = []

        for report in reports:
            try:
                results.append(self._deliver_single_report(report))
            except ReportDeliveryError as e:
                results.append(DeliveryResult(
                    status=DeliveryStatus.FAILED,
                    message=str(e),
                    error=e
                ))

        return results

    def _deliver_single_report(self, report: dict[str, Any]) -> DeliveryResult:
        """Deliver a single report via the sendMessage endpoint."""
        if not self.config.is_configured:
            self.logger.warning(
                "Telegram not configured or disabled",
                delivery_name=self.name
            )
            raise ReportDeliveryPermanentError("Telegram not configured or disabled")

        data = json.dumps({
            "chat_id": self.config.chat_id,
            "text": report.get("text", ""),
            "parse_mode": self.config.parse_mode,
        }).encode('utf-8')
        headers = {
            'Content-Type': 'application/json',
            'Content-Length': str(len(data)),
            'User-Agent': 'rollpro-app/1.0'
        }

        req = Request(self.send_url, data=data, headers=headers, method="POST")

        try:
            with urlopen(req, timeout=self.config.timeout_seconds) as response:
                response_code = response.getcode()
                response_data = response.read().decode('utf-8')

        except HTTPError as e:
            self.logger.warning(
                "Telegram delivery HTTP error",
                delivery_name=self.name,
                kind=report.get("kind"),
                error_code=e.code,
                error_reason=str(e.reason)
            )
            error_msg = f"HTTP {e.code}: {e.reason}"
            if e.code >= 500:
                raise ReportDeliveryRetryableError(error_msg)
            raise ReportDeliveryPermanentError(error_msg)

        except (OSError, URLError, socket.timeout) as e:
            self.logger.warning(
                "Telegram delivery network error",
                delivery_name=self.name,
                kind=report.get("kind"),
                error=str(e)
            )
            raise ReportDeliveryRetryableError(f"Network error: {str(e)}")

        if response_code >= 500:
            raise ReportDeliveryRetryableError(f"HTTP {response_code}: {response_data[:200]}")

        try:
            body = json.loads(response_data)
        except json.JSONDecodeError:
            raise ReportDeliveryPermanentError(f"Invalid Telegram response: {response_data[:200]}")

        if not body.get("ok"):
            raise ReportDeliveryPermanentError(
                f"Telegram API error: {body.get('description', 'unknown error')}"
            )

        self.logger.info(
            "Report delivered to Telegram",
            delivery_name=self.name,
            kind=report.get("kind"),
            symbol=report.get("symbol")
        )
        return DeliveryResult(
            status=DeliveryStatus.SUCCESS,
            message=f"HTTP {response_code}"
        )

    def health_check(self) -> bool:
        """Check the bot token with the getMe endpoint."""
        if not self.config.is_configured:
            return False

        url = f"{self.config.api_base.rstrip('/')}/bot{self.config.bot_token}/getMe"
        try:
            with urlopen(Request(url, method="GET"), timeout=5) as response:
                return 200 <= response.getcode() < 300
        except (OSError, URLError, socket.timeout) as e:
            self.logger.warning(
                "Health check failed",
                delivery_name=self.name,
                error=str(e)
            )
            return False
