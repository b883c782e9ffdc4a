"""Base classes for report delivery mechanisms."""

import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

import structlog


class DeliveryStatus(Enum):
    """Report delivery status."""
    SUCCESS = "success"
    FAILED = "failed"
    DEAD_LETTER = "dead_letter"


@dataclass
class DeliveryResult:
    """Result of report delivery attempt."""
    status: DeliveryStatus
    message: Optional[str] = None
    attempt_count: int = 1
    delivery_time_ms: Optional[int] = None
    error: Optional[Exception] = None


class ReportDeliveryError(Exception):
    """Base exception for report delivery errors."""
    pass


class ReportDeliveryRetryableError(ReportDeliveryError):
    """Retryable report delivery error."""
    pass


class ReportDeliveryPermanentError(ReportDeliveryError):
    """Permanent report delivery error that should not be retried."""
    pass


class BaseReportDelivery(ABC):
    """Base class for report delivery mechanisms."""

    def __init__(self, name: str, config: Any):
        self.name = name
        self.config = config
        self.logger = structlog.get_logger(f"report.delivery.{name}")
        self._delivery_count = 0
        self._error_count = 0

    @abstractmethod
    def deliver(self, reports: list[dict[str, Any]]) -> list[DeliveryResult]:
        """
        Deliver reports to the configured destination.

        Args:
            reports: List of report dictionaries with a rendered "text" field

        Returns:
            List of delivery results for each report
        """
        pass

    @abstractmethod
    def health_check(self) -> bool:
        """Check if delivery mechanism is healthy."""
        pass

    def deliver_with_retry(
        self,
        reports: list[dict[str, Any]],
        max_retries: int = 3,
        retry_delay: float = 1
    ) -> list[DeliveryResult]:
        """
        Deliver reports with retry logic.

        Args:
            reports: List of report dictionaries
            max_retries: Maximum number of retry attempts
            retry_delay: Delay between retries in seconds

        Returns:
            List of delivery results for each report
        """
        results = []

        for report in reports:
            attempt = 0
            last_error = None

            while attempt <= max_retries:
                try:
                    start_time = time.time()
                    delivery_results = self.deliver([report])
                    delivery_time = int((time.time() - start_time) * 1000)

                    if delivery_results and delivery_results[0].status == DeliveryStatus.SUCCESS:
                        result = delivery_results[0]
                        result.delivery_time_ms = delivery_time
                        result.attempt_count = attempt + 1
                        results.append(result)
                        self._delivery_count += 1
                        break
                    else:
                        last_error = delivery_results[0].error if delivery_results else None
                        if isinstance(last_error, ReportDeliveryPermanentError):
                            raise last_error

                except ReportDeliveryPermanentError as e:
                    self._error_count += 1
                    results.append(DeliveryResult(
                        status=DeliveryStatus.FAILED,
                        message=f"Permanent error: {str(e)}",
                        attempt_count=attempt + 1,
                        error=e
                    ))
                    break

                except ReportDeliveryRetryableError as e:
                    last_error = e

                attempt += 1

                if attempt <= max_retries:
                    self.logger.warning(
                        f"Delivery attempt {attempt} failed, retrying in {retry_delay}s",
                        delivery_name=self.name,
                        error=str(last_error)
                    )
                    time.sleep(retry_delay)
                else:
                    self._error_count += 1
                    results.append(DeliveryResult(
                        status=DeliveryStatus.DEAD_LETTER,
                        message=f"Max retries exceeded: {str(last_error)}",
                        attempt_count=attempt,
                        error=last_error
                    ))

        return results

    def get_stats(self) -> dict[str, Any]:
        """Get delivery statistics."""
        return {
            "name": self.name,
            "delivery_count": self._delivery_count,
            "error_count": self._error_count,
            "success_rate": (
                self._delivery_count / (self._delivery_count + self._error_count)
                if (self._delivery_count + self._error_count) > 0 else 0.0
            )
        }

    def reset_stats(self):
        """Reset delivery statistics."""
        self._delivery_count = 0
        self._error_count = 0
