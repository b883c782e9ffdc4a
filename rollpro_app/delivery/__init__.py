"""Report delivery to notification sinks"""

from .base import (
    BaseReportDelivery,
    DeliveryResult,
    DeliveryStatus,
    ReportDeliveryError,
    ReportDeliveryPermanentError,
    ReportDeliveryRetryableError,
)
from .factory import create_delivery
from .stdout_delivery import StdoutReportDelivery
from .telegram_delivery import TelegramReportDelivery

__all__ = [
    "BaseReportDelivery",
    "DeliveryResult",
    "DeliveryStatus",
    "ReportDeliveryError",
    "ReportDeliveryPermanentError",
    "ReportDeliveryRetryableError",
    "StdoutReportDelivery",
    "TelegramReportDelivery",
    "create_delivery",
]
