"""Delivery construction from configured destinations."""

from ..config.notification import DeliveryDestination, DeliveryMethod
from ..errors import DeliveryError
from .base import BaseReportDelivery
from .stdout_delivery import StdoutReportDelivery
from .telegram_delivery import TelegramReportDelivery


def create_delivery(destination: DeliveryDestination) -> BaseReportDelivery:
    """Instantiate the delivery mechanism for a destination."""
    if destination.method == DeliveryMethod.STDOUT:
        return StdoutReportDelivery(destination.name, destination.config)
    if destination.method == DeliveryMethod.TELEGRAM:
        return TelegramReportDelivery(destination.name, destination.config)
    raise DeliveryError(
        f"Unsupported delivery method: {destination.method}",
        delivery_method=str(destination.method),
    )
