"""
System failure error classifications.

These represent failures outside the numeric core, such as a notification
sink that cannot be reached.
"""

from typing import Optional, Dict, Any


class SystemFailureError(Exception):
    """Base class for unrecoverable system failures."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class DeliveryError(SystemFailureError):
    """Report delivery system failures."""

    def __init__(self, message: str, delivery_method: Optional[str] = None,
                 report_kind: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.delivery_method = delivery_method
        self.report_kind = report_kind
