"""
Error classification system for the resonance and rolling engine.

The numeric core degrades gracefully instead of raising; these exceptions
are used at the boundaries (payload parsing, history requirements, report
delivery) to classify what went wrong.
"""

from .data_quality import (
    DataQualityError,
    MissingDataError,
    MalformedDataError,
    InsufficientDataError,
)
from .system_failures import (
    SystemFailureError,
    DeliveryError,
)

__all__ = [
    # Data Quality Errors
    "DataQualityError",
    "MissingDataError",
    "MalformedDataError",
    "InsufficientDataError",
    # System Failures
    "SystemFailureError",
    "DeliveryError",
]
