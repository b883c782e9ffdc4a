"""Configuration for report notification sinks."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class DeliveryMethod(Enum):
    """Supported report delivery methods."""
    STDOUT = "stdout"
    TELEGRAM = "telegram"


@dataclass(frozen=True)
class TelegramDeliveryConfig:
    """Configuration for Telegram bot delivery."""
    bot_token: str = ""
    chat_id: str = ""
    enabled: bool = False
    api_base: str = "https://api.telegram.org"
    parse_mode: str = "Markdown"
    timeout_seconds: int = 10

    @property
    def is_configured(self) -> bool:
        """True when enabled and both credentials are present."""
        return self.enabled and bool(self.bot_token) and bool(self.chat_id)


@dataclass(frozen=True)
class StdoutDeliveryConfig:
    """Configuration for stdout delivery."""
    format: str = "json"  # json, pretty
    include_timestamp: bool = True


@dataclass(frozen=True)
class DeliveryDestination:
    """Single report delivery destination."""
    name: str
    method: DeliveryMethod
    config: Any  # TelegramDeliveryConfig | StdoutDeliveryConfig
    enabled: bool = True

    # Filtering options
    kinds_filter: Optional[list[str]] = None  # Only deliver "analysis" and/or "rolling"
    resonant_only: bool = False               # Skip analysis reports without resonance


@dataclass(frozen=True)
class NotificationConfig:
    """Complete notification configuration."""
    destinations: list[DeliveryDestination]
    enabled: bool = True

    failure_retry_attempts: int = 3
    failure_retry_delay_seconds: int = 2


def get_default_notification_config() -> NotificationConfig:
    """Get default notification configuration."""
    return NotificationConfig(
        destinations=[
            DeliveryDestination(
                name="stdout",
                method=DeliveryMethod.STDOUT,
                config=StdoutDeliveryConfig(
                    format="json",
                    include_timestamp=True
                ),
                enabled=True
            )
        ],
        enabled=True,
        failure_retry_attempts=3,
        failure_retry_delay_seconds=2,
    )


def create_telegram_destination(
    name: str,
    bot_token: str,
    chat_id: str,
    enabled: bool = True,
    **kwargs
) -> DeliveryDestination:
    """Create Telegram delivery destination."""
    return DeliveryDestination(
        name=name,
        method=DeliveryMethod.TELEGRAM,
        config=TelegramDeliveryConfig(
            bot_token=bot_token,
            chat_id=chat_id,
            enabled=enabled,
            **kwargs
        ),
        enabled=enabled
    )
