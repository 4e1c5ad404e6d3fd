from txfeed.config.config import (
    DEFAULT_DELAY_MILLIS,
    DEFAULT_MAX_ATTEMPTS,
    AppConfig,
    CalendarConfig,
    KafkaConfig,
    RetryConfig,
    config,
)

__all__ = [
    "AppConfig",
    "CalendarConfig",
    "KafkaConfig",
    "RetryConfig",
    "DEFAULT_DELAY_MILLIS",
    "DEFAULT_MAX_ATTEMPTS",
    "config",
]
