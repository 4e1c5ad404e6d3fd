import os

from dotenv import load_dotenv
from pydantic import BaseModel

load_dotenv()

DEFAULT_MAX_ATTEMPTS = 3
DEFAULT_DELAY_MILLIS = 100


class KafkaConfig(BaseModel):
    # Use environment variable for Docker, fallback to localhost for local development
    bootstrap_servers: str = os.getenv("KAFKA_BOOTSTRAP_SERVERS", "localhost:29092")
    topic: str = os.getenv("TXFEED_TOPIC", "transactions")
    client_id: str = os.getenv("KAFKA_CLIENT_ID", "txfeed")
    send_timeout_seconds: float = float(os.getenv("KAFKA_SEND_TIMEOUT_SECONDS", "10"))


class RetryConfig(BaseModel):
    max_attempts: int = int(
        os.getenv("TXFEED_RETRY_MAX_ATTEMPTS", str(DEFAULT_MAX_ATTEMPTS))
    )
    delay_millis: int = int(os.getenv("TXFEED_RETRY_DELAY_MS", str(DEFAULT_DELAY_MILLIS)))


class CalendarConfig(BaseModel):
    # Close of business is computed in the trading desk's local time
    timezone: str = os.getenv("TXFEED_TIMEZONE", "America/New_York")


class AppConfig(BaseModel):
    kafka: KafkaConfig = KafkaConfig()
    retry: RetryConfig = RetryConfig()
    calendar: CalendarConfig = CalendarConfig()
    log_level: str = os.getenv("LOG_LEVEL", "INFO")


config = AppConfig()
