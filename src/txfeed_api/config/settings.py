"""
HTTP layer settings for the transaction publisher API.
"""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv
from loguru import logger

from txfeed import __version__
from txfeed.exceptions import ConfigurationError

load_dotenv()

TOKEN_HEADER = "X-API-Token"


@dataclass
class Settings:
    """Settings for serving the publisher over HTTP."""

    environment: str
    debug: bool
    host: str
    port: int

    # Shared secret expected in the X-API-Token header
    api_token: str

    # Comma separated; required in production
    allowed_hosts: str = ""

    api_title: str = "txfeed Transaction Publisher API"
    api_version: str = __version__
    api_description: str = "Stamps transactions with their close of business date and publishes them"

    @classmethod
    def load_from_env(cls) -> "Settings":
        return cls(
            environment=os.getenv("ENVIRONMENT", "development"),
            debug=os.getenv("DEBUG", "false").lower() == "true",
            host=os.getenv("API_HOST", "0.0.0.0"),
            port=int(os.getenv("API_PORT", "8000")),
            api_token=cls._load_api_token(),
            allowed_hosts=os.getenv("ALLOWED_HOSTS", ""),
        )

    @staticmethod
    def _load_api_token() -> str:
        """API_AUTH_TOKEN wins; otherwise read the secret file at API_AUTH_TOKEN_FILE."""
        token = os.getenv("API_AUTH_TOKEN", "")
        if token:
            return token

        token_file = os.getenv("API_AUTH_TOKEN_FILE")
        if not token_file:
            return ""

        path = Path(token_file)
        try:
            token = path.read_text(encoding="utf-8").strip()
        except OSError as exc:
            logger.error(f"Failed to read API token file {token_file}: {exc}")
            return ""

        if not token:
            logger.warning(f"API token file {token_file} is empty")
        return token

    def is_production(self) -> bool:
        return self.environment == "production"

    def get_allowed_hosts(self) -> list[str]:
        return [host.strip() for host in self.allowed_hosts.split(",") if host.strip()]

    def validate(self) -> None:
        """Refuse to serve production traffic without a host allow-list."""
        if self.is_production() and not self.get_allowed_hosts():
            raise ConfigurationError(
                "ALLOWED_HOSTS", "must list at least one host when ENVIRONMENT=production"
            )


settings = Settings.load_from_env()
logger.info(f"Settings loaded for environment: {settings.environment}")
