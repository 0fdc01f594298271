"""Configuration for the Spaceflight Articles browser.

This module provides configuration for the remote article list endpoint,
read from environment variables (a local .env file is honoured).
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Remote endpoint
DEFAULT_BASE_URL = "https://api.spaceflightnewsapi.net"
ARTICLES_PATH = "/v4/articles/"

# Query settings
PAGE_SIZE = 10
DEBOUNCE_DELAY_SECONDS = 1.0
REQUEST_TIMEOUT_SECONDS = 10.0


@dataclass
class ClientConfig:
    """Remote endpoint and timing configuration.

    Attributes:
        base_url: Scheme and host of the article API
        request_timeout: Transport timeout for one remote read, in seconds
        debounce_delay: Quiet period before typed search text is committed
    """

    base_url: str = DEFAULT_BASE_URL
    request_timeout: float = REQUEST_TIMEOUT_SECONDS
    debounce_delay: float = DEBOUNCE_DELAY_SECONDS

    @property
    def articles_url(self) -> str:
        """Full URL of the article list endpoint."""
        return self.base_url.rstrip("/") + ARTICLES_PATH


def _get_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = float(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be a number, got {raw!r}") from e
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {raw!r}")
    return value


def get_client_config() -> ClientConfig:
    """Get client configuration from environment variables.

    Environment Variables:
        SPACEFLIGHT_API_BASE_URL: API base URL (default: public endpoint)
        SPACEFLIGHT_REQUEST_TIMEOUT: Request timeout in seconds (default: 10)
        SPACEFLIGHT_DEBOUNCE_SECONDS: Search debounce delay (default: 1.0)

    Returns:
        ClientConfig instance

    Raises:
        ValueError: If a numeric variable cannot be parsed
    """
    load_dotenv()

    return ClientConfig(
        base_url=os.getenv("SPACEFLIGHT_API_BASE_URL") or DEFAULT_BASE_URL,
        request_timeout=_get_float(
            "SPACEFLIGHT_REQUEST_TIMEOUT", REQUEST_TIMEOUT_SECONDS
        ),
        debounce_delay=_get_float(
            "SPACEFLIGHT_DEBOUNCE_SECONDS", DEBOUNCE_DELAY_SECONDS
        ),
    )
