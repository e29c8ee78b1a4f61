"""Configuration for semantic_pen.

This module defines the immutable client configuration and loads it from
environment variables (SEMANTIC_PEN_API_KEY, SEMANTIC_PEN_BASE_URL,
SEMANTIC_PEN_TIMEOUT).
"""

import os
from dataclasses import dataclass
from typing import Optional
from urllib.parse import urlsplit


DEFAULT_BASE_URL = "https://www.semanticpen.com"
DEFAULT_TIMEOUT = 60.0

API_KEY_ENV = "SEMANTIC_PEN_API_KEY"
BASE_URL_ENV = "SEMANTIC_PEN_BASE_URL"
TIMEOUT_ENV = "SEMANTIC_PEN_TIMEOUT"


@dataclass(frozen=True)
class Configuration:
    """Settings for a SemanticPenClient.

    Attributes:
        api_key: Bearer token used to authenticate every request
        base_url: Absolute URL that API paths are resolved against
        timeout: Request timeout in seconds, applied to every phase of a request
    """

    api_key: str
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self):
        if not self.api_key:
            raise ValueError("API key cannot be empty")
        if not self.api_key.isascii():
            raise ValueError("API key must contain only ASCII characters")

        parts = urlsplit(self.base_url)
        if not parts.scheme or not parts.netloc:
            raise ValueError(f"Base URL must be absolute: {self.base_url!r}")

        if self.timeout <= 0:
            raise ValueError(f"Timeout must be positive, got {self.timeout}")


def load_config(api_key: Optional[str] = None) -> Configuration:
    """Build a Configuration from environment variables.

    Args:
        api_key: Explicit API key (takes precedence over SEMANTIC_PEN_API_KEY)

    Returns:
        Configuration populated from the environment

    Raises:
        ValueError: If the API key is missing or a variable is malformed
    """
    api_key = api_key or os.environ.get(API_KEY_ENV)
    if not api_key:
        raise ValueError(f"{API_KEY_ENV} environment variable not set")

    base_url = os.environ.get(BASE_URL_ENV) or DEFAULT_BASE_URL

    timeout_str = os.environ.get(TIMEOUT_ENV)
    timeout = DEFAULT_TIMEOUT
    if timeout_str:
        try:
            timeout = float(timeout_str)
        except ValueError:
            raise ValueError(f"{TIMEOUT_ENV} must be a number of seconds, got {timeout_str!r}")

    return Configuration(api_key=api_key, base_url=base_url, timeout=timeout)
