"""
HTTP transport for the coronavirus dashboard API

Performs a single GET per query and hands back the raw body. Connection
handling, TLS and compression are left to requests. There is no retry or
rate limiting: failures are surfaced as TransportError straight away.
"""

import json
import logging
import os
from dataclasses import dataclass
from typing import Any

import requests

from .errors import DecodeError, TransportError
from .url import ENDPOINT
from .version import APP_NAME, __version__

logger = logging.getLogger(__name__)


@dataclass
class ApiConfig:
    """Configuration for the API client"""
    base_url: str = ENDPOINT
    request_timeout: float = 30
    user_agent: str = f"{APP_NAME}/{__version__}"

    @classmethod
    def from_env(cls) -> "ApiConfig":
        """
        Build a configuration from environment variables

        UK_COVID19_API_URL overrides the endpoint and UK_COVID19_REQUEST_TIMEOUT
        the timeout in seconds. Unset variables keep their defaults.
        """
        config = cls()
        base_url = os.getenv("UK_COVID19_API_URL")
        if base_url:
            config.base_url = base_url
        timeout = os.getenv("UK_COVID19_REQUEST_TIMEOUT")
        if timeout:
            try:
                config.request_timeout = float(timeout)
            except ValueError:
                raise ValueError(f"UK_COVID19_REQUEST_TIMEOUT must be a number of seconds, got '{timeout}'") from None
        return config


class RequestsTransport:
    """Blocking GET transport built on requests"""

    def __init__(self, config: ApiConfig):
        self.config = config

    def get(self, url: str) -> bytes:
        """
        Fetch a URL and return the raw response body

        Raises:
            TransportError: network, TLS or timeout failure, or an HTTP error status
        """
        headers = {
            'Accept': 'application/json',
            'Accept-Encoding': 'gzip, deflate',
            'User-Agent': self.config.user_agent
        }

        try:
            response = requests.get(url, headers=headers, timeout=self.config.request_timeout)
        except requests.exceptions.Timeout as e:
            logger.error(f"Request timed out after {self.config.request_timeout}s: {url}")
            raise TransportError(f"Request timed out: {e}", original_exception=e) from e
        except requests.exceptions.ConnectionError as e:
            logger.error(f"Cannot connect to API: {e}")
            raise TransportError(f"Cannot connect to API: {e}", original_exception=e) from e
        except requests.exceptions.RequestException as e:
            logger.error(f"Request failed: {e}")
            raise TransportError(f"Request failed: {e}", original_exception=e) from e

        if response.status_code >= 400:
            logger.error(f"API responded with status {response.status_code}: {response.text[:200]}")
            raise TransportError(
                f"API responded with HTTP {response.status_code}",
                status_code=response.status_code
            )

        return response.content


def decode_response(body: bytes) -> Any:
    """
    Parse a response body as JSON

    Raises:
        DecodeError: body is empty, not UTF-8 or not valid JSON
    """
    try:
        return json.loads(body)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.error(f"Invalid JSON response from API: {e}")
        raise DecodeError(f"Invalid JSON response from API: {e}", original_exception=e) from e
