"""
UK Coronavirus Dashboard API client

Builds validated queries for https://api.coronavirus.data.gov.uk/v1/data and
returns the decoded JSON payload.

Main Components:
- Cov19API: query builder with validated filters and structure fields
- build_url: query URL composition
- RequestsTransport / ApiConfig: HTTP transport and its settings

Usage:
    from uk_covid19 import Cov19API

    api = Cov19API()
    api.set_filter("areaType", "nation")
    api.set_filter("areaName", "england")
    api.set_structure("date")
    api.set_structure("newCasesByPublishDate", "cases")
    payload = api.send_request()
"""

from .client import ApiConfig, RequestsTransport, decode_response
from .errors import (
    CovidApiError,
    DecodeError,
    ErrorCategory,
    InvalidFilter,
    InvalidFilterValue,
    InvalidStructure,
    RequestError,
    TransportError,
    ValidationError,
)
from .query import Cov19API
from .registry import AreaType, Filters, Structures, contains, describe, members
from .url import ENDPOINT, build_url
from .version import __version__

__all__ = [
    # Builder
    "Cov19API",
    "build_url",
    "ENDPOINT",
    # Transport
    "ApiConfig",
    "RequestsTransport",
    "decode_response",
    # Registry
    "Filters",
    "AreaType",
    "Structures",
    "members",
    "contains",
    "describe",
    # Errors
    "CovidApiError",
    "ErrorCategory",
    "ValidationError",
    "InvalidFilter",
    "InvalidFilterValue",
    "InvalidStructure",
    "RequestError",
    "TransportError",
    "DecodeError",
    "__version__",
]
