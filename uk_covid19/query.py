"""
Query builder for the coronavirus dashboard API

Filters and structure fields are validated against the closed sets in
registry as they are registered, so only well-formed queries are ever sent.

Usage:
    api = Cov19API()
    api.set_filter("areaType", "nation")
    api.set_filter("areaName", "england")
    api.set_structure("newCasesByPublishDate", "cases")
    payload = api.send_request()
"""

import logging
import re
from typing import Any, Dict, Optional

from .client import ApiConfig, RequestsTransport, decode_response
from .errors import InvalidFilter, InvalidFilterValue, InvalidStructure
from .registry import AreaType, Filters, Structures, contains, members
from .url import build_url

logger = logging.getLogger(__name__)

# YYYY-M[M]-D[D], applied with fullmatch
DATE_PATTERN = re.compile(r"[0-9]{4}-(0?[1-9]|1[012])-(0?[1-9]|[12][0-9]|3[01])")


class Cov19API:
    """
    Accumulates validated filters and structure fields, then sends the query

    Not safe for concurrent mutation; use one instance per thread.
    """

    def __init__(self, transport=None, config: Optional[ApiConfig] = None):
        """
        Args:
            transport: Object with get(url) -> bytes; defaults to RequestsTransport
            config: Endpoint and timeout settings
        """
        self.config = config or ApiConfig()
        self.transport = transport if transport is not None else RequestsTransport(self.config)
        self._filters: Dict[str, str] = {}
        self._structure: Dict[str, str] = {}

    @property
    def filters(self) -> Dict[str, str]:
        return dict(self._filters)

    @property
    def structure(self) -> Dict[str, str]:
        return dict(self._structure)

    @property
    def url(self) -> str:
        return build_url(self._filters, self._structure, self.config.base_url)

    def set_filter(self, name: str, value: str) -> None:
        """
        Register a filter, overwriting any previous value for the same name

        Raises:
            InvalidFilter: name is not a known filter
            InvalidFilterValue: areaType outside the known area types, or a
                date not in YYYY-MM-DD form
        """
        if not contains(Filters, name):
            msg = (
                f"Invalid filter name provided: '{name}'\n"
                f"Needs to be one of: {', '.join(members(Filters))}"
            )
            logger.warning(msg)
            raise InvalidFilter(msg)

        if name == Filters.areaType.value and not contains(AreaType, value):
            msg = (
                f"Invalid area type provided: '{value}'\n"
                f"Needs to be one of: {', '.join(members(AreaType))}"
            )
            logger.warning(msg)
            raise InvalidFilterValue(msg)

        if name == Filters.date.value and not (isinstance(value, str) and DATE_PATTERN.fullmatch(value)):
            msg = f"Invalid date provided: '{value}'\nNeeds to be in the format YYYY-MM-DD"
            logger.warning(msg)
            raise InvalidFilterValue(msg)

        self._filters[name] = value

    def set_structure(self, field: str, alias: Optional[str] = None) -> None:
        """
        Request a metric field, optionally renamed in the response

        Raises:
            InvalidStructure: field is not a known structure field
        """
        if not contains(Structures, field):
            msg = (
                f"Invalid structure field provided: '{field}'\n"
                f"Needs to be one of: {', '.join(members(Structures))}"
            )
            logger.warning(msg)
            raise InvalidStructure(msg)

        self._structure[field] = alias if alias is not None else field

    def clear(self) -> None:
        """Drop all filters and structure fields"""
        self._filters.clear()
        self._structure.clear()

    def send_request(self) -> Any:
        """
        Send the accumulated query and return the decoded JSON payload

        The payload is returned as-is; it is not checked against the
        requested structure.

        Raises:
            TransportError: the GET failed
            DecodeError: the body is not valid JSON
        """
        url = self.url
        logger.info(f"Requesting {url}")
        body = self.transport.get(url)
        return decode_response(body)
