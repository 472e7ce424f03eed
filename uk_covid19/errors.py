"""
Exception hierarchy for the coronavirus dashboard API client

Validation errors are raised when a filter or structure field is registered,
before any network activity. Request errors wrap failures of the HTTP call
and of decoding its body.
"""

from enum import Enum
from typing import Optional


class ErrorCategory(Enum):
    """Categorises client errors"""
    INVALID_FILTER = "invalid_filter"
    INVALID_FILTER_VALUE = "invalid_filter_value"
    INVALID_STRUCTURE = "invalid_structure"
    TRANSPORT = "transport"
    DECODE = "decode"


class CovidApiError(Exception):
    """Base exception class for the API client"""

    category: Optional[ErrorCategory] = None

    def __init__(self, message: str, original_exception: Optional[Exception] = None):
        self.message = message
        self.original_exception = original_exception
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.category is None:
            return self.message
        return f"Type:{self.category.name}, Msg: {self.message}"


class ValidationError(CovidApiError):
    """A filter or structure field was rejected"""


class InvalidFilter(ValidationError):
    category = ErrorCategory.INVALID_FILTER


class InvalidFilterValue(ValidationError):
    category = ErrorCategory.INVALID_FILTER_VALUE


class InvalidStructure(ValidationError):
    category = ErrorCategory.INVALID_STRUCTURE


class RequestError(CovidApiError):
    """Sending the query or reading its response failed"""


class TransportError(RequestError):
    category = ErrorCategory.TRANSPORT

    def __init__(
        self,
        message: str,
        original_exception: Optional[Exception] = None,
        status_code: Optional[int] = None
    ):
        super().__init__(message, original_exception)
        self.status_code = status_code


class DecodeError(RequestError):
    category = ErrorCategory.DECODE
