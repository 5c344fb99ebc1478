"""
Enum definitions for the Product Catalog application.

All enums are defined as StrEnum for JSON serialization compatibility.
"""

from enum import StrEnum
from http import HTTPStatus

__all__ = [
    "ErrorCode",
]


class ErrorCode(StrEnum):
    """
    Closed taxonomy of domain failure kinds.

    Every DomainError carries one of these. Adding a kind means adding a
    member here plus an entry in both tables below; removing a kind that
    clients already match on is a breaking change.
    """

    RESOURCE_NOT_FOUND = "resource_not_found"
    BAD_REQUEST = "bad_request"
    STORE_ERROR = "store_error"
    UNEXPECTED = "unexpected"

    @property
    def default_message(self) -> str:
        """Human-readable message used when an error gives no override."""
        return _DEFAULT_MESSAGES[self]

    @property
    def default_status(self) -> HTTPStatus:
        """HTTP status normally paired with this kind."""
        return _DEFAULT_STATUSES[self]


_DEFAULT_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.RESOURCE_NOT_FOUND: "the requested resource could not be found",
    ErrorCode.BAD_REQUEST: "the request was invalid",
    ErrorCode.STORE_ERROR: "the store rejected the write",
    ErrorCode.UNEXPECTED: "an internal error occurred",
}

_DEFAULT_STATUSES: dict[ErrorCode, HTTPStatus] = {
    ErrorCode.RESOURCE_NOT_FOUND: HTTPStatus.NOT_FOUND,
    ErrorCode.BAD_REQUEST: HTTPStatus.BAD_REQUEST,
    ErrorCode.STORE_ERROR: HTTPStatus.INTERNAL_SERVER_ERROR,
    ErrorCode.UNEXPECTED: HTTPStatus.INTERNAL_SERVER_ERROR,
}
