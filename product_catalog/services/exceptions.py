"""
Domain exceptions for the service layer.

These exceptions are raised by services where a rule is violated and are
translated into HTTP responses by the app-wide handlers in
product_catalog.api.errors. Nothing between the two catches them.
"""

from __future__ import annotations

from http import HTTPStatus

from product_catalog.schemas.enums import ErrorCode


class DomainError(Exception):
    """Base exception for domain failures carrying their wire status."""

    def __init__(
        self,
        status: HTTPStatus | int,
        code: ErrorCode,
        message: str | None = None,
    ):
        self.status = HTTPStatus(status)
        self.code = code
        self.message = message or code.default_message
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(status={int(self.status)}, code={self.code!s}, message={self.message!r})"


class ResourceNotFoundError(DomainError):
    """Entity not found."""

    def __init__(self, entity: str, identifier: object | None = None):
        self.entity = entity
        self.identifier = identifier
        super().__init__(HTTPStatus.NOT_FOUND, ErrorCode.RESOURCE_NOT_FOUND)


class BadRequestError(DomainError):
    """Input rejected by a business rule."""

    def __init__(self, message: str | None = None, field: str | None = None):
        self.field = field
        super().__init__(HTTPStatus.BAD_REQUEST, ErrorCode.BAD_REQUEST, message)


class StoreError(DomainError):
    """The store refused a write (constraint violation and the like)."""

    def __init__(self, message: str | None = None):
        super().__init__(HTTPStatus.INTERNAL_SERVER_ERROR, ErrorCode.STORE_ERROR, message)
