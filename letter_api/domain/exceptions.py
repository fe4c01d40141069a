"""Error taxonomy shared by validators, services and exception handlers.

Each error carries a public `message` (safe for clients) and an optional
`details` string that is only exposed in development mode.
"""

from __future__ import annotations

from enum import Enum


class ValidationErrorKind(str, Enum):
    MISSING_FIELD = "MissingField"
    INVALID_SHAPE = "InvalidShape"


class ServiceErrorKind(str, Enum):
    EMPTY_UPSTREAM_RESPONSE = "EmptyUpstreamResponse"
    UPSTREAM_ERROR = "UpstreamError"
    UPSTREAM_UNAVAILABLE = "UpstreamUnavailable"
    UPSTREAM_TIMEOUT = "UpstreamTimeout"


class ValidationError(Exception):
    """Raised when an inbound payload is missing fields or has the wrong shape (400)."""

    status_code = 400

    def __init__(self, kind: ValidationErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message


class MissingFieldError(ValidationError):
    def __init__(self, message: str):
        super().__init__(ValidationErrorKind.MISSING_FIELD, message)


class InvalidShapeError(ValidationError):
    def __init__(self, message: str):
        super().__init__(ValidationErrorKind.INVALID_SHAPE, message)


class InvalidJSONError(Exception):
    """Raised when a request body is not a parseable JSON object."""

    def __init__(self, details: str | None = None):
        super().__init__("Invalid JSON")
        self.details = details


class ServiceError(Exception):
    """Base error for completion/letter failures after validation succeeded."""

    kind: ServiceErrorKind = ServiceErrorKind.UPSTREAM_ERROR
    status_code: int = 500

    def __init__(self, message: str, *, details: str | None = None):
        super().__init__(message)
        self.message = message
        self.details = details


class EmptyUpstreamResponseError(ServiceError):
    """The provider call succeeded but produced no usable completion."""

    kind = ServiceErrorKind.EMPTY_UPSTREAM_RESPONSE
    status_code = 500


class UpstreamError(ServiceError):
    kind = ServiceErrorKind.UPSTREAM_ERROR
    status_code = 500


class UpstreamUnavailableError(ServiceError):
    """The upstream could not be reached at all (connection refused, DNS, ...)."""

    kind = ServiceErrorKind.UPSTREAM_UNAVAILABLE
    status_code = 503


class UpstreamTimeoutError(ServiceError):
    kind = ServiceErrorKind.UPSTREAM_TIMEOUT
    status_code = 504
