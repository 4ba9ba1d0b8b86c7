"""Custom exception hierarchy."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..models.response import ErrorPayload


class ClientError(Exception):
    """Base exception for all library errors."""

    pass


class APIError(ClientError):
    """Non-2xx response from the remote API.

    Carries the HTTP status and, when the body followed the
    ``{"error": ..., "code": ...}`` convention, the decoded error payload.
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        *,
        code: str | None = None,
        payload: ErrorPayload | None = None,
        url: str | None = None,
        data: Any = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.code = code
        self.payload = payload
        self.url = url
        self.data = data


class AuthenticationError(APIError):
    """Session rejected by the remote API (HTTP 401)."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(message, status_code=401, **kwargs)


class TransportError(ClientError):
    """Request never produced an HTTP response (connection reset, DNS, ...)."""

    def __init__(self, message: str, url: str | None = None) -> None:
        super().__init__(message)
        self.url = url


class RequestTimeoutError(TransportError):
    """Request exceeded the transport timeout."""

    pass


class AuthRefreshInterruptedError(ClientError):
    """In-flight session refresh was cancelled before it settled."""

    pass
