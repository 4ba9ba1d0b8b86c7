"""Core components."""

from .enums import HttpMethod, Platform, StorageScope
from .exceptions import (
    APIError,
    AuthenticationError,
    AuthRefreshInterruptedError,
    ClientError,
    RequestTimeoutError,
    TransportError,
)
from .request import MultipartField, OutboundRequest

__all__ = [
    "HttpMethod",
    "Platform",
    "StorageScope",
    "ClientError",
    "APIError",
    "AuthenticationError",
    "AuthRefreshInterruptedError",
    "TransportError",
    "RequestTimeoutError",
    "MultipartField",
    "OutboundRequest",
]
