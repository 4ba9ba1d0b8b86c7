"""REST runtime abstractions."""

from .gateway import RequestGateway
from .http_client import HTTPClient
from .refresh import RefreshCoordinator

__all__ = [
    "HTTPClient",
    "RequestGateway",
    "RefreshCoordinator",
]
