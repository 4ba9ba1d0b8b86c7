"""Runtime orchestration components."""

from .environment import Environment, InMemoryEnvironment
from .redirect import LoginRedirector
from .rest import HTTPClient, RefreshCoordinator, RequestGateway

__all__ = [
    "Environment",
    "InMemoryEnvironment",
    "LoginRedirector",
    "HTTPClient",
    "RefreshCoordinator",
    "RequestGateway",
]
