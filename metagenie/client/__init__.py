"""MetaGenie Client - networking and text layer of the MetaGenie post composer."""

from .api import MetaGenieAPI, oauth_connect_url
from .chunking import (
    PLATFORM_CAPTION_LIMITS,
    THREADS_MAX_CHAIN_POSTS,
    THREADS_POST_MAX_CHARS,
    SegmentPolicy,
    caption_limit_for,
    estimate_thread_posts,
    parse_generated_segments,
    split_by_limit,
)
from .config import ClientConfig, get_config
from .core import (
    APIError,
    AuthenticationError,
    AuthRefreshInterruptedError,
    ClientError,
    HttpMethod,
    MultipartField,
    OutboundRequest,
    Platform,
    RequestTimeoutError,
    StorageScope,
    TransportError,
)
from .models import APIResponse, ErrorPayload, TeamContext
from .runtime import (
    Environment,
    HTTPClient,
    InMemoryEnvironment,
    LoginRedirector,
    RefreshCoordinator,
    RequestGateway,
)

__version__ = "0.1.0"

__all__ = [
    # API
    "MetaGenieAPI",
    "oauth_connect_url",
    # Runtime
    "RequestGateway",
    "RefreshCoordinator",
    "HTTPClient",
    "LoginRedirector",
    "Environment",
    "InMemoryEnvironment",
    # Text
    "split_by_limit",
    "parse_generated_segments",
    "caption_limit_for",
    "estimate_thread_posts",
    "SegmentPolicy",
    "PLATFORM_CAPTION_LIMITS",
    "THREADS_POST_MAX_CHARS",
    "THREADS_MAX_CHAIN_POSTS",
    # Config
    "ClientConfig",
    "get_config",
    # Core
    "HttpMethod",
    "Platform",
    "StorageScope",
    "OutboundRequest",
    "MultipartField",
    "ClientError",
    "APIError",
    "AuthenticationError",
    "AuthRefreshInterruptedError",
    "TransportError",
    "RequestTimeoutError",
    # Models
    "APIResponse",
    "ErrorPayload",
    "TeamContext",
]
