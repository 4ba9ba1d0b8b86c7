"""Client configuration and shared constants.

This module centralizes URLs, paths, header names and storage keys used by
the gateway, the redirector and the API resource groups, and resolves the
environment-provided base URLs once per process.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from urllib.parse import quote, urlsplit

from dotenv import load_dotenv

API_BASE_URL_ENV = "METAGENIE_API_URL"
PLATFORM_URL_ENV = "METAGENIE_PLATFORM_URL"

DEFAULT_PLATFORM_URL = "https://suitegenie.in"
LOCAL_PLATFORM_URL = "http://localhost:5173"
LOCAL_HOSTNAMES = ("localhost", "127.0.0.1")

REQUEST_TIMEOUT_SECONDS = 30.0

# Auth endpoints
REFRESH_PATH = "/auth/refresh"
LOGOUT_PATH = "/auth/logout"
CALLBACK_PATH = "/auth/callback"
NON_REFRESHABLE_AUTH_PATHS = (REFRESH_PATH, LOGOUT_PATH, CALLBACK_PATH)

TEAM_HEADER = "x-team-id"

# Host storage keys
TEAM_CONTEXT_STORAGE_KEY = "activeTeamContext"
AUTH_REDIRECT_STORAGE_KEY = "meta_genie_auth_redirect_time"
REDIRECT_COOLDOWN_MS = 2000


@dataclass(frozen=True)
class ClientConfig:
    """Environment-provided client settings bundled in a single object."""

    api_base_url: str = ""
    platform_url: str | None = None
    timeout: float = REQUEST_TIMEOUT_SECONDS


@lru_cache(maxsize=1)
def get_config() -> ClientConfig:
    """Load and cache configuration from the environment (and ``.env``)."""
    load_dotenv()

    api_base_url = os.getenv(API_BASE_URL_ENV, "").strip()
    platform_url = os.getenv(PLATFORM_URL_ENV)

    return ClientConfig(
        api_base_url=api_base_url.rstrip("/"),
        platform_url=platform_url,
    )


def resolve_platform_base_url(configured: str | None, current_url: str | None = None) -> str:
    """Resolve the base URL of the platform hosting the login page.

    Resolution order:
        1. Explicit configuration (trimmed, trailing slash removed)
        2. Local dev server when the current page is served from localhost
        3. Production platform

    Examples:
        >>> resolve_platform_base_url(" https://example.test/ ")
        'https://example.test'
        >>> resolve_platform_base_url(None, "http://127.0.0.1:4000/posts")
        'http://localhost:5173'
        >>> resolve_platform_base_url(None, "https://app.example.test/")
        'https://suitegenie.in'
    """
    if configured and configured.strip():
        base = configured.strip()
        return base[:-1] if base.endswith("/") else base

    if current_url:
        if urlsplit(current_url).hostname in LOCAL_HOSTNAMES:
            return LOCAL_PLATFORM_URL

    return DEFAULT_PLATFORM_URL


def build_platform_login_url(redirect_url: str, base_url: str) -> str:
    """Login page URL that sends the user back to ``redirect_url`` afterwards.

    Examples:
        >>> build_platform_login_url("https://app.test/a?b=1", "https://p.test")
        'https://p.test/login?redirect=https%3A%2F%2Fapp.test%2Fa%3Fb%3D1'
    """
    return f"{base_url}/login?redirect={encode_uri_component(redirect_url)}"


def encode_uri_component(value: str) -> str:
    """Percent-encode everything but the unreserved and ``!'()*`` characters."""
    return quote(value, safe="-_.!~*'()")
