"""Outbound request model.

Architecture:
    OutboundRequest is the unit the RequestGateway dispatches, classifies and
    replays. It is a frozen dataclass: the gateway never mutates a request,
    it derives the replay through ``as_retry()`` which only flips the retry
    flag, so method, path, query and body are preserved by construction.

Design Decisions:
    - Multipart bodies are stored as field descriptions, not as an
      ``aiohttp.FormData``; a FormData can only be serialised once and a
      replay has to send the body again.
    - ``pathname`` mirrors what the gateway needs for auth-path matching:
      the path without query string, host or scheme.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import Any
from urllib.parse import urlsplit

from .enums import HttpMethod


@dataclass(frozen=True)
class MultipartField:
    """Single field of a multipart/form-data body."""

    name: str
    value: bytes | str
    filename: str | None = None
    content_type: str | None = None


@dataclass(frozen=True)
class OutboundRequest:
    """A call to the remote API as issued by a caller.

    Attributes:
        method: HTTP verb
        path: Path relative to the API base (absolute URLs are accepted)
        query: Query parameters; ``None`` values are dropped at dispatch
        body: JSON-serialisable body
        headers: Per-request header overrides
        form: Multipart fields; takes precedence over ``body`` when set
        is_retry: Set once the request has been replayed after a refresh
        skip_auth_recovery: Never attempt session recovery for this request
    """

    method: HttpMethod
    path: str
    query: Mapping[str, Any] | None = None
    body: Any = None
    headers: Mapping[str, str] = field(default_factory=dict)
    form: tuple[MultipartField, ...] | None = None
    is_retry: bool = False
    skip_auth_recovery: bool = False

    @property
    def pathname(self) -> str:
        """Path component used for auth-path matching."""
        raw = self.path or ""
        if raw.startswith(("http://", "https://")):
            return urlsplit(raw).path
        return raw.split("?", 1)[0]

    def as_retry(self) -> OutboundRequest:
        """Copy of this request flagged as a post-refresh replay."""
        return replace(self, is_retry=True)

    def with_headers(self, headers: Mapping[str, str]) -> OutboundRequest:
        return replace(self, headers=dict(headers))
