"""Host environment capability.

The gateway and the login redirector never touch host globals directly;
they receive an Environment that exposes the current page URL, navigation
and the two persisted key scopes.

Architecture:
    Protocol-based design, as with any capability injected into the
    runtime: a browser bridge, a desktop shell or the bundled
    InMemoryEnvironment can be passed interchangeably without a shared
    base class.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Protocol
from urllib.parse import urlsplit

from ..core.enums import StorageScope

logger = logging.getLogger(__name__)


class Environment(Protocol):
    """Capability the runtime needs from its host."""

    def current_url(self) -> str:
        """Full URL of the page the client is running on."""
        ...

    def navigate(self, url: str) -> None:
        """Send the browsing context to ``url``."""
        ...

    def read(self, scope: StorageScope, key: str) -> str | None:
        """Read a persisted value, ``None`` when absent."""
        ...

    def write(self, scope: StorageScope, key: str, value: str) -> None:
        """Persist ``value`` under ``key``."""
        ...


def current_pathname(environment: Environment) -> str:
    return urlsplit(environment.current_url()).path or ""


@dataclass
class InMemoryEnvironment:
    """Environment backed by plain dictionaries.

    Navigation updates ``url`` and is recorded in ``navigations`` so a
    headless caller can observe redirects.
    """

    url: str = "http://localhost/"
    navigations: list[str] = field(default_factory=list)
    local: dict[str, str] = field(default_factory=dict)
    session: dict[str, str] = field(default_factory=dict)

    def current_url(self) -> str:
        return self.url

    def navigate(self, url: str) -> None:
        logger.debug("environment_navigate", extra={"url": url})
        self.navigations.append(url)
        self.url = url

    def read(self, scope: StorageScope, key: str) -> str | None:
        return self._store(scope).get(key)

    def write(self, scope: StorageScope, key: str, value: str) -> None:
        self._store(scope)[key] = value

    def _store(self, scope: StorageScope) -> dict[str, str]:
        if scope == StorageScope.SESSION:
            return self.session
        return self.local
