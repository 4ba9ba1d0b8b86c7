"""MetaGenieAPI facade.

The facade owns the transport and gateway and exposes one attribute per
endpoint family, so callers never wire HTTPClient, RequestGateway and the
host Environment together by hand.

Example:
    >>> async with MetaGenieAPI(environment=InMemoryEnvironment()) as api:
    ...     recent = await api.posts.recent(limit=5)
    ...     thread = await api.ai.generate_thread("Launch week recap")
"""

from __future__ import annotations

import logging
from typing import Any

from ..config import ClientConfig, get_config
from ..core.enums import Platform
from ..runtime.environment import Environment, InMemoryEnvironment
from ..runtime.rest import HTTPClient, RequestGateway
from .resources import (
    AccountsResource,
    AIResource,
    AnalyticsResource,
    AuthResource,
    CreditsResource,
    DashboardResource,
    MediaResource,
    PostsResource,
    ScheduleResource,
    oauth_connect_url,
)

logger = logging.getLogger(__name__)


class MetaGenieAPI:
    """High-level entry point to the remote API."""

    def __init__(
        self,
        *,
        environment: Environment | None = None,
        config: ClientConfig | None = None,
        http: HTTPClient | None = None,
        gateway: RequestGateway | None = None,
    ) -> None:
        """Initialize the API facade.

        Args:
            environment: Host capability (defaults to an InMemoryEnvironment)
            config: Client configuration (defaults to ``get_config()``)
            http: Transport to use; created from ``config`` if omitted
            gateway: Fully built gateway; overrides ``http`` and ``environment``
        """
        self._config = config or get_config()
        self._owns_http = http is None and gateway is None
        if gateway is not None:
            self._gateway = gateway
            self._http = gateway.http
        else:
            self._http = http or HTTPClient(
                self._config.api_base_url, timeout=self._config.timeout
            )
            self._gateway = RequestGateway(
                self._http,
                environment or InMemoryEnvironment(),
                platform_url=self._config.platform_url,
            )
        self._closed = False

        self.auth = AuthResource(self._gateway)
        self.dashboard = DashboardResource(self._gateway)
        self.accounts = AccountsResource(self._gateway)
        self.posts = PostsResource(self._gateway)
        self.schedule = ScheduleResource(self._gateway)
        self.analytics = AnalyticsResource(self._gateway)
        self.credits = CreditsResource(self._gateway)
        self.ai = AIResource(self._gateway)
        self.media = MediaResource(self._gateway)

    @property
    def gateway(self) -> RequestGateway:
        return self._gateway

    def oauth_connect_url(self, platform: Platform | str, return_url: str) -> str:
        return oauth_connect_url(self._config.api_base_url, platform, return_url)

    # --- Lifecycle -----------------------------------------------------------

    async def close(self) -> None:
        """Close the API and clean up resources."""
        if self._closed:
            return
        self._closed = True
        logger.debug("Closing MetaGenieAPI")
        if self._owns_http:
            await self._http.close()

    async def __aenter__(self) -> MetaGenieAPI:
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()
