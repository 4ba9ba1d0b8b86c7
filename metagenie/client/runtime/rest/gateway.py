"""Request gateway with transparent session recovery.

Architecture:
    RequestGateway sits between the API resource groups and the HTTPClient.
    For every call it:
    - Injects (or strips) the team-scope header from host storage
    - Dispatches through the HTTPClient
    - On a 401, refreshes the session once and replays the request

    Concurrent 401s are folded into a single refresh call by the owned
    RefreshCoordinator; callers arriving while a refresh runs are queued and
    replayed after it settles.

Failure Classification:
    - 401 on the refresh endpoint: terminal, redirect to login and raise
    - 401 on a recoverable request: refresh, then replay once with is_retry
    - Anything else: returned or raised unchanged

See Also:
    - RefreshCoordinator: In-flight flag and waiter queue
    - LoginRedirector: Login redirect with cooldown
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from ...config import (
    NON_REFRESHABLE_AUTH_PATHS,
    REFRESH_PATH,
    TEAM_CONTEXT_STORAGE_KEY,
    TEAM_HEADER,
)
from ...core.enums import HttpMethod, StorageScope
from ...core.exceptions import AuthenticationError, AuthRefreshInterruptedError, ClientError
from ...core.request import OutboundRequest
from ...models.response import APIResponse
from ...models.team import TeamContext
from ..environment import Environment
from ..redirect import LoginRedirector
from .http_client import HTTPClient
from .refresh import RefreshCoordinator

logger = logging.getLogger(__name__)


def is_non_refreshable_auth_path(path: str) -> bool:
    return any(path.startswith(prefix) for prefix in NON_REFRESHABLE_AUTH_PATHS)


class RequestGateway:
    """Executes API calls with retry-once-on-401 semantics and team scoping."""

    def __init__(
        self,
        http: HTTPClient,
        environment: Environment,
        *,
        redirector: LoginRedirector | None = None,
        coordinator: RefreshCoordinator | None = None,
        platform_url: str | None = None,
    ) -> None:
        """Initialize the gateway.

        Args:
            http: Transport used for every dispatch, including refreshes
            environment: Host capability for storage reads and navigation
            redirector: Login redirector (built from ``environment`` if omitted)
            coordinator: Refresh coordinator (a fresh one per gateway if omitted)
            platform_url: Configured platform base URL for the default redirector
        """
        self._http = http
        self._env = environment
        self._redirector = redirector or LoginRedirector(environment, platform_url=platform_url)
        self._coordinator = coordinator or RefreshCoordinator()

    @property
    def http(self) -> HTTPClient:
        return self._http

    @property
    def coordinator(self) -> RefreshCoordinator:
        return self._coordinator

    @property
    def redirector(self) -> LoginRedirector:
        return self._redirector

    def team_context(self) -> TeamContext:
        return TeamContext.from_storage(self._env.read(StorageScope.LOCAL, TEAM_CONTEXT_STORAGE_KEY))

    def scoped_headers(self, headers: Mapping[str, str]) -> dict[str, str]:
        """Request headers with the team-scope header set or removed."""
        scoped = {k: v for k, v in headers.items() if k.lower() != TEAM_HEADER}
        team = self.team_context()
        if team.team_id:
            scoped[TEAM_HEADER] = team.team_id
        return scoped

    async def send(self, request: OutboundRequest) -> APIResponse:
        """Dispatch ``request``, recovering from an expired session if possible."""
        try:
            return await self._dispatch(request)
        except AuthenticationError as e:
            return await self._handle_unauthorized(request, e)

    async def get(
        self,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> APIResponse:
        return await self.send(
            OutboundRequest(HttpMethod.GET, path, query=params, headers=headers or {})
        )

    async def post(
        self,
        path: str,
        json_body: Any = None,
        *,
        headers: Mapping[str, str] | None = None,
        skip_auth_recovery: bool = False,
    ) -> APIResponse:
        return await self.send(
            OutboundRequest(
                HttpMethod.POST,
                path,
                body=json_body,
                headers=headers or {},
                skip_auth_recovery=skip_auth_recovery,
            )
        )

    async def patch(
        self, path: str, json_body: Any = None, *, headers: Mapping[str, str] | None = None
    ) -> APIResponse:
        return await self.send(
            OutboundRequest(HttpMethod.PATCH, path, body=json_body, headers=headers or {})
        )

    async def delete(self, path: str, *, headers: Mapping[str, str] | None = None) -> APIResponse:
        return await self.send(OutboundRequest(HttpMethod.DELETE, path, headers=headers or {}))

    async def _dispatch(self, request: OutboundRequest) -> APIResponse:
        headers = self.scoped_headers(request.headers)
        return await self._http.request(
            request.method.value,
            request.path,
            params=request.query,
            json_body=request.body,
            form=request.form,
            headers=headers,
        )

    async def _handle_unauthorized(
        self, request: OutboundRequest, error: AuthenticationError
    ) -> APIResponse:
        path = request.pathname

        if path.startswith(REFRESH_PATH):
            logger.warning("auth_refresh_rejected", extra={"path": path})
            self._redirector.force_login_redirect()
            raise error

        if (
            request.is_retry
            or request.skip_auth_recovery
            or is_non_refreshable_auth_path(path)
        ):
            raise error

        if self._coordinator.in_flight:
            await self._coordinator.wait()
            logger.debug("auth_replay_after_wait", extra={"path": path})
            return await self.send(request.as_retry())

        self._coordinator.begin()
        logger.info("auth_refresh_started", extra={"path": path})
        try:
            await self.send(OutboundRequest(HttpMethod.POST, REFRESH_PATH, skip_auth_recovery=True))
        except ClientError as refresh_error:
            logger.warning(
                "auth_refresh_failed",
                extra={"error_type": type(refresh_error).__name__, "error": str(refresh_error)},
            )
            self._coordinator.reject(refresh_error)
            self._redirector.force_login_redirect()
            raise error from refresh_error
        except BaseException:
            # Cancelled or unexpected failure: settle waiters before propagating
            self._coordinator.reject(AuthRefreshInterruptedError("Session refresh did not complete"))
            raise

        self._coordinator.resolve()
        logger.info("auth_refresh_succeeded", extra={"path": path})
        return await self.send(request.as_retry())
