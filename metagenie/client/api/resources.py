"""Resource groups over the remote API.

Each group is a thin, typed pass-through to RequestGateway: it builds the
path, query and body for one endpoint family and returns the APIResponse.
Session recovery and team scoping happen in the gateway, never here.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from ..chunking import THREADS_POST_MAX_CHARS, parse_generated_segments
from ..config import LOGOUT_PATH, REFRESH_PATH, encode_uri_component
from ..core.enums import HttpMethod, Platform
from ..core.request import MultipartField, OutboundRequest
from ..models.response import APIResponse
from ..runtime.rest import RequestGateway

logger = logging.getLogger(__name__)

THREAD_PROMPT_RULES = (
    "Generate a Threads thread with 4 to 8 posts.\n"
    "Rules:\n"
    "- Each post must be <= {limit} characters.\n"
    "- Return ONLY thread posts separated by ---\n"
    "- No headings, no numbering, no markdown, no extra commentary."
)


def oauth_connect_url(api_base_url: str, platform: Platform | str, return_url: str) -> str:
    """URL that starts the OAuth connect flow for ``platform``.

    Examples:
        >>> oauth_connect_url("https://api.test", Platform.THREADS, "https://app.test/accounts")
        'https://api.test/api/oauth/threads/connect?returnUrl=https%3A%2F%2Fapp.test%2Faccounts'
    """
    platform = Platform(platform)
    return (
        f"{api_base_url}/api/oauth/{platform.value}/connect"
        f"?returnUrl={encode_uri_component(return_url)}"
    )


class _Resource:
    def __init__(self, gateway: RequestGateway) -> None:
        self._gateway = gateway


class AuthResource(_Resource):
    async def validate(self) -> APIResponse:
        return await self._gateway.get("/auth/validate")

    async def refresh(self) -> APIResponse:
        return await self._gateway.post(REFRESH_PATH)

    async def logout(self) -> APIResponse:
        return await self._gateway.post(LOGOUT_PATH)


class DashboardResource(_Resource):
    async def get(self) -> APIResponse:
        return await self._gateway.get("/api/dashboard")


class AccountsResource(_Resource):
    """Connected social accounts."""

    async def list(self) -> APIResponse:
        return await self._gateway.get("/api/accounts")

    async def permissions(self) -> APIResponse:
        return await self._gateway.get("/api/accounts/permissions")

    async def connect_instagram_byok(self, payload: Mapping[str, Any]) -> APIResponse:
        """Connect an Instagram account with user-supplied app credentials."""
        return await self._gateway.post("/api/accounts/instagram/byok-connect", dict(payload))

    async def disconnect(self, account_id: str) -> APIResponse:
        return await self._gateway.delete(f"/api/accounts/{account_id}")


class PostsResource(_Resource):
    async def preflight(self, payload: Mapping[str, Any]) -> APIResponse:
        """Validate a post against platform rules without publishing it."""
        return await self._gateway.post("/api/posts/preflight", dict(payload))

    async def create(self, payload: Mapping[str, Any]) -> APIResponse:
        return await self._gateway.post("/api/posts", dict(payload))

    async def recent(self, limit: int = 10) -> APIResponse:
        return await self._gateway.get("/api/posts/recent", params={"limit": limit})

    async def history(self, params: Mapping[str, Any] | None = None) -> APIResponse:
        return await self._gateway.get("/api/posts/history", params=params or {})

    async def delete(self, post_id: str) -> APIResponse:
        return await self._gateway.delete(f"/api/posts/{post_id}")


class ScheduleResource(_Resource):
    async def list(self, params: Mapping[str, Any] | None = None) -> APIResponse:
        return await self._gateway.get("/api/schedule", params=params or {})

    async def reschedule(self, post_id: str, payload: Mapping[str, Any]) -> APIResponse:
        return await self._gateway.patch(f"/api/schedule/{post_id}/reschedule", dict(payload))

    async def retry(self, post_id: str, payload: Mapping[str, Any] | None = None) -> APIResponse:
        return await self._gateway.post(f"/api/schedule/{post_id}/retry", dict(payload or {}))

    async def cancel(self, post_id: str) -> APIResponse:
        return await self._gateway.delete(f"/api/schedule/{post_id}")


class AnalyticsResource(_Resource):
    async def overview(self, days: int = 30) -> APIResponse:
        return await self._gateway.get("/api/analytics/overview", params={"days": days})


class CreditsResource(_Resource):
    async def balance(self) -> APIResponse:
        return await self._gateway.get("/api/credits/balance")

    async def history(self, params: Mapping[str, Any] | None = None) -> APIResponse:
        return await self._gateway.get("/api/credits/history", params=params)

    async def pricing(self) -> APIResponse:
        return await self._gateway.get("/api/credits/pricing")

    async def refund(self, payload: Mapping[str, Any]) -> APIResponse:
        return await self._gateway.post("/api/credits/refund", dict(payload))


class AIResource(_Resource):
    """Caption and thread generation."""

    async def generate_caption(
        self, prompt: str, platforms: Iterable[Platform | str]
    ) -> APIResponse:
        body = {
            "prompt": prompt,
            "platforms": [Platform(platform).value for platform in platforms],
        }
        return await self._gateway.post("/api/ai/caption", body)

    async def generate_thread(
        self, prompt: str, *, post_limit: int = THREADS_POST_MAX_CHARS
    ) -> list[str]:
        """Generate a Threads chain from ``prompt``.

        The backend only generates captions, so the thread format is asked
        for in the prompt and the returned caption is parsed into posts.

        Returns:
            Ordered posts, each at most ``post_limit`` characters. Fewer than
            two posts means generation did not produce a usable thread.
        """
        request_prompt = f"{prompt.strip()}\n\n{THREAD_PROMPT_RULES.format(limit=post_limit)}"
        response = await self.generate_caption(request_prompt, [Platform.INSTAGRAM])
        generated = response.get("caption") or ""
        posts = parse_generated_segments(generated, limit=post_limit)
        if len(posts) < 2:
            logger.info("thread_generation_unsegmented", extra={"posts": len(posts)})
        return posts


class MediaResource(_Resource):
    async def upload(
        self,
        filename: str,
        content: bytes,
        content_type: str | None = None,
    ) -> APIResponse:
        """Upload a media file; the response carries the hosted ``url``."""
        request = OutboundRequest(
            HttpMethod.POST,
            "/api/media/upload",
            form=(MultipartField("file", content, filename=filename, content_type=content_type),),
        )
        return await self._gateway.send(request)
