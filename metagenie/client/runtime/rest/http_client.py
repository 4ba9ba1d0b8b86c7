"""HTTP client helper."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping, Sequence
from typing import Any

import aiohttp

from ...config import REQUEST_TIMEOUT_SECONDS
from ...core.exceptions import (
    APIError,
    AuthenticationError,
    RequestTimeoutError,
    TransportError,
)
from ...core.request import MultipartField
from ...models.response import APIResponse, ErrorPayload

logger = logging.getLogger(__name__)


class HTTPClient:
    """Async HTTP client wrapper around a lazily created aiohttp session."""

    def __init__(
        self, base_url: str | None = None, timeout: float = REQUEST_TIMEOUT_SECONDS
    ) -> None:
        self.base_url = base_url.rstrip("/") if base_url else base_url
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self._session: aiohttp.ClientSession | None = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
        return self._session

    def build_url(self, url: str) -> str:
        # If base_url is set and url is relative, combine them
        if self.base_url and not url.startswith("http"):
            return f"{self.base_url}{url}"
        return url

    async def request(
        self,
        method: str,
        url: str,
        *,
        params: Mapping[str, Any] | None = None,
        json_body: Any = None,
        form: Sequence[MultipartField] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> APIResponse:
        """Issue a request and decode the response.

        Raises:
            AuthenticationError: On HTTP 401
            APIError: On any other non-2xx status
            RequestTimeoutError: When the total timeout elapses
            TransportError: On connection-level failures
        """
        full_url = self.build_url(url)
        kwargs: dict[str, Any] = {}
        if form is not None:
            kwargs["data"] = build_form_data(form)
        elif json_body is not None:
            kwargs["json"] = json_body

        try:
            async with self.session.request(
                method,
                full_url,
                params=clean_query(params),
                headers=dict(headers) if headers else None,
                **kwargs,
            ) as response:
                data = await read_payload(response)
                status = response.status
                if status >= 400:
                    raise error_for_status(status, data, full_url)
                return APIResponse(status=status, data=data, headers=dict(response.headers))
        except asyncio.TimeoutError as e:
            logger.warning("http_request_timeout", extra={"method": method, "url": full_url})
            raise RequestTimeoutError(
                f"{method} {full_url} timed out after {self.timeout.total}s", url=full_url
            ) from e
        except aiohttp.ClientError as e:
            logger.warning(
                "http_transport_error",
                extra={"method": method, "url": full_url, "error": str(e)},
            )
            raise TransportError(f"{method} {full_url} failed: {e}", url=full_url) from e

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()


def clean_query(params: Mapping[str, Any] | None) -> dict[str, str] | None:
    """Drop ``None`` values and stringify the rest (booleans as JS does)."""
    if not params:
        return None
    cleaned: dict[str, str] = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, bool):
            cleaned[key] = "true" if value else "false"
        else:
            cleaned[key] = str(value)
    return cleaned


def build_form_data(fields: Sequence[MultipartField]) -> aiohttp.FormData:
    form = aiohttp.FormData()
    for item in fields:
        form.add_field(
            item.name,
            item.value,
            filename=item.filename,
            content_type=item.content_type,
        )
    return form


async def read_payload(response: aiohttp.ClientResponse) -> Any:
    """Decode JSON bodies, fall back to text, ``None`` when empty."""
    if "json" in (response.content_type or ""):
        try:
            return await response.json(content_type=None)
        except ValueError:
            pass
    text = await response.text()
    return text or None


def error_for_status(status: int, data: Any, url: str) -> APIError:
    payload = ErrorPayload.parse(data)
    message = (payload.error if payload else None) or f"HTTP {status}"
    code = payload.code if payload else None
    if status == 401:
        return AuthenticationError(message, code=code, payload=payload, url=url, data=data)
    return APIError(message, status, code=code, payload=payload, url=url, data=data)
