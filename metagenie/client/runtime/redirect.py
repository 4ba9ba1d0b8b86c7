"""Forced login redirect with cooldown protection."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from ..config import (
    AUTH_REDIRECT_STORAGE_KEY,
    CALLBACK_PATH,
    REDIRECT_COOLDOWN_MS,
    build_platform_login_url,
    resolve_platform_base_url,
)
from ..core.enums import StorageScope
from .environment import Environment, current_pathname

logger = logging.getLogger(__name__)


def _now_ms() -> int:
    return int(time.time() * 1000)


class LoginRedirector:
    """Sends the host to the platform login page once the session is lost.

    The timestamp of the last redirect is kept in session-scoped storage so
    the cooldown holds across page loads within one browsing session.
    """

    def __init__(
        self,
        environment: Environment,
        *,
        platform_url: str | None = None,
        cooldown_ms: int = REDIRECT_COOLDOWN_MS,
        clock: Callable[[], int] = _now_ms,
    ) -> None:
        """Initialize redirector.

        Args:
            environment: Host capability used to read the page URL and navigate
            platform_url: Configured platform base URL (``None`` to auto-resolve)
            cooldown_ms: Minimum interval between two redirects
            clock: Millisecond clock, injectable for tests
        """
        self._env = environment
        self._platform_url = platform_url
        self._cooldown_ms = cooldown_ms
        self._clock = clock

    def login_url(self) -> str:
        current = self._env.current_url()
        base = resolve_platform_base_url(self._platform_url, current)
        return build_platform_login_url(current, base)

    def force_login_redirect(self) -> bool:
        """Navigate to the login page unless suppressed.

        Returns:
            True if a navigation was issued
        """
        if CALLBACK_PATH in current_pathname(self._env):
            logger.debug("login_redirect_skipped_on_callback")
            return False

        now = self._clock()
        last = self._last_redirect()
        if last and now - last < self._cooldown_ms:
            logger.info(
                "login_redirect_suppressed",
                extra={"elapsed_ms": now - last, "cooldown_ms": self._cooldown_ms},
            )
            return False

        self._env.write(StorageScope.SESSION, AUTH_REDIRECT_STORAGE_KEY, str(now))
        url = self.login_url()
        logger.warning("login_redirect", extra={"url": url})
        self._env.navigate(url)
        return True

    def _last_redirect(self) -> int:
        raw = self._env.read(StorageScope.SESSION, AUTH_REDIRECT_STORAGE_KEY)
        if not raw:
            return 0
        try:
            return int(float(raw))
        except (ValueError, OverflowError):
            return 0
