"""Single-flight coordination of session refreshes.

Architecture:
    One RefreshCoordinator is owned by each RequestGateway. It holds the
    in-flight flag and a FIFO of waiter futures, one per caller that hit a
    401 while a refresh was already running. When the refresh settles the
    queue is drained in enqueue order, resolving or rejecting every waiter.

Concurrency:
    The coordinator relies on the single-threaded asyncio model: ``begin()``
    is synchronous, so a caller that observed ``in_flight`` as False and
    called ``begin()`` cannot be interleaved with another caller doing the
    same.
"""

from __future__ import annotations

import asyncio
import logging
from collections import deque

logger = logging.getLogger(__name__)


class RefreshCoordinator:
    """In-flight flag plus queue of callers waiting for the refresh outcome."""

    def __init__(self) -> None:
        self._in_flight = False
        self._waiters: deque[asyncio.Future[None]] = deque()

    @property
    def in_flight(self) -> bool:
        return self._in_flight

    @property
    def pending(self) -> int:
        """Number of callers currently queued behind the refresh."""
        return len(self._waiters)

    def begin(self) -> None:
        """Mark a refresh as started.

        Raises:
            RuntimeError: If a refresh is already in flight
        """
        if self._in_flight:
            raise RuntimeError("A session refresh is already in flight")
        self._in_flight = True

    async def wait(self) -> None:
        """Suspend until the in-flight refresh settles.

        Raises:
            Exception: The refresh error when the refresh failed
        """
        future: asyncio.Future[None] = asyncio.get_running_loop().create_future()
        self._waiters.append(future)
        logger.debug("auth_refresh_waiter_queued", extra={"pending": len(self._waiters)})
        await future

    def resolve(self) -> None:
        """Settle the refresh successfully and release every waiter."""
        self._in_flight = False
        released = self._drain(None)
        logger.debug("auth_refresh_waiters_released", extra={"count": released})

    def reject(self, error: BaseException) -> None:
        """Settle the refresh as failed and fail every waiter with ``error``."""
        self._in_flight = False
        rejected = self._drain(error)
        logger.debug(
            "auth_refresh_waiters_rejected",
            extra={"count": rejected, "error_type": type(error).__name__},
        )

    def _drain(self, error: BaseException | None) -> int:
        settled = 0
        while self._waiters:
            future = self._waiters.popleft()
            # Waiters cancelled by their callers are already done
            if future.done():
                continue
            if error is None:
                future.set_result(None)
            else:
                future.set_exception(error)
            settled += 1
        return settled
