"""Unit tests for RefreshCoordinator."""

from __future__ import annotations

import asyncio

import pytest

from metagenie.client.runtime.rest import RefreshCoordinator


async def _settle_queue(coordinator: RefreshCoordinator, expected: int) -> None:
    for _ in range(50):
        if coordinator.pending == expected:
            return
        await asyncio.sleep(0)
    raise AssertionError(f"expected {expected} waiters, got {coordinator.pending}")


class TestRefreshCoordinator:
    """Test in-flight flag and waiter queue."""

    def test_initial_state(self):
        coordinator = RefreshCoordinator()
        assert coordinator.in_flight is False
        assert coordinator.pending == 0

    def test_begin_sets_flag(self):
        """Test begin marks a refresh in flight."""
        coordinator = RefreshCoordinator()
        coordinator.begin()
        assert coordinator.in_flight is True

    def test_begin_twice_raises(self):
        """Test only one refresh may be in flight."""
        coordinator = RefreshCoordinator()
        coordinator.begin()
        with pytest.raises(RuntimeError, match="already in flight"):
            coordinator.begin()

    @pytest.mark.asyncio
    async def test_resolve_releases_waiters_in_order(self):
        """Test waiters wake in enqueue order after resolve."""
        coordinator = RefreshCoordinator()
        coordinator.begin()
        woke: list[int] = []

        async def waiter(i: int) -> None:
            await coordinator.wait()
            woke.append(i)

        tasks = [asyncio.create_task(waiter(i)) for i in range(4)]
        await _settle_queue(coordinator, 4)

        coordinator.resolve()
        await asyncio.gather(*tasks)

        assert woke == [0, 1, 2, 3]
        assert coordinator.in_flight is False
        assert coordinator.pending == 0

    @pytest.mark.asyncio
    async def test_reject_fails_every_waiter(self):
        """Test waiters receive the refresh error."""
        coordinator = RefreshCoordinator()
        coordinator.begin()
        tasks = [asyncio.create_task(coordinator.wait()) for _ in range(3)]
        await _settle_queue(coordinator, 3)

        error = RuntimeError("refresh failed")
        coordinator.reject(error)
        results = await asyncio.gather(*tasks, return_exceptions=True)

        assert results == [error, error, error]
        assert coordinator.in_flight is False

    @pytest.mark.asyncio
    async def test_cancelled_waiter_is_skipped(self):
        """Test a waiter cancelled by its caller does not break draining."""
        coordinator = RefreshCoordinator()
        coordinator.begin()
        cancelled = asyncio.create_task(coordinator.wait())
        kept = asyncio.create_task(coordinator.wait())
        await _settle_queue(coordinator, 2)

        cancelled.cancel()
        with pytest.raises(asyncio.CancelledError):
            await cancelled

        coordinator.resolve()
        await kept
        assert kept.done() and kept.exception() is None

    def test_instances_do_not_share_state(self):
        """Test two coordinators are independent."""
        first = RefreshCoordinator()
        second = RefreshCoordinator()
        first.begin()
        assert second.in_flight is False
