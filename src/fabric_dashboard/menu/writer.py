"""Coalescing write queue for menu orders.

Each user has at most one save in flight and one pending slot. Submitting
while a save is running replaces the pending order, so rapid reorders
collapse into a write of the latest order only.
"""

from __future__ import annotations

import asyncio

import structlog

from fabric_dashboard.menu.store import MenuOrderStore, SaveResult

logger = structlog.get_logger()


class CoalescingMenuWriter:
    def __init__(self, store: MenuOrderStore):
        self._store = store
        self._pending: dict[str, list[str]] = {}
        self._tasks: dict[str, asyncio.Task] = {}
        self.last_results: dict[str, SaveResult] = {}

    def submit(self, user_id: str, order: list[str]) -> None:
        """Queue ``order`` for persistence. Must be called from a running event loop."""
        self._pending[user_id] = list(order)
        task = self._tasks.get(user_id)
        if task is None or task.done():
            self._tasks[user_id] = asyncio.get_running_loop().create_task(
                self._drain(user_id)
            )

    async def _drain(self, user_id: str) -> None:
        while user_id in self._pending:
            order = self._pending.pop(user_id)
            result = await self._store.save(user_id, order)
            self.last_results[user_id] = result
            if not result.ok:
                logger.warning("menu_order.save.failed", user_id=user_id, error=result.error)

    def is_idle(self, user_id: str) -> bool:
        task = self._tasks.get(user_id)
        return user_id not in self._pending and (task is None or task.done())

    async def flush(self) -> None:
        """Wait until every queued order has been written."""
        while True:
            running = [task for task in self._tasks.values() if not task.done()]
            if not running:
                break
            await asyncio.gather(*running)
        self._tasks.clear()
