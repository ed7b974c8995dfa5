from __future__ import annotations

import asyncio

from fabric_dashboard.menu.store import SaveResult
from fabric_dashboard.menu.writer import CoalescingMenuWriter


class GatedStore:
    """Blocks every save until ``gate`` is set."""

    def __init__(self, fail: bool = False):
        self.saved: list[tuple[str, list[str]]] = []
        self.gate: asyncio.Event | None = None
        self.fail = fail

    async def load(self, user_id):
        raise AssertionError("writer never loads")

    async def save(self, user_id, order):
        self.saved.append((user_id, order))
        if self.gate is not None:
            await self.gate.wait()
        if self.fail:
            return SaveResult(ok=False, error="boom")
        return SaveResult(ok=True)


def test_rapid_submits_persist_only_latest_pending_order():
    store = GatedStore()
    writer = CoalescingMenuWriter(store)

    async def scenario():
        store.gate = asyncio.Event()
        writer.submit("u1", ["a", "b", "c"])
        await asyncio.sleep(0)  # first save is now in flight
        writer.submit("u1", ["b", "a", "c"])
        writer.submit("u1", ["c", "b", "a"])
        assert not writer.is_idle("u1")
        store.gate.set()
        await writer.flush()

    asyncio.run(scenario())
    assert store.saved == [("u1", ["a", "b", "c"]), ("u1", ["c", "b", "a"])]
    assert writer.is_idle("u1")


def test_users_are_written_independently():
    store = GatedStore()
    writer = CoalescingMenuWriter(store)

    async def scenario():
        writer.submit("u1", ["a"])
        writer.submit("u2", ["b"])
        await writer.flush()

    asyncio.run(scenario())
    assert sorted(store.saved) == [("u1", ["a"]), ("u2", ["b"])]


def test_submit_copies_the_order():
    store = GatedStore()
    writer = CoalescingMenuWriter(store)
    order = ["a", "b"]

    async def scenario():
        writer.submit("u1", order)
        order.append("c")
        await writer.flush()

    asyncio.run(scenario())
    assert store.saved == [("u1", ["a", "b"])]


def test_failed_save_is_recorded_and_not_retried():
    store = GatedStore(fail=True)
    writer = CoalescingMenuWriter(store)

    async def scenario():
        writer.submit("u1", ["a"])
        await writer.flush()

    asyncio.run(scenario())
    assert store.saved == [("u1", ["a"])]
    assert writer.last_results["u1"] == SaveResult(ok=False, error="boom")
