"""Per-user menu session: resolved order, optimistic reorders, materialized items."""

from __future__ import annotations

import asyncio
from typing import Callable, Literal, Optional, Sequence

import structlog

from fabric_dashboard.menu import ordering
from fabric_dashboard.menu.catalog import MENU_CATALOG, default_order
from fabric_dashboard.menu.store import MenuOrderStore
from fabric_dashboard.menu.writer import CoalescingMenuWriter
from fabric_dashboard.models.menu import MenuItem

logger = structlog.get_logger()

SessionStatus = Literal["loading", "ready"]


class MenuOrderSession:
    """Menu state for one user, or for an anonymous visitor when ``user_id`` is None.

    Reorders update ``order`` immediately and hand the new order to the
    writer. A failed write is logged by the writer and never rolls the local
    order back.
    """

    def __init__(
        self,
        user_id: Optional[str],
        store: MenuOrderStore,
        writer: CoalescingMenuWriter,
        catalog: tuple[MenuItem, ...] = MENU_CATALOG,
    ):
        self.user_id = user_id
        self._store = store
        self._writer = writer
        self._catalog = catalog
        self.order: list[str] = default_order(catalog)
        self.status: SessionStatus = "loading"
        self._load_lock = asyncio.Lock()

    @property
    def is_ready(self) -> bool:
        return self.status == "ready"

    async def load(self) -> None:
        """Resolve the order once; concurrent callers share the first load."""
        if self.is_ready:
            return
        if self.user_id is None:
            self.status = "ready"
            return

        async with self._load_lock:
            # another caller resolved the order while we waited
            if self.is_ready:
                return
            result = await self._store.load(self.user_id)
            self.order = result.order
            self.status = "ready"
        logger.info(
            "menu_session.loaded",
            user_id=self.user_id,
            source=result.source,
            error=result.error,
        )

    def _apply(self, new_order: list[str]) -> list[str]:
        if self.user_id is None:
            return self.order
        self.order = new_order
        self._writer.submit(self.user_id, new_order)
        return self.order

    def _move(self, move: Callable[[Sequence[str], str], list[str]], item_id: str) -> list[str]:
        new_order = move(self.order, item_id)
        if new_order == self.order:
            return self.order
        return self._apply(new_order)

    def move_up(self, item_id: str) -> list[str]:
        return self._move(ordering.move_up, item_id)

    def move_down(self, item_id: str) -> list[str]:
        return self._move(ordering.move_down, item_id)

    def move_to_top(self, item_id: str) -> list[str]:
        return self._move(ordering.move_to_top, item_id)

    def move_to_bottom(self, item_id: str) -> list[str]:
        return self._move(ordering.move_to_bottom, item_id)

    def move(self, item_id: str, direction: str) -> list[str]:
        return self._move(ordering.MOVES[direction], item_id)

    def set_order(self, new_order: Sequence[str]) -> list[str]:
        return self._apply(list(new_order))

    def ordered_items(self) -> list[MenuItem]:
        return ordering.materialize(self.order, self._catalog)
