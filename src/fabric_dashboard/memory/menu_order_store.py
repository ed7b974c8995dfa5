"""In-memory menu order store for local development and tests."""

from __future__ import annotations

import structlog

from fabric_dashboard.menu.store import LoadResult, SaveResult, coerce_menu_order, default_result

logger = structlog.get_logger()


class InMemoryMenuOrderStore:
    """Keeps ``user_settings``-shaped rows in a dict keyed by user id."""

    def __init__(self):
        self._rows: dict[str, dict] = {}

    async def load(self, user_id: str) -> LoadResult:
        row = self._rows.get(user_id)
        if row is None:
            return default_result()

        order = coerce_menu_order(row.get("menu_order"))
        if order is None:
            logger.warning("menu_order.load.malformed", user_id=user_id, backend="memory")
            return default_result(error="malformed menu_order")
        return LoadResult(order=order, source="stored")

    async def save(self, user_id: str, order: list[str]) -> SaveResult:
        existing = self._rows.get(user_id)
        if existing is not None:
            existing["menu_order"] = list(order)
        else:
            self._rows[user_id] = {"user_id": user_id, "menu_order": list(order)}
        logger.debug("menu_order.saved", user_id=user_id, backend="memory")
        return SaveResult(ok=True)

    def row(self, user_id: str) -> dict | None:
        return self._rows.get(user_id)
