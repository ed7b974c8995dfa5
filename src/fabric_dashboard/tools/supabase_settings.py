"""Supabase-backed menu order persistence (``user_settings`` table)."""

from __future__ import annotations

import asyncio

import structlog
from supabase import create_client

from fabric_dashboard.config import settings
from fabric_dashboard.menu.store import LoadResult, SaveResult, coerce_menu_order, default_result

logger = structlog.get_logger()


def _get_supabase_client():
    """Create a Supabase client using service_role key."""
    return create_client(settings.supabase_url, settings.supabase_service_role_key)


def _fetch_settings_row_sync(client, user_id: str, columns: str) -> dict | None:
    """Fetch at most one user_settings row for ``user_id`` (sync, runs in thread pool)."""
    response = (
        client.table(settings.settings_table)
        .select(columns)
        .eq("user_id", user_id)
        .maybe_single()
        .execute()
    )
    # Older supabase-py releases return None instead of an empty response
    if response is None:
        return None
    return response.data


def _save_menu_order_sync(client, user_id: str, order: list[str]) -> None:
    """Insert the row if absent, else update only menu_order (sync, runs in thread pool)."""
    existing = _fetch_settings_row_sync(client, user_id, "id")
    table = client.table(settings.settings_table)
    if existing:
        table.update({"menu_order": order}).eq("user_id", user_id).execute()
        logger.info("supabase.menu_order.updated", user_id=user_id)
    else:
        table.insert({"user_id": user_id, "menu_order": order}).execute()
        logger.info("supabase.menu_order.inserted", user_id=user_id)


class SupabaseMenuOrderStore:
    """Reads and writes ``user_settings.menu_order`` through supabase-py.

    The save path is a select followed by an insert or update, so two
    concurrent saves for the same user can interleave. Route writes through
    ``CoalescingMenuWriter`` to keep one save per user in flight.
    """

    def __init__(self, client=None):
        self._client = client

    @property
    def client(self):
        if self._client is None:
            self._client = _get_supabase_client()
        return self._client

    async def load(self, user_id: str) -> LoadResult:
        try:
            row = await asyncio.to_thread(
                _fetch_settings_row_sync, self.client, user_id, "menu_order"
            )
        except Exception as exc:
            logger.exception("menu_order.load.failed", user_id=user_id)
            return default_result(error=str(exc))

        if not row:
            return default_result()

        order = coerce_menu_order(row.get("menu_order"))
        if order is None:
            logger.warning("menu_order.load.malformed", user_id=user_id, backend="supabase")
            return default_result(error="malformed menu_order")
        return LoadResult(order=order, source="stored")

    async def save(self, user_id: str, order: list[str]) -> SaveResult:
        try:
            await asyncio.to_thread(_save_menu_order_sync, self.client, user_id, list(order))
        except Exception as exc:
            logger.exception("menu_order.save.failed", user_id=user_id)
            return SaveResult(ok=False, error=str(exc))
        return SaveResult(ok=True)
