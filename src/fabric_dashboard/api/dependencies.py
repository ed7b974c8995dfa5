"""FastAPI dependency injection — menu store, write queue and per-user sessions."""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from fabric_dashboard.config import use_supabase_store
from fabric_dashboard.memory.menu_order_store import InMemoryMenuOrderStore
from fabric_dashboard.menu.session import MenuOrderSession
from fabric_dashboard.menu.store import MenuOrderStore
from fabric_dashboard.menu.writer import CoalescingMenuWriter

_sessions: dict[str, MenuOrderSession] = {}


@lru_cache(maxsize=1)
def get_menu_store() -> MenuOrderStore:
    """Return a singleton menu order store.

    Uses Supabase when menu_store_backend="supabase" and supabase_url is set,
    otherwise falls back to the in-memory store.
    """
    if use_supabase_store():
        from fabric_dashboard.tools.supabase_settings import SupabaseMenuOrderStore

        return SupabaseMenuOrderStore()
    return InMemoryMenuOrderStore()


@lru_cache(maxsize=1)
def get_menu_writer() -> CoalescingMenuWriter:
    return CoalescingMenuWriter(get_menu_store())


async def get_menu_session(user_id: Optional[str]) -> MenuOrderSession:
    """Return the loaded session for ``user_id``; anonymous sessions are never cached."""
    if user_id is None:
        session = MenuOrderSession(None, get_menu_store(), get_menu_writer())
        await session.load()
        return session

    session = _sessions.get(user_id)
    if session is None:
        session = MenuOrderSession(user_id, get_menu_store(), get_menu_writer())
        _sessions[user_id] = session
    await session.load()
    return session


def reset_menu_state() -> None:
    """Drop cached sessions, store and writer."""
    _sessions.clear()
    get_menu_writer.cache_clear()
    get_menu_store.cache_clear()
