"""Menu order store contract and result values.

Stores never raise: ``load`` and ``save`` report failures through their
return values and the caller decides what to show.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, Optional, Protocol

from fabric_dashboard.menu.catalog import default_order


@dataclass(frozen=True)
class LoadResult:
    order: list[str]
    source: Literal["stored", "default"]
    error: Optional[str] = None


@dataclass(frozen=True)
class SaveResult:
    ok: bool
    error: Optional[str] = None


class MenuOrderStore(Protocol):
    async def load(self, user_id: str) -> LoadResult: ...

    async def save(self, user_id: str, order: list[str]) -> SaveResult: ...


def coerce_menu_order(value: Any) -> list[str] | None:
    """Return ``value`` as an order, or None when it is not a non-empty list of strings."""
    if not isinstance(value, list) or not value:
        return None
    if not all(isinstance(item, str) for item in value):
        return None
    return list(value)


def default_result(error: str | None = None) -> LoadResult:
    return LoadResult(order=default_order(), source="default", error=error)
