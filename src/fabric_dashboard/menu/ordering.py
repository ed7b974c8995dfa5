"""Menu ordering primitives.

All functions are pure: they take an identifier sequence and return a new
list, leaving the input untouched. Unknown identifiers produce an unchanged
copy of the order.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from fabric_dashboard.models.menu import MenuItem


def move_up(order: Sequence[str], item_id: str) -> list[str]:
    """Swap ``item_id`` with its predecessor."""
    new_order = list(order)
    if item_id not in new_order:
        return new_order
    index = new_order.index(item_id)
    if index > 0:
        new_order[index - 1], new_order[index] = new_order[index], new_order[index - 1]
    return new_order


def move_down(order: Sequence[str], item_id: str) -> list[str]:
    """Swap ``item_id`` with its successor."""
    new_order = list(order)
    if item_id not in new_order:
        return new_order
    index = new_order.index(item_id)
    if index < len(new_order) - 1:
        new_order[index], new_order[index + 1] = new_order[index + 1], new_order[index]
    return new_order


def move_to_top(order: Sequence[str], item_id: str) -> list[str]:
    if item_id not in order:
        return list(order)
    return [item_id] + [i for i in order if i != item_id]


def move_to_bottom(order: Sequence[str], item_id: str) -> list[str]:
    if item_id not in order:
        return list(order)
    return [i for i in order if i != item_id] + [item_id]


def materialize(order: Iterable[str], catalog: Iterable[MenuItem]) -> list[MenuItem]:
    """Resolve identifiers to catalog entries in order.

    Identifiers without a catalog entry are dropped. Catalog entries missing
    from ``order`` are not appended.
    """
    by_id = {item.id: item for item in catalog}
    return [by_id[item_id] for item_id in order if item_id in by_id]


MOVES = {
    "up": move_up,
    "down": move_down,
    "top": move_to_top,
    "bottom": move_to_bottom,
}
