"""Search, status classification and summary stats over fabric orders."""

from __future__ import annotations

from typing import Iterable, Literal

from fabric_dashboard.models.order import FabricOrder, OrderStats

StatusKind = Literal["ok", "in_progress", "pending", "other"]


def search_orders(orders: Iterable[FabricOrder], term: str) -> list[FabricOrder]:
    """Orders with any field whose text contains ``term``, ignoring case."""
    needle = term.lower()
    if not needle:
        return list(orders)
    return [
        order
        for order in orders
        if any(
            needle in str(value).lower()
            for value in order.model_dump().values()
            if value is not None
        )
    ]


def classify_status(pp_status: str) -> StatusKind:
    if pp_status == "OK":
        return "ok"
    if "PP İŞLEMDE" in pp_status:
        return "in_progress"
    if "PP YAPILACAK" in pp_status:
        return "pending"
    return "other"


def compute_stats(orders: Iterable[FabricOrder]) -> OrderStats:
    orders = list(orders)
    priced = [order.price for order in orders if order.price]
    return OrderStats(
        total_orders=len(orders),
        total_requirement_kg=sum(order.requirement_kg for order in orders),
        unique_fabrics=len({order.quality for order in orders}),
        average_price=round(sum(priced) / len(priced), 2) if priced else None,
    )
