"""Request/Response schemas for the FastAPI endpoints."""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator

from fabric_dashboard.models.menu import MenuItem
from fabric_dashboard.models.order import FabricOrder, OrderStats
from fabric_dashboard.models.provisioning import AccountResult


class MenuResponse(BaseModel):
    user_id: Optional[str] = None
    status: str  # "loading" | "ready"
    order: list[str]
    items: list[MenuItem]


class MenuMoveRequest(BaseModel):
    item_id: str
    direction: Literal["up", "down", "top", "bottom"]


class MenuOrderRequest(BaseModel):
    order: list[str] = Field(min_length=1, description="Menu item ids in display order")

    @field_validator("order")
    @classmethod
    def _unique_ids(cls, order: list[str]) -> list[str]:
        if len(set(order)) != len(order):
            raise ValueError("menu item ids must be unique")
        return order


class OrderView(FabricOrder):
    status_kind: str  # "ok" | "in_progress" | "pending" | "other"


class OrderListResponse(BaseModel):
    query: str = ""
    total: int
    orders: list[OrderView]


class OrderStatsResponse(OrderStats):
    pass


class AccountResultsResponse(BaseModel):
    success: bool
    results: list[AccountResult] = Field(default_factory=list)
    error: Optional[str] = None
