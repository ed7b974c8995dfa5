"""FastAPI route handlers for the dashboard API."""

from __future__ import annotations

import structlog
from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse

from fabric_dashboard.api.dependencies import get_menu_session
from fabric_dashboard.api.schemas import (
    AccountResultsResponse,
    MenuMoveRequest,
    MenuOrderRequest,
    MenuResponse,
    OrderListResponse,
    OrderStatsResponse,
    OrderView,
)
from fabric_dashboard.config import settings
from fabric_dashboard.menu.catalog import MENU_CATALOG, catalog_ids
from fabric_dashboard.menu.session import MenuOrderSession
from fabric_dashboard.models.menu import MenuItem
from fabric_dashboard.orders.queries import classify_status, compute_stats, search_orders
from fabric_dashboard.orders.sample_data import SAMPLE_ORDERS
from fabric_dashboard.tools.supabase_admin import create_demo_users, reset_demo_passwords

logger = structlog.get_logger()

router = APIRouter(prefix="/api/v1")


def _menu_response(session: MenuOrderSession) -> MenuResponse:
    return MenuResponse(
        user_id=session.user_id,
        status=session.status,
        order=session.order,
        items=session.ordered_items(),
    )


# ---------------------------------------------------------------------------
# Menu
# ---------------------------------------------------------------------------


@router.get("/menu/catalog", response_model=list[MenuItem])
async def get_menu_catalog():
    return list(MENU_CATALOG)


@router.get("/menu", response_model=MenuResponse)
async def get_anonymous_menu():
    """Default menu for visitors without a session."""
    session = await get_menu_session(None)
    return _menu_response(session)


@router.get("/menu/{user_id}", response_model=MenuResponse)
async def get_user_menu(user_id: str):
    session = await get_menu_session(user_id)
    return _menu_response(session)


@router.post("/menu/{user_id}/move", response_model=MenuResponse)
async def move_menu_item(user_id: str, request: MenuMoveRequest):
    """Reorder one item. The new order is returned before it is persisted."""
    if request.item_id not in catalog_ids():
        raise HTTPException(status_code=404, detail=f"Unknown menu item {request.item_id}")

    session = await get_menu_session(user_id)
    session.move(request.item_id, request.direction)

    logger.info(
        "menu.moved",
        user_id=user_id,
        item_id=request.item_id,
        direction=request.direction,
    )
    return _menu_response(session)


@router.put("/menu/{user_id}", response_model=MenuResponse)
async def replace_menu_order(user_id: str, request: MenuOrderRequest):
    session = await get_menu_session(user_id)
    session.set_order(request.order)
    logger.info("menu.replaced", user_id=user_id, order=request.order)
    return _menu_response(session)


# ---------------------------------------------------------------------------
# Orders
# ---------------------------------------------------------------------------


@router.get("/orders", response_model=OrderListResponse)
async def list_orders(q: str = ""):
    matches = search_orders(SAMPLE_ORDERS, q)
    return OrderListResponse(
        query=q,
        total=len(matches),
        orders=[
            OrderView(**order.model_dump(), status_kind=classify_status(order.pp_status))
            for order in matches
        ],
    )


@router.get("/orders/stats", response_model=OrderStatsResponse)
async def get_order_stats():
    return OrderStatsResponse(**compute_stats(SAMPLE_ORDERS).model_dump())


# ---------------------------------------------------------------------------
# Admin: demo accounts
# ---------------------------------------------------------------------------


def _require_supabase() -> None:
    if not settings.supabase_url or not settings.supabase_service_role_key:
        raise HTTPException(status_code=503, detail="Supabase is not configured")


@router.post("/admin/demo-users", response_model=AccountResultsResponse)
async def provision_demo_users():
    _require_supabase()
    try:
        results = await create_demo_users()
    except Exception as exc:
        logger.exception("demo_users.create.failed")
        return JSONResponse(
            status_code=500,
            content=AccountResultsResponse(success=False, error=str(exc)).model_dump(),
        )
    return AccountResultsResponse(success=True, results=results)


@router.post("/admin/demo-users/reset-passwords", response_model=AccountResultsResponse)
async def reset_passwords():
    _require_supabase()
    try:
        results = await reset_demo_passwords()
    except Exception as exc:
        logger.exception("demo_users.reset_passwords.failed")
        return JSONResponse(
            status_code=500,
            content=AccountResultsResponse(success=False, error=str(exc)).model_dump(),
        )
    return AccountResultsResponse(success=True, results=results)
