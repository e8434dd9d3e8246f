"""Digital album order endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING, Annotated

from fastapi import APIRouter, Query, Request, status

from photo_studio.api.serializers import serialize_order
from photo_studio.domain.orders import OrderRequest  # noqa: TC001

if TYPE_CHECKING:
    from photo_studio.containers import AppContainer

router = APIRouter(prefix="/api/digital-album-orders", tags=["orders"])

IncludeBooking = Annotated[bool, Query(alias="includeBooking")]


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_order(payload: OrderRequest, request: Request) -> dict[str, object]:
    """Order a digital album for a confirmed booking."""
    container: AppContainer = request.app.state.container
    created = container.order_service.create(payload)
    return {"success": True, "data": serialize_order(created)}


@router.get("")
async def list_orders(
    request: Request, include_booking: IncludeBooking = True
) -> dict[str, object]:
    """Return every order, newest first."""
    container: AppContainer = request.app.state.container
    orders = container.order_service.list_all(include_booking=include_booking)
    return {
        "success": True,
        "count": len(orders),
        "data": [serialize_order(order) for order in orders],
    }


@router.get("/by-booking/{booking_id}")
async def list_orders_for_booking(
    booking_id: str, request: Request, include_booking: IncludeBooking = True
) -> dict[str, object]:
    """Return the orders placed against one booking."""
    container: AppContainer = request.app.state.container
    orders = container.order_service.list_by_booking(
        booking_id, include_booking=include_booking
    )
    return {
        "success": True,
        "count": len(orders),
        "data": [serialize_order(order) for order in orders],
    }


@router.get("/{order_id}")
async def get_order(
    order_id: str, request: Request, include_booking: IncludeBooking = True
) -> dict[str, object]:
    container: AppContainer = request.app.state.container
    order = container.order_service.get(order_id, include_booking=include_booking)
    return {"success": True, "data": serialize_order(order)}
