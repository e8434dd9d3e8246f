"""Booking endpoints used by the booking form."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request, status

from photo_studio.api.serializers import serialize_booking
from photo_studio.domain.bookings import BookingRequest  # noqa: TC001

if TYPE_CHECKING:
    from photo_studio.containers import AppContainer

router = APIRouter(prefix="/api/bookings", tags=["bookings"])


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_booking(
    payload: BookingRequest, request: Request
) -> dict[str, object]:
    """Submit a new session booking."""
    container: AppContainer = request.app.state.container
    booking = container.booking_service.create(payload)
    return {"success": True, "data": serialize_booking(booking)}


@router.get("")
async def list_bookings(request: Request) -> dict[str, object]:
    """Return every booking, newest first."""
    container: AppContainer = request.app.state.container
    bookings = container.booking_service.list_all()
    return {
        "success": True,
        "count": len(bookings),
        "data": [serialize_booking(booking) for booking in bookings],
    }


@router.get("/available-dates")
async def available_dates(request: Request) -> dict[str, object]:
    """Return dates already taken, so the form can offer the remaining ones."""
    container: AppContainer = request.app.state.container
    return {"success": True, "data": container.booking_service.list_available_dates()}


@router.get("/{booking_id}")
async def get_booking(booking_id: str, request: Request) -> dict[str, object]:
    container: AppContainer = request.app.state.container
    booking = container.booking_service.get(booking_id)
    return {"success": True, "data": serialize_booking(booking)}
