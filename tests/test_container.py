"""Tests for container wiring."""

from photo_studio.adapters.supabase_booking_repository import (
    SupabaseBookingRepository,
)
from photo_studio.adapters.supabase_order_repository import SupabaseOrderRepository
from photo_studio.containers import build_container


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)

    assert isinstance(container.booking_service.repository, SupabaseBookingRepository)
    assert isinstance(
        container.order_service.order_repository, SupabaseOrderRepository
    )
    assert (
        container.order_service.booking_repository
        is container.booking_service.repository
    )
    assert container.booking_service.timezone == settings.business_timezone
