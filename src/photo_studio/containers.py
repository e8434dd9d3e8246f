"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from photo_studio.adapters.supabase_booking_repository import (
    SupabaseBookingRepository,
)
from photo_studio.adapters.supabase_order_repository import SupabaseOrderRepository
from photo_studio.config import Settings
from photo_studio.services.bookings import BookingService
from photo_studio.services.orders import OrderService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    booking_service: BookingService
    order_service: OrderService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    booking_repository = SupabaseBookingRepository(supabase_client)
    order_repository = SupabaseOrderRepository(supabase_client)
    booking_service = BookingService(
        booking_repository, timezone=resolved_settings.business_timezone
    )
    order_service = OrderService(
        order_repository=order_repository,
        booking_repository=booking_repository,
    )
    return AppContainer(
        settings=resolved_settings,
        booking_service=booking_service,
        order_service=order_service,
    )
