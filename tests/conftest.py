"""Shared test fixtures."""

import pytest

from photo_studio.config import Settings
from photo_studio.containers import AppContainer
from photo_studio.services.bookings import BookingService
from photo_studio.services.orders import OrderService
from tests.fakes import InMemoryBookingRepository, InMemoryOrderRepository, TickingClock

SERVICE_KEY = (
    "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9."
    "eyJyb2xlIjoic2VydmljZV9yb2xlIn0."
    "c2lnbmF0dXJl"
)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key=SERVICE_KEY,
        environment="test",
    )


@pytest.fixture
def clock() -> TickingClock:
    return TickingClock()


@pytest.fixture
def booking_repository() -> InMemoryBookingRepository:
    return InMemoryBookingRepository()


@pytest.fixture
def order_repository() -> InMemoryOrderRepository:
    return InMemoryOrderRepository()


@pytest.fixture
def booking_service(
    booking_repository: InMemoryBookingRepository, clock: TickingClock
) -> BookingService:
    return BookingService(booking_repository, clock=clock)


@pytest.fixture
def order_service(
    order_repository: InMemoryOrderRepository,
    booking_repository: InMemoryBookingRepository,
    clock: TickingClock,
) -> OrderService:
    return OrderService(
        order_repository=order_repository,
        booking_repository=booking_repository,
        clock=clock,
    )


@pytest.fixture
def container(
    settings: Settings,
    booking_service: BookingService,
    order_service: OrderService,
) -> AppContainer:
    return AppContainer(
        settings=settings,
        booking_service=booking_service,
        order_service=order_service,
    )
