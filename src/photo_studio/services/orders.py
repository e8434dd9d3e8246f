"""Digital album orders placed against confirmed bookings."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from typing import Protocol
from uuid import UUID

from photo_studio.domain.errors import (
    BookingNotConfirmed,
    BookingNotFound,
    DuplicateOrder,
    EmailMismatch,
    NotFound,
    UniqueConstraintViolation,
    ValidationFailure,
)
from photo_studio.domain.orders import (
    DigitalAlbumOrder,
    NewOrder,
    OrderRequest,
    OrderWithBooking,
)
from photo_studio.domain.validation import (
    normalize_email,
    parse_identifier,
    validate_fields,
)
from photo_studio.services.bookings import BookingRepository, utc_now

logger = logging.getLogger(__name__)


class OrderRepository(Protocol):
    """Persistence interface for digital album orders."""

    def create_order(
        self, order: NewOrder, created_at: datetime
    ) -> DigitalAlbumOrder:
        """Store a pending order.

        Raises UniqueConstraintViolation when the booking already has an
        order for the same email.
        """

    def get_order(self, order_id: UUID) -> DigitalAlbumOrder | None:
        """Return an order by id, if present."""

    def find_order(
        self, booking_id: UUID, customer_email: str
    ) -> DigitalAlbumOrder | None:
        """Return the order for a booking and email, if present."""

    def list_orders(self) -> list[DigitalAlbumOrder]:
        """Return all orders, newest first."""

    def list_orders_for_booking(self, booking_id: UUID) -> list[DigitalAlbumOrder]:
        """Return orders referencing a booking, newest first."""


@dataclass
class OrderService:
    """Application service for digital album orders."""

    order_repository: OrderRepository
    booking_repository: BookingRepository
    clock: Callable[[], datetime] = utc_now

    def create(self, request: OrderRequest) -> OrderWithBooking:
        """Cross-check the referenced booking and store a pending order."""
        missing = {
            alias: "Field required"
            for alias, value in (
                ("bookingId", request.booking_id),
                ("customerEmail", request.customer_email),
            )
            if not (value or "").strip()
        }
        if missing:
            raise ValidationFailure(missing)

        booking_id = parse_identifier(request.booking_id)
        booking = (
            self.booking_repository.get_booking(booking_id) if booking_id else None
        )
        if booking is None:
            raise BookingNotFound
        if booking.status != "confirmed":
            raise BookingNotConfirmed

        customer_email = normalize_email(request.customer_email)
        if booking.email.lower() != customer_email:
            logger.warning(
                "Order email does not match booking",
                extra={"booking_id": str(booking.id)},
            )
            raise EmailMismatch
        if self.order_repository.find_order(booking.id, customer_email):
            raise DuplicateOrder

        fields = request.model_dump(by_alias=True, exclude_none=True)
        fields.update(bookingId=booking.id, customerEmail=customer_email)
        new_order = validate_fields(NewOrder, fields)

        try:
            order = self.order_repository.create_order(
                new_order, created_at=self.clock()
            )
        except UniqueConstraintViolation as exc:
            logger.warning(
                "Concurrent duplicate order rejected",
                extra={"booking_id": str(booking.id)},
            )
            raise DuplicateOrder from exc
        logger.info(
            "Digital album order created",
            extra={"order_id": str(order.id), "booking_id": str(booking.id)},
        )
        return OrderWithBooking(order=order, booking=booking)

    def get(self, order_id: str, include_booking: bool = True) -> OrderWithBooking:
        """Return one order, optionally joined with its booking."""
        parsed = parse_identifier(order_id)
        order = self.order_repository.get_order(parsed) if parsed else None
        if order is None:
            raise NotFound("Order")
        return self._with_bookings([order], include_booking)[0]

    def list_all(self, include_booking: bool = True) -> list[OrderWithBooking]:
        """Return every order, newest first."""
        orders = _newest_first(self.order_repository.list_orders())
        return self._with_bookings(orders, include_booking)

    def list_by_booking(
        self, booking_id: str, include_booking: bool = True
    ) -> list[OrderWithBooking]:
        """Return orders for a booking; unknown bookings yield an empty list."""
        parsed = parse_identifier(booking_id)
        if parsed is None:
            return []
        orders = _newest_first(
            self.order_repository.list_orders_for_booking(parsed)
        )
        return self._with_bookings(orders, include_booking)

    def _with_bookings(
        self, orders: list[DigitalAlbumOrder], include_booking: bool
    ) -> list[OrderWithBooking]:
        """Join orders with their bookings through a secondary lookup."""
        if not include_booking or not orders:
            return [OrderWithBooking(order=order) for order in orders]
        booking_ids = list(dict.fromkeys(order.booking_id for order in orders))
        bookings = {
            booking.id: booking
            for booking in self.booking_repository.get_bookings(booking_ids)
        }
        return [
            OrderWithBooking(order=order, booking=bookings.get(order.booking_id))
            for order in orders
        ]


def _newest_first(orders: list[DigitalAlbumOrder]) -> list[DigitalAlbumOrder]:
    return sorted(orders, key=lambda order: order.created_at, reverse=True)
