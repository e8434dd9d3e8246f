"""Booking submission and lookup."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, date, datetime
from typing import Protocol
from uuid import UUID
from zoneinfo import ZoneInfo

from photo_studio.domain.bookings import Booking, BookingRequest, NewBooking
from photo_studio.domain.errors import (
    DateInPast,
    DuplicateBooking,
    InvalidIdentifier,
    NotFound,
    UniqueConstraintViolation,
)
from photo_studio.domain.validation import (
    parse_calendar_date,
    parse_identifier,
    validate_fields,
)

logger = logging.getLogger(__name__)


class BookingRepository(Protocol):
    """Persistence interface for bookings."""

    def create_booking(self, booking: NewBooking, created_at: datetime) -> Booking:
        """Store a pending booking.

        Raises UniqueConstraintViolation when the email already holds a
        booking on the same date.
        """

    def get_booking(self, booking_id: UUID) -> Booking | None:
        """Return a booking by id, if present."""

    def get_bookings(self, booking_ids: list[UUID]) -> list[Booking]:
        """Return the bookings matching the given ids."""

    def list_bookings(self) -> list[Booking]:
        """Return all bookings, newest first."""

    def list_booked_dates(self) -> list[date]:
        """Return preferred dates of bookings that are not cancelled."""


def utc_now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class BookingService:
    """Application service for client session bookings."""

    repository: BookingRepository
    timezone: str = "UTC"
    clock: Callable[[], datetime] = utc_now

    def create(self, request: BookingRequest) -> Booking:
        """Validate and store a new pending booking."""
        now = self.clock()
        preferred_date = parse_calendar_date(request.preferred_date)
        if preferred_date is not None and preferred_date < self.today(now):
            raise DateInPast

        fields = request.model_dump(by_alias=True, exclude_none=True)
        if preferred_date is not None:
            fields["preferredDate"] = preferred_date
        new_booking = validate_fields(NewBooking, fields)

        try:
            booking = self.repository.create_booking(new_booking, created_at=now)
        except UniqueConstraintViolation as exc:
            logger.warning(
                "Duplicate booking rejected",
                extra={
                    "email": new_booking.email,
                    "preferred_date": new_booking.preferred_date.isoformat(),
                },
            )
            raise DuplicateBooking from exc
        logger.info("Booking created", extra={"booking_id": str(booking.id)})
        return booking

    def get(self, booking_id: str) -> Booking:
        """Return a booking, failing on malformed or unknown ids."""
        parsed = parse_identifier(booking_id)
        if parsed is None:
            raise InvalidIdentifier(booking_id)
        booking = self.repository.get_booking(parsed)
        if booking is None:
            raise NotFound("Booking")
        return booking

    def list_all(self) -> list[Booking]:
        """Return every booking, newest first."""
        return sorted(
            self.repository.list_bookings(),
            key=lambda booking: booking.created_at,
            reverse=True,
        )

    def list_available_dates(self) -> list[str]:
        """Return dates held by a non-cancelled booking; all other dates are free."""
        dates = {booked.isoformat() for booked in self.repository.list_booked_dates()}
        return sorted(dates)

    def today(self, now: datetime | None = None) -> date:
        """Return the current calendar date in the studio time zone."""
        current = now or self.clock()
        return current.astimezone(ZoneInfo(self.timezone)).date()
