"""Supabase implementation for bookings."""

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID

from supabase import Client

from photo_studio.adapters.supabase_errors import unique_violation_as_conflict
from photo_studio.domain.bookings import Booking, NewBooking
from photo_studio.services.bookings import BookingRepository

BOOKINGS_TABLE = "bookings"


@dataclass
class SupabaseBookingRepository(BookingRepository):
    """Supabase-backed repository for session bookings."""

    client: Client

    def create_booking(self, booking: NewBooking, created_at: datetime) -> Booking:
        """Insert a pending booking and return it."""
        payload = {
            "client_name": booking.client_name,
            "phone": booking.phone,
            "email": booking.email,
            "session_type": booking.session_type,
            "preferred_date": booking.preferred_date.isoformat(),
            "notes": booking.notes,
            "status": "pending",
            "created_at": created_at.isoformat(),
        }
        with unique_violation_as_conflict():
            response = self.client.table(BOOKINGS_TABLE).insert(payload).execute()
        if not response.data:
            raise RuntimeError("Failed to create booking")
        return _parse_booking(response.data[0])

    def get_booking(self, booking_id: UUID) -> Booking | None:
        """Return a booking by id, if present."""
        response = (
            self.client.table(BOOKINGS_TABLE)
            .select("*")
            .eq("id", str(booking_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_booking(response.data[0])

    def get_bookings(self, booking_ids: list[UUID]) -> list[Booking]:
        """Return the bookings matching the given ids."""
        if not booking_ids:
            return []
        response = (
            self.client.table(BOOKINGS_TABLE)
            .select("*")
            .in_("id", [str(booking_id) for booking_id in booking_ids])
            .execute()
        )
        return [_parse_booking(row) for row in response.data or []]

    def list_bookings(self) -> list[Booking]:
        """Return all bookings, newest first."""
        response = (
            self.client.table(BOOKINGS_TABLE)
            .select("*")
            .order("created_at", desc=True)
            .execute()
        )
        return [_parse_booking(row) for row in response.data or []]

    def list_booked_dates(self) -> list[date]:
        """Return preferred dates of bookings that are not cancelled."""
        response = (
            self.client.table(BOOKINGS_TABLE)
            .select("preferred_date")
            .neq("status", "cancelled")
            .execute()
        )
        return [
            date.fromisoformat(str(row["preferred_date"])[:10])
            for row in response.data or []
            if row.get("preferred_date")
        ]


def _parse_booking(row: dict[str, object]) -> Booking:
    """Parse a bookings row into a domain model."""
    return Booking(
        id=UUID(str(row["id"])),
        client_name=str(row.get("client_name", "")),
        phone=str(row.get("phone", "")),
        email=str(row.get("email", "")),
        session_type=row["session_type"],
        preferred_date=date.fromisoformat(str(row["preferred_date"])[:10]),
        notes=str(row.get("notes") or ""),
        status=row.get("status", "pending"),
        created_at=datetime.fromisoformat(str(row["created_at"])),
    )
