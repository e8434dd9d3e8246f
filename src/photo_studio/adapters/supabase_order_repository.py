"""Supabase implementation for digital album orders."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from photo_studio.adapters.supabase_errors import unique_violation_as_conflict
from photo_studio.domain.orders import DigitalAlbumOrder, NewOrder
from photo_studio.services.orders import OrderRepository

ORDERS_TABLE = "digital_album_orders"


@dataclass
class SupabaseOrderRepository(OrderRepository):
    """Supabase-backed repository for digital album orders."""

    client: Client

    def create_order(
        self, order: NewOrder, created_at: datetime
    ) -> DigitalAlbumOrder:
        """Insert a pending order and return it."""
        timestamp = created_at.isoformat()
        payload = {
            "booking_id": str(order.booking_id),
            "customer_email": order.customer_email,
            "customer_name": order.customer_name,
            "package_type": order.package_type,
            "notes": order.notes,
            "status": "pending",
            "created_at": timestamp,
            "updated_at": timestamp,
        }
        with unique_violation_as_conflict():
            response = self.client.table(ORDERS_TABLE).insert(payload).execute()
        if not response.data:
            raise RuntimeError("Failed to create digital album order")
        return _parse_order(response.data[0])

    def get_order(self, order_id: UUID) -> DigitalAlbumOrder | None:
        """Return an order by id, if present."""
        response = (
            self.client.table(ORDERS_TABLE)
            .select("*")
            .eq("id", str(order_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_order(response.data[0])

    def find_order(
        self, booking_id: UUID, customer_email: str
    ) -> DigitalAlbumOrder | None:
        """Return the order for a booking and email, if present."""
        response = (
            self.client.table(ORDERS_TABLE)
            .select("*")
            .eq("booking_id", str(booking_id))
            .eq("customer_email", customer_email.lower())
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_order(response.data[0])

    def list_orders(self) -> list[DigitalAlbumOrder]:
        """Return all orders, newest first."""
        response = (
            self.client.table(ORDERS_TABLE)
            .select("*")
            .order("created_at", desc=True)
            .execute()
        )
        return [_parse_order(row) for row in response.data or []]

    def list_orders_for_booking(self, booking_id: UUID) -> list[DigitalAlbumOrder]:
        """Return orders referencing a booking, newest first."""
        response = (
            self.client.table(ORDERS_TABLE)
            .select("*")
            .eq("booking_id", str(booking_id))
            .order("created_at", desc=True)
            .execute()
        )
        return [_parse_order(row) for row in response.data or []]


def _parse_order(row: dict[str, object]) -> DigitalAlbumOrder:
    """Parse an orders row into a domain model."""
    created_at = datetime.fromisoformat(str(row["created_at"]))
    updated_raw = row.get("updated_at")
    return DigitalAlbumOrder(
        id=UUID(str(row["id"])),
        booking_id=UUID(str(row["booking_id"])),
        customer_email=str(row.get("customer_email", "")),
        customer_name=str(row.get("customer_name", "")),
        package_type=row["package_type"],
        status=row.get("status", "pending"),
        notes=str(row.get("notes") or ""),
        created_at=created_at,
        updated_at=(
            datetime.fromisoformat(updated_raw)
            if isinstance(updated_raw, str) and updated_raw
            else created_at
        ),
    )
