"""JSON serializers for API responses."""

from photo_studio.domain.bookings import Booking
from photo_studio.domain.orders import OrderWithBooking


def serialize_booking(booking: Booking) -> dict[str, object]:
    return {
        "id": str(booking.id),
        "clientName": booking.client_name,
        "phone": booking.phone,
        "email": booking.email,
        "sessionType": booking.session_type,
        "preferredDate": booking.preferred_date.isoformat(),
        "notes": booking.notes,
        "status": booking.status,
        "createdAt": booking.created_at.isoformat(),
    }


def serialize_order(view: OrderWithBooking) -> dict[str, object]:
    """Serialize an order, embedding its booking when it was joined."""
    order = view.order
    return {
        "id": str(order.id),
        "bookingId": str(order.booking_id),
        "booking": serialize_booking(view.booking) if view.booking else None,
        "customerEmail": order.customer_email,
        "customerName": order.customer_name,
        "packageType": order.package_type,
        "status": order.status,
        "notes": order.notes,
        "createdAt": order.created_at.isoformat(),
        "updatedAt": order.updated_at.isoformat(),
    }
