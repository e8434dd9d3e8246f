"""Domain errors raised by the booking and order services."""


class StudioError(Exception):
    """Base class for errors surfaced to API callers."""

    default_message = "Request failed"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationFailure(StudioError):
    """One or more input fields are missing or malformed."""

    default_message = "Invalid input"

    def __init__(self, fields: dict[str, str]) -> None:
        self.fields = fields
        details = "; ".join(f"{name}: {reason}" for name, reason in fields.items())
        super().__init__(f"Validation failed: {details}" if details else None)


class DateInPast(StudioError):
    default_message = "Cannot book a date in the past"


class DuplicateBooking(StudioError):
    """A booking already holds the same email and date."""

    default_message = "A booking already exists for this email on this date"

    def __init__(self, fields: tuple[str, ...] = ("email", "preferredDate")) -> None:
        self.fields = fields
        super().__init__()


class DuplicateOrder(StudioError):
    default_message = (
        "You've already ordered an album for this booking. "
        "Check your email for details."
    )


class NotFound(StudioError):
    """The requested record does not exist."""

    def __init__(self, entity: str) -> None:
        self.entity = entity
        super().__init__(f"{entity} not found")


class InvalidIdentifier(StudioError):
    """The identifier is not syntactically valid."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Invalid identifier: {value}")


class BookingNotFound(StudioError):
    default_message = "Booking not found. Please check your booking ID."


class BookingNotConfirmed(StudioError):
    default_message = (
        "This booking is not confirmed yet. Please wait for confirmation."
    )


class EmailMismatch(StudioError):
    default_message = (
        "Email doesn't match booking. Please use the email you booked with."
    )


class InternalError(StudioError):
    default_message = "Server error. Please try again later."


class UniqueConstraintViolation(Exception):
    """Raised by repositories when a write breaks a uniqueness constraint."""

    def __init__(self, constraint: str | None = None) -> None:
        self.constraint = constraint
        super().__init__(constraint or "unique constraint violated")
