"""Domain models for digital album orders."""

from dataclasses import dataclass
from datetime import datetime
from typing import Literal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from photo_studio.domain.bookings import Booking
from photo_studio.domain.validation import EMAIL_PATTERN

PackageType = Literal["basic", "premium", "full"]
OrderStatus = Literal["pending", "confirmed", "processing", "completed", "cancelled"]


@dataclass(frozen=True)
class DigitalAlbumOrder:
    """Represents a persisted digital album order."""

    id: UUID
    booking_id: UUID
    customer_email: str
    customer_name: str
    package_type: PackageType
    status: OrderStatus
    notes: str
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class OrderWithBooking:
    """An order joined with the booking it references, when requested."""

    order: DigitalAlbumOrder
    booking: Booking | None = None


class OrderRequest(BaseModel):
    """Raw digital album order submission."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    booking_id: str | None = None
    customer_email: str | None = None
    customer_name: str | None = None
    package_type: str | None = None
    notes: str | None = None


class NewOrder(BaseModel):
    """Validated order fields ready to be stored."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )

    booking_id: UUID
    customer_email: str = Field(pattern=EMAIL_PATTERN)
    customer_name: str = Field(min_length=1)
    package_type: PackageType
    notes: str = ""

    @field_validator("customer_email")
    @classmethod
    def _lowercase_email(cls, value: str) -> str:
        return value.lower()
