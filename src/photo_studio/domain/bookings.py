"""Domain models for studio session bookings."""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Literal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from photo_studio.domain.validation import EMAIL_PATTERN

SessionType = Literal["newborn", "toddler", "kids", "family"]
BookingStatus = Literal["pending", "confirmed", "cancelled"]


@dataclass(frozen=True)
class Booking:
    """Represents a persisted session booking."""

    id: UUID
    client_name: str
    phone: str
    email: str
    session_type: SessionType
    preferred_date: date
    notes: str
    status: BookingStatus
    created_at: datetime


class BookingRequest(BaseModel):
    """Raw booking submission as sent by the booking form."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    client_name: str | None = None
    phone: str | None = None
    email: str | None = None
    session_type: str | None = None
    preferred_date: str | None = None
    notes: str | None = None


class NewBooking(BaseModel):
    """Validated booking fields ready to be stored."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )

    client_name: str = Field(min_length=1)
    phone: str = Field(min_length=1)
    email: str = Field(pattern=EMAIL_PATTERN)
    session_type: SessionType
    preferred_date: date
    notes: str = ""

    @field_validator("email")
    @classmethod
    def _lowercase_email(cls, value: str) -> str:
        return value.lower()
