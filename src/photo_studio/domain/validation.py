"""Helpers shared by booking and order validation."""

from datetime import date, datetime
from typing import TypeVar
from uuid import UUID

from pydantic import BaseModel, ValidationError

from photo_studio.domain.errors import ValidationFailure

EMAIL_PATTERN = r"^\S+@\S+\.\S+$"

ModelT = TypeVar("ModelT", bound=BaseModel)


def validate_fields(model: type[ModelT], data: dict[str, object]) -> ModelT:
    """Validate raw fields into a model, raising ValidationFailure on errors."""
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        raise _to_validation_failure(exc) from exc


def parse_calendar_date(raw: object) -> date | None:
    """Parse a date or ISO timestamp string into a calendar date."""
    if isinstance(raw, datetime):
        return raw.date()
    if isinstance(raw, date):
        return raw
    if not isinstance(raw, str) or not raw.strip():
        return None
    value = raw.strip()
    try:
        return date.fromisoformat(value)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(value).date()
    except ValueError:
        return None


def normalize_email(raw: str | None) -> str:
    return (raw or "").strip().lower()


def parse_identifier(raw: str | None) -> UUID | None:
    """Parse a record identifier, returning None when it is malformed."""
    if not raw:
        return None
    try:
        return UUID(raw.strip())
    except ValueError:
        return None


def _to_validation_failure(exc: ValidationError) -> ValidationFailure:
    fields: dict[str, str] = {}
    for error in exc.errors():
        name = ".".join(str(part) for part in error["loc"]) or "body"
        fields.setdefault(name, error["msg"])
    return ValidationFailure(fields)
