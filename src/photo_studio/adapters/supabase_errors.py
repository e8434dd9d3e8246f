"""Translation of PostgREST errors raised by Supabase writes."""

from collections.abc import Iterator
from contextlib import contextmanager

from postgrest.exceptions import APIError

from photo_studio.domain.errors import UniqueConstraintViolation

UNIQUE_VIOLATION = "23505"


@contextmanager
def unique_violation_as_conflict() -> Iterator[None]:
    """Re-raise Postgres unique violations as UniqueConstraintViolation."""
    try:
        yield
    except APIError as exc:
        if exc.code == UNIQUE_VIOLATION:
            raise UniqueConstraintViolation(exc.message) from exc
        raise
