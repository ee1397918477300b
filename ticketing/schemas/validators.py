"""
Reusable field types shared by the request schemas.

Each type wraps one validation rule so that the same username, name,
coordinate and timestamp checks apply on every route that accepts the field.
"""
import re
import time
from typing import Annotated

from pydantic import AfterValidator, BeforeValidator, Field

USERNAME_PATTERN = re.compile(r"[A-Za-z0-9]+")
EVENT_NAME_PATTERN = re.compile(r"[A-Za-z0-9 ]+")

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 255

# largest value a 64-bit SQL INTEGER column can hold
MAX_INTEGER = 2**63 - 1


def current_timestamp_ms() -> int:
    """Server time in epoch milliseconds."""
    return int(time.time() * 1000)


def _reject_bool(value):
    if isinstance(value, bool):
        raise ValueError("Expected an integer, not a boolean.")
    return value


def _require_text(value):
    if value is None or (isinstance(value, str) and not value):
        raise ValueError("All parameters must be provided and must be non-empty strings.")
    return value


def _check_username(value: str) -> str:
    if not USERNAME_PATTERN.fullmatch(value):
        raise ValueError("The username must contain only alphanumeric characters.")
    if len(value) < NAME_MIN_LENGTH:
        raise ValueError(f"The username must be at least {NAME_MIN_LENGTH} characters.")
    if len(value) > NAME_MAX_LENGTH:
        raise ValueError(f"The username must be at most {NAME_MAX_LENGTH} characters.")
    return value


def _check_person_name(value: str) -> str:
    if len(value) > NAME_MAX_LENGTH:
        raise ValueError(f"Names must be at most {NAME_MAX_LENGTH} characters.")
    return value


def _check_entity_name(value: str) -> str:
    if not NAME_MIN_LENGTH <= len(value) <= NAME_MAX_LENGTH:
        raise ValueError(f"The name must be between {NAME_MIN_LENGTH} and {NAME_MAX_LENGTH} characters.")
    return value


def _check_event_name(value: str) -> str:
    if not EVENT_NAME_PATTERN.fullmatch(value):
        raise ValueError("The name must contain only letters, numbers, and spaces.")
    return _check_entity_name(value)


def _check_price(value: float) -> float:
    if value < 0:
        raise ValueError("The price must be a non-negative number.")
    return value


def _check_latitude(value: float) -> float:
    if not -90 <= value <= 90:
        raise ValueError("The locationLatitude must be a number between -90 and 90.")
    return value


def _check_longitude(value: float) -> float:
    if not -180 <= value <= 180:
        raise ValueError("The locationLongitude must be a number between -180 and 180.")
    return value


def _check_participants(value: int) -> int:
    if value <= 0:
        raise ValueError("The maxParticipants must be a non-zero positive integer number.")
    return value


def _check_future(value: int) -> int:
    if value <= current_timestamp_ms():
        raise ValueError("Invalid or past date")
    return value


Username = Annotated[str, BeforeValidator(_require_text), AfterValidator(_check_username)]
PersonName = Annotated[str, BeforeValidator(_require_text), AfterValidator(_check_person_name)]
EntityName = Annotated[str, BeforeValidator(_require_text), AfterValidator(_check_entity_name)]
EventName = Annotated[str, BeforeValidator(_require_text), AfterValidator(_check_event_name)]

ResourceId = Annotated[int, BeforeValidator(_reject_bool), Field(ge=0, le=MAX_INTEGER)]
Price = Annotated[float, Field(allow_inf_nan=False), AfterValidator(_check_price)]
Latitude = Annotated[float, Field(allow_inf_nan=False), AfterValidator(_check_latitude)]
Longitude = Annotated[float, Field(allow_inf_nan=False), AfterValidator(_check_longitude)]
Participants = Annotated[int, BeforeValidator(_reject_bool), Field(le=MAX_INTEGER), AfterValidator(_check_participants)]
FutureTimestamp = Annotated[int, BeforeValidator(_reject_bool), Field(le=MAX_INTEGER), AfterValidator(_check_future)]
