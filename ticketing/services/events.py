"""
Event service: referential checks against event types and organizers,
lookups, filtered listing and the reservation delete guard.

Field-level rules (name pattern, price, coordinates, future dateTime,
maxParticipants) are enforced by the request schemas before these functions
run.
"""
import logging
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from ticketing.core.errors import ConflictError, ValidationError
from ticketing.core.locks import entity_lock, entity_locks
from ticketing.models.event_types import EventType
from ticketing.models.events import Event
from ticketing.models.organizers import Organizer
from ticketing.models.reservations import Reservation
from ticketing.schemas.events import EventCreate, EventUpdate
from ticketing.schemas.validators import current_timestamp_ms
from ticketing.services.common import get_or_raise, has_rows, parse_id_list

logger = logging.getLogger(__name__)

EVENT_NOT_FOUND = "Event does not exist."
EVENT_TYPE_MISSING = "The eventTypeID does not exist."
ORGANIZER_MISSING = "The organizerID does not exist."


def _reference_locks(payload: EventCreate):
    return entity_locks(f"organizer:{payload.organizer_id}", f"event_type:{payload.event_type_id}")


def _apply(event: Event, payload: EventCreate) -> None:
    event.event_type_id = payload.event_type_id
    event.organizer_id = payload.organizer_id
    event.name = payload.name
    event.price = payload.price
    event.date_time = payload.date_time
    event.location_latitude = payload.location_latitude
    event.location_longitude = payload.location_longitude
    event.max_participants = payload.max_participants


def create_event(db: Session, payload: EventCreate) -> Event:
    """
    Create an event.

    Raises:
        ValidationError: If eventTypeID or organizerID do not resolve; both
            are client-supplied foreign keys, so this is a client error.
    """
    with _reference_locks(payload):
        if db.get(EventType, payload.event_type_id) is None:
            raise ValidationError(EVENT_TYPE_MISSING)
        if db.get(Organizer, payload.organizer_id) is None:
            raise ValidationError(ORGANIZER_MISSING)

        event = Event()
        _apply(event, payload)
        db.add(event)
        db.commit()
    db.refresh(event)
    logger.info("Created event id=%s name=%s organizer=%s", event.id, event.name, event.organizer_id)
    return event


def update_event(db: Session, payload: EventUpdate) -> Event:
    """
    Replace every field of an existing event.

    Runs under the organizer, event type and event locks so that the
    capacity check cannot interleave with a reservation being created.

    Raises:
        NotFoundError: If the event, its eventTypeID or its organizerID do not resolve.
        ValidationError: If maxParticipants drops below the reservations already held.
    """
    locks = entity_locks(
        f"organizer:{payload.organizer_id}",
        f"event_type:{payload.event_type_id}",
        f"event:{payload.id}",
    )
    with locks:
        event = get_or_raise(db, Event, payload.id, "The event does not exist.")
        get_or_raise(db, EventType, payload.event_type_id, EVENT_TYPE_MISSING)
        get_or_raise(db, Organizer, payload.organizer_id, ORGANIZER_MISSING)

        reserved = db.scalar(select(func.count(Reservation.id)).where(Reservation.event_id == payload.id))
        if reserved > payload.max_participants:
            raise ValidationError(
                f"The maxParticipants cannot be lower than the {reserved} reservations already made."
            )

        _apply(event, payload)
        db.commit()
    db.refresh(event)
    logger.info("Updated event id=%s", event.id)
    return event


def get_event(db: Session, event_id: int) -> Event:
    return get_or_raise(db, Event, event_id, EVENT_NOT_FOUND)


def delete_event(db: Session, event_id: int) -> None:
    with entity_lock(f"event:{event_id}"):
        event = get_or_raise(db, Event, event_id, EVENT_NOT_FOUND)
        if has_rows(db, Reservation.event_id, event_id):
            raise ConflictError("Event has reservations, therefore it cannot be deleted.")

        db.delete(event)
        db.commit()
    logger.info("Deleted event id=%s", event_id)


def list_events(
    db: Session,
    *,
    organizer_id: Optional[int] = None,
    event_type_id: Optional[int] = None,
    date_time: Optional[int] = None,
    user_ids: Optional[str] = None,
) -> list[Event]:
    """
    List events matching every filter given.

    user_ids is a comma-separated list; an event matches when at least one
    of its reservations belongs to a listed user.
    """
    for field, value in (("organizerID", organizer_id), ("eventTypeID", event_type_id)):
        if value is not None and value < 0:
            raise ValidationError(f"{field} cannot be a negative number.")
    if date_time is not None and date_time < current_timestamp_ms():
        raise ValidationError("Invalid or past date")
    parsed_user_ids = parse_id_list(user_ids, "userIDs")

    stmt = select(Event).order_by(Event.id)
    if organizer_id is not None:
        stmt = stmt.where(Event.organizer_id == organizer_id)
    if event_type_id is not None:
        stmt = stmt.where(Event.event_type_id == event_type_id)
    if date_time is not None:
        stmt = stmt.where(Event.date_time == date_time)
    if parsed_user_ids is not None:
        reserved = select(Reservation.event_id).where(Reservation.user_id.in_(parsed_user_ids))
        stmt = stmt.where(Event.id.in_(reserved))
    return list(db.scalars(stmt))
