import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from ticketing.core.errors import ConflictError
from ticketing.core.locks import entity_lock
from ticketing.models.event_types import EventType
from ticketing.models.events import Event
from ticketing.schemas.event_types import EventTypeCreate
from ticketing.services.common import commit_or_conflict, get_or_raise, has_rows

logger = logging.getLogger(__name__)

NAME_TAKEN = "An event type with the specified name already exists."


def create_event_type(db: Session, payload: EventTypeCreate) -> EventType:
    if db.scalar(select(EventType.id).where(EventType.name == payload.name)) is not None:
        raise ConflictError(NAME_TAKEN)

    event_type = EventType(name=payload.name)
    db.add(event_type)
    commit_or_conflict(db, NAME_TAKEN)
    db.refresh(event_type)
    logger.info("Created event type id=%s name=%s", event_type.id, event_type.name)
    return event_type


def delete_event_type(db: Session, event_type_id: int) -> None:
    with entity_lock(f"event_type:{event_type_id}"):
        event_type = get_or_raise(db, EventType, event_type_id, "Event type not found.")
        if has_rows(db, Event.event_type_id, event_type_id):
            raise ConflictError("Event type has events, therefore it cannot be deleted.")

        db.delete(event_type)
        db.commit()
    logger.info("Deleted event type id=%s", event_type_id)


def list_event_types(db: Session) -> list[EventType]:
    return list(db.scalars(select(EventType).order_by(EventType.id)))
