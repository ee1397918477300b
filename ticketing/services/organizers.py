import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from ticketing.core.errors import ConflictError, ValidationError
from ticketing.core.locks import entity_lock
from ticketing.models.events import Event
from ticketing.models.organizers import Organizer
from ticketing.schemas.organizers import OrganizerCreate
from ticketing.services.common import commit_or_conflict, get_or_raise, has_rows

logger = logging.getLogger(__name__)

NAME_TAKEN = "An organizer with the specified name already exists."
ID_OR_NAME_TAKEN = "The organizer could not be stored: its id or name is already in use."


def create_organizer(db: Session, payload: OrganizerCreate) -> Organizer:
    if payload.id is not None and db.get(Organizer, payload.id) is not None:
        raise ConflictError("An organizer with the specified id already exists.")
    if db.scalar(select(Organizer.id).where(Organizer.name == payload.name)) is not None:
        raise ConflictError(NAME_TAKEN)

    organizer = Organizer(name=payload.name)
    if payload.id is not None:
        organizer.id = payload.id
    db.add(organizer)
    commit_or_conflict(db, ID_OR_NAME_TAKEN)
    db.refresh(organizer)
    logger.info("Created organizer id=%s name=%s", organizer.id, organizer.name)
    return organizer


def delete_organizer(db: Session, organizer_id: int) -> None:
    with entity_lock(f"organizer:{organizer_id}"):
        organizer = get_or_raise(db, Organizer, organizer_id, "Organizer not found.")
        if has_rows(db, Event.organizer_id, organizer_id):
            raise ConflictError("Organizer has events, therefore it cannot be deleted.")

        db.delete(organizer)
        db.commit()
    logger.info("Deleted organizer id=%s", organizer_id)


def parse_has_events(raw: Optional[str]) -> bool:
    if raw is None or raw == "" or raw == "false":
        return False
    if raw == "true":
        return True
    raise ValidationError("hasEvents must be true, false or nothing.")


def list_organizers(db: Session, has_events: Optional[str] = None) -> list[Organizer]:
    """All organizers, or only those owning at least one event when has_events is "true"."""
    stmt = select(Organizer).order_by(Organizer.id)
    if parse_has_events(has_events):
        stmt = stmt.where(Organizer.id.in_(select(Event.organizer_id)))
    return list(db.scalars(stmt))
