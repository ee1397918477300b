
import logging
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from ticketing.core.errors import ConflictError, NotFoundError, ValidationError
from ticketing.core.locks import entity_locks
from ticketing.models.events import Event
from ticketing.models.reservations import Reservation
from ticketing.models.users import User
from ticketing.services.common import commit_or_conflict, get_or_raise, parse_id_list

logger = logging.getLogger(__name__)

RESERVATION_NOT_FOUND = "Reservation does not exist."
ALREADY_RESERVED = "User already has a reservation for this event."


def create_reservation(db: Session, *, user_id: int, event_id: int) -> Reservation:
    """
    Reserve one slot of an event for a user.

    The event and user locks are held across the duplicate check, the
    capacity count and the insert, so two requests for the last slot cannot
    both pass the capacity check.
    """
    with entity_locks(f"event:{event_id}", f"user:{user_id}"):
        return _create_reservation_locked(db, event_id, user_id)


def _create_reservation_locked(db: Session, event_id: int, user_id: int) -> Reservation:
    event = get_or_raise(db, Event, event_id, "The eventID does not exist.")
    get_or_raise(db, User, user_id, "The userID does not exist.")

    existing = db.scalar(
        select(Reservation.id).where(Reservation.user_id == user_id, Reservation.event_id == event_id)
    )
    if existing is not None:
        raise ConflictError(ALREADY_RESERVED)

    reserved = db.scalar(select(func.count(Reservation.id)).where(Reservation.event_id == event_id))
    if int(reserved or 0) >= event.max_participants:
        raise ValidationError("No slots available for this event.")

    reservation = Reservation(event_id=event_id, user_id=user_id)
    db.add(reservation)
    commit_or_conflict(db, ALREADY_RESERVED)
    db.refresh(reservation)
    logger.info("Created reservation id=%s user=%s event=%s", reservation.id, user_id, event_id)
    return reservation


def get_reservation(db: Session, reservation_id: int) -> Reservation:
    return get_or_raise(db, Reservation, reservation_id, RESERVATION_NOT_FOUND)


def delete_reservation(db: Session, reservation_id: int) -> None:
    reservation = get_or_raise(db, Reservation, reservation_id, RESERVATION_NOT_FOUND)
    db.delete(reservation)
    db.commit()
    logger.info("Deleted reservation id=%s", reservation_id)


def _require_all(db: Session, column, ids: list[int], message: str) -> None:
    found = set(db.scalars(select(column).where(column.in_(ids))))
    missing = [i for i in ids if i not in found]
    if missing:
        raise NotFoundError(f"{message}: {', '.join(str(i) for i in missing)}")


def list_reservations(
    db: Session, *, user_ids: Optional[str] = None, event_ids: Optional[str] = None
) -> list[Reservation]:
    """
    All reservations, or those of the listed users, or those for the listed
    events. The two filters are mutually exclusive.
    """
    parsed_users = parse_id_list(user_ids, "userIDs")
    parsed_events = parse_id_list(event_ids, "eventIDs")
    if parsed_users is not None and parsed_events is not None:
        raise ValidationError("The userIDs and eventIDs parameters cannot be provided together.")

    stmt = select(Reservation).order_by(Reservation.id)
    if parsed_users is not None:
        _require_all(db, User.id, parsed_users, "The userID does not exist")
        stmt = stmt.where(Reservation.user_id.in_(parsed_users))
    elif parsed_events is not None:
        _require_all(db, Event.id, parsed_events, "The eventID does not exist")
        stmt = stmt.where(Reservation.event_id.in_(parsed_events))
    return list(db.scalars(stmt))
