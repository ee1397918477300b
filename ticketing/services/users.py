import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from ticketing.core.errors import ConflictError
from ticketing.core.locks import entity_lock
from ticketing.models.events import Event
from ticketing.models.reservations import Reservation
from ticketing.models.users import User
from ticketing.schemas.users import UserCreate, UserUpdate
from ticketing.services.common import commit_or_conflict, get_or_raise, has_rows

logger = logging.getLogger(__name__)

USER_NOT_FOUND = "User not found."
USERNAME_TAKEN = "A user with the specified username already exists."


def _username_taken(db: Session, username: str, exclude_id: Optional[int] = None) -> bool:
    stmt = select(User.id).where(User.username == username)
    if exclude_id is not None:
        stmt = stmt.where(User.id != exclude_id)
    return db.scalar(stmt) is not None


def create_user(db: Session, payload: UserCreate) -> User:
    if _username_taken(db, payload.username):
        raise ConflictError(USERNAME_TAKEN)

    user = User(username=payload.username, firstname=payload.firstname, lastname=payload.lastname)
    db.add(user)
    commit_or_conflict(db, USERNAME_TAKEN)
    db.refresh(user)
    logger.info("Created user id=%s username=%s", user.id, user.username)
    return user


def get_user(db: Session, user_id: int) -> User:
    return get_or_raise(db, User, user_id, USER_NOT_FOUND)


def update_user(db: Session, payload: UserUpdate) -> User:
    user = get_or_raise(db, User, payload.id, USER_NOT_FOUND)
    if _username_taken(db, payload.username, exclude_id=user.id):
        raise ConflictError(USERNAME_TAKEN)

    user.username = payload.username
    user.firstname = payload.firstname
    user.lastname = payload.lastname
    commit_or_conflict(db, USERNAME_TAKEN)
    db.refresh(user)
    logger.info("Updated user id=%s", user.id)
    return user


def delete_user(db: Session, user_id: int) -> None:
    """
    Delete a user that holds no reservations.

    Holds the user's lock so a concurrent reservation cannot attach to a row
    that is being removed.
    """
    with entity_lock(f"user:{user_id}"):
        user = get_or_raise(db, User, user_id, USER_NOT_FOUND)
        if has_rows(db, Reservation.user_id, user_id):
            raise ConflictError("User has reservations, therefore cannot be deleted.")

        db.delete(user)
        db.commit()
    logger.info("Deleted user id=%s", user_id)


def list_users(db: Session, event_id: Optional[int] = None) -> list[User]:
    """All users, or the users holding a reservation for event_id."""
    stmt = select(User).order_by(User.id)
    if event_id is not None:
        get_or_raise(db, Event, event_id, "The eventID does not exist.")
        stmt = stmt.where(User.id.in_(select(Reservation.user_id).where(Reservation.event_id == event_id)))
    return list(db.scalars(stmt))
