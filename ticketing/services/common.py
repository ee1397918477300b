from typing import Optional, TypeVar

from sqlalchemy import exists, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ticketing.core.errors import ConflictError, NotFoundError, ValidationError
from ticketing.schemas.validators import MAX_INTEGER

T = TypeVar("T")


def get_or_raise(db: Session, model: type[T], ident: int, message: str) -> T:
    """Load a row by primary key or raise NotFoundError with the given message."""
    row = db.get(model, ident)
    if row is None:
        raise NotFoundError(message)
    return row


def has_rows(db: Session, column, value) -> bool:
    """True when at least one row has column == value."""
    return bool(db.scalar(select(exists().where(column == value))))


def commit_or_conflict(db: Session, message: str) -> None:
    """Commit the session; a constraint violation becomes a ConflictError."""
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise ConflictError(message) from exc


def parse_id_list(raw: Optional[str], field: str) -> Optional[list[int]]:
    """
    Parse a comma-separated id list ("1,2,3").

    Returns None when the parameter is absent or empty. Every item must be a
    non-negative integer that fits a 64-bit column.
    """
    if raw is None or raw.strip() == "":
        return None

    ids = []
    for item in raw.split(","):
        item = item.strip()
        try:
            value = int(item)
        except ValueError:
            raise ValidationError(f"Invalid {field} format") from None
        if value < 0:
            raise ValidationError(f"{field} cannot contain a negative number.")
        if value > MAX_INTEGER:
            raise ValidationError(f"{field} contains an id that is too large.")
        ids.append(value)
    return ids
