from typing import Optional

from fastapi import APIRouter, Depends, Path, Query
from sqlalchemy.orm import Session

from ticketing.database.db import get_db
from ticketing.schemas.common import MessageOut
from ticketing.schemas.users import UserCreate, UserOut, UserUpdate
from ticketing.schemas.validators import MAX_INTEGER
from ticketing.services import users as user_service

router = APIRouter(prefix="/api/user", tags=["users"])


@router.post("/create", response_model=UserOut)
def create_user(payload: UserCreate, db: Session = Depends(get_db)):
    return user_service.create_user(db, payload)


@router.put("/update", response_model=UserOut)
def update_user(payload: UserUpdate, db: Session = Depends(get_db)):
    return user_service.update_user(db, payload)


@router.delete("/delete", response_model=MessageOut)
def delete_user(user_id: int = Query(alias="id", ge=0, le=MAX_INTEGER), db: Session = Depends(get_db)):
    user_service.delete_user(db, user_id)
    return {"message": "User deleted successfully."}


@router.get("", response_model=list[UserOut])
def list_users(
    event_id: Optional[int] = Query(None, alias="eventID", ge=0, le=MAX_INTEGER),
    db: Session = Depends(get_db),
):
    """All users, or the users holding a reservation for eventID."""
    return user_service.list_users(db, event_id)


@router.get("/{user_id}", response_model=UserOut)
def get_user(user_id: int = Path(ge=0, le=MAX_INTEGER), db: Session = Depends(get_db)):
    return user_service.get_user(db, user_id)
