from typing import Optional

from fastapi import APIRouter, Depends, Path, Query
from sqlalchemy.orm import Session

from ticketing.database.db import get_db
from ticketing.schemas.common import MessageOut
from ticketing.schemas.reservations import ReservationCreate, ReservationOut
from ticketing.schemas.validators import MAX_INTEGER
from ticketing.services import reservations as reservation_service

router = APIRouter(prefix="/api", tags=["reservations"])


@router.post("/reservation/create", response_model=ReservationOut)
def create_reservation(payload: ReservationCreate, db: Session = Depends(get_db)):
    return reservation_service.create_reservation(db, user_id=payload.user_id, event_id=payload.event_id)


@router.get("/reservation/{reservation_id}", response_model=ReservationOut)
def get_reservation(reservation_id: int = Path(ge=0, le=MAX_INTEGER), db: Session = Depends(get_db)):
    return reservation_service.get_reservation(db, reservation_id)


@router.delete("/reservation/delete", response_model=MessageOut)
def delete_reservation(reservation_id: int = Query(alias="id", ge=0, le=MAX_INTEGER), db: Session = Depends(get_db)):
    reservation_service.delete_reservation(db, reservation_id)
    return {"message": "Reservation deleted successfully."}


@router.get("/reservations", response_model=list[ReservationOut])
def list_reservations(
    user_ids: Optional[str] = Query(None, alias="userIDs"),
    event_ids: Optional[str] = Query(None, alias="eventIDs"),
    db: Session = Depends(get_db),
):
    return reservation_service.list_reservations(db, user_ids=user_ids, event_ids=event_ids)
