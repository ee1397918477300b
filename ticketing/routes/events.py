from typing import Optional

from fastapi import APIRouter, Depends, Path, Query
from sqlalchemy.orm import Session

from ticketing.database.db import get_db
from ticketing.schemas.common import MessageOut
from ticketing.schemas.events import EventCreate, EventOut, EventUpdate
from ticketing.schemas.validators import MAX_INTEGER
from ticketing.services import events as event_service

router = APIRouter(prefix="/api/event", tags=["events"])


@router.post("/create", response_model=EventOut)
def create_event(payload: EventCreate, db: Session = Depends(get_db)):
    return event_service.create_event(db, payload)


@router.put("/update", response_model=EventOut)
def update_event(payload: EventUpdate, db: Session = Depends(get_db)):
    return event_service.update_event(db, payload)


@router.delete("/delete", response_model=MessageOut)
def delete_event(event_id: int = Query(alias="id", ge=0, le=MAX_INTEGER), db: Session = Depends(get_db)):
    event_service.delete_event(db, event_id)
    return {"message": "Event deleted successfully."}


@router.get("", response_model=list[EventOut])
def list_events(
    organizer_id: Optional[int] = Query(None, alias="organizerID", ge=0, le=MAX_INTEGER),
    event_type_id: Optional[int] = Query(None, alias="eventTypeID", ge=0, le=MAX_INTEGER),
    date_time: Optional[int] = Query(None, alias="dateTime", le=MAX_INTEGER),
    user_ids: Optional[str] = Query(None, alias="userIDs"),
    db: Session = Depends(get_db),
):
    return event_service.list_events(
        db,
        organizer_id=organizer_id,
        event_type_id=event_type_id,
        date_time=date_time,
        user_ids=user_ids,
    )


@router.get("/{event_id}", response_model=EventOut)
def get_event(event_id: int = Path(ge=0, le=MAX_INTEGER), db: Session = Depends(get_db)):
    return event_service.get_event(db, event_id)
