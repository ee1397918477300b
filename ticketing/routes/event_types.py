from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ticketing.database.db import get_db
from ticketing.schemas.common import MessageOut
from ticketing.schemas.event_types import EventTypeCreate, EventTypeOut
from ticketing.schemas.validators import MAX_INTEGER
from ticketing.services import event_types as event_type_service

router = APIRouter(prefix="/api/event-type", tags=["event types"])


@router.post("/create", response_model=EventTypeOut)
def create_event_type(payload: EventTypeCreate, db: Session = Depends(get_db)):
    return event_type_service.create_event_type(db, payload)


@router.delete("/delete", response_model=MessageOut)
def delete_event_type(event_type_id: int = Query(alias="id", ge=0, le=MAX_INTEGER), db: Session = Depends(get_db)):
    event_type_service.delete_event_type(db, event_type_id)
    return {"message": "OK."}


@router.get("", response_model=list[EventTypeOut])
def list_event_types(db: Session = Depends(get_db)):
    return event_type_service.list_event_types(db)
