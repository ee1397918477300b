from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ticketing.database.db import get_db
from ticketing.schemas.common import MessageOut
from ticketing.schemas.organizers import OrganizerCreate, OrganizerOut
from ticketing.schemas.validators import MAX_INTEGER
from ticketing.services import organizers as organizer_service

router = APIRouter(prefix="/api/organizer", tags=["organizers"])


@router.post("/create", response_model=OrganizerOut)
def create_organizer(payload: OrganizerCreate, db: Session = Depends(get_db)):
    return organizer_service.create_organizer(db, payload)


@router.delete("/delete", response_model=MessageOut)
def delete_organizer(organizer_id: int = Query(alias="id", ge=0, le=MAX_INTEGER), db: Session = Depends(get_db)):
    organizer_service.delete_organizer(db, organizer_id)
    return {"message": "OK."}


@router.get("", response_model=list[OrganizerOut])
def list_organizers(
    has_events: Optional[str] = Query(None, alias="hasEvents"),
    db: Session = Depends(get_db),
):
    return organizer_service.list_organizers(db, has_events)
