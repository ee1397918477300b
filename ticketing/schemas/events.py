from pydantic import BaseModel, Field

from ticketing.schemas.validators import (
    EventName,
    FutureTimestamp,
    Latitude,
    Longitude,
    Participants,
    Price,
    ResourceId,
)


# ---------- Event ----------
class EventCreate(BaseModel):
    event_type_id: ResourceId = Field(alias="eventTypeID")
    organizer_id: ResourceId = Field(alias="organizerID")
    name: EventName
    price: Price
    date_time: FutureTimestamp = Field(alias="dateTime")
    location_latitude: Latitude = Field(alias="locationLatitude")
    location_longitude: Longitude = Field(alias="locationLongitude")
    max_participants: Participants = Field(alias="maxParticipants")

    class Config:
        populate_by_name = True


class EventUpdate(EventCreate):
    id: ResourceId


class EventOut(BaseModel):
    id: int
    event_type_id: int = Field(alias="eventTypeID")
    organizer_id: int = Field(alias="organizerID")
    name: str
    price: float
    date_time: int = Field(alias="dateTime")
    location_latitude: float = Field(alias="locationLatitude")
    location_longitude: float = Field(alias="locationLongitude")
    max_participants: int = Field(alias="maxParticipants")

    class Config:
        from_attributes = True
        populate_by_name = True
