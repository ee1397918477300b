from pydantic import BaseModel, Field

from ticketing.schemas.validators import ResourceId


class ReservationCreate(BaseModel):
    user_id: ResourceId = Field(alias="userID")
    event_id: ResourceId = Field(alias="eventID")

    class Config:
        populate_by_name = True


class ReservationOut(BaseModel):
    id: int
    user_id: int = Field(alias="userID")
    event_id: int = Field(alias="eventID")

    class Config:
        from_attributes = True
        populate_by_name = True
