from pydantic import BaseModel

from ticketing.schemas.validators import EntityName


class EventTypeCreate(BaseModel):
    name: EntityName


class EventTypeOut(BaseModel):
    id: int
    name: str

    class Config:
        from_attributes = True
