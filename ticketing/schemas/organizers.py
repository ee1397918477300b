from typing import Optional

from pydantic import BaseModel

from ticketing.schemas.validators import EntityName, ResourceId


class OrganizerCreate(BaseModel):
    name: EntityName
    id: Optional[ResourceId] = None


class OrganizerOut(BaseModel):
    id: int
    name: str

    class Config:
        from_attributes = True
