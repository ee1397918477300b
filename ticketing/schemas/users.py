from pydantic import BaseModel

from ticketing.schemas.validators import PersonName, ResourceId, Username


class UserCreate(BaseModel):
    username: Username
    firstname: PersonName
    lastname: PersonName


class UserUpdate(UserCreate):
    id: ResourceId


class UserOut(BaseModel):
    id: int
    username: str
    firstname: str
    lastname: str

    class Config:
        from_attributes = True
