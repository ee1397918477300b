from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ticketing.database.db import Base


class Organizer(Base):
    __tablename__ = "organizers"

    # callers may supply the id; otherwise the store generates it
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)

    events: Mapped[list["Event"]] = relationship(back_populates="organizer")
