from sqlalchemy import BigInteger, Float, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ticketing.database.db import Base


class Event(Base):
    __tablename__ = "events"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    event_type_id: Mapped[int] = mapped_column(ForeignKey("event_types.id"), nullable=False, index=True)
    organizer_id: Mapped[int] = mapped_column(ForeignKey("organizers.id"), nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    price: Mapped[float] = mapped_column(Float, nullable=False)
    # epoch milliseconds
    date_time: Mapped[int] = mapped_column(BigInteger, nullable=False)
    location_latitude: Mapped[float] = mapped_column(Float, nullable=False)
    location_longitude: Mapped[float] = mapped_column(Float, nullable=False)
    max_participants: Mapped[int] = mapped_column(Integer, nullable=False)

    event_type: Mapped["EventType"] = relationship(back_populates="events")
    organizer: Mapped["Organizer"] = relationship(back_populates="events")
    reservations: Mapped[list["Reservation"]] = relationship(back_populates="event")
