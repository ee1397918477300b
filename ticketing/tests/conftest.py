import os

# Keep the application's own engine off the filesystem during tests
os.environ.setdefault("DATABASE_URL", "sqlite://")

import fakeredis
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import Engine, StaticPool, create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.orm.session import Session

from ticketing.database.db import Base, get_db
from ticketing.main import app
from ticketing.models.event_types import EventType
from ticketing.models.events import Event
from ticketing.models.organizers import Organizer
from ticketing.models.users import User
from ticketing.schemas.validators import current_timestamp_ms

ONE_DAY_MS = 86_400_000

# Use an in-memory SQLite database for testing
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"
engine: Engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(autouse=True)
def setup_database():
    """Give every test a fresh set of tables."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


# Override the database dependency
def override_get_db():
    db: Session = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db


@pytest.fixture
def db_session():
    db: Session = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def fake_redis():
    return fakeredis.FakeRedis(server=fakeredis.FakeServer(), decode_responses=True)


@pytest.fixture(autouse=True)
def redis_client(fake_redis, monkeypatch: pytest.MonkeyPatch):
    """Route every entity lock through an in-process fake Redis."""
    monkeypatch.setattr("ticketing.core.locks.get_redis_client", lambda: fake_redis)
    return fake_redis


@pytest.fixture
def future_ms():
    return current_timestamp_ms() + ONE_DAY_MS


@pytest.fixture
def make_event_type(db_session: Session):
    def _make(name: str = "Concert") -> EventType:
        event_type = EventType(name=name)
        db_session.add(event_type)
        db_session.commit()
        db_session.refresh(event_type)
        return event_type

    return _make


@pytest.fixture
def make_organizer(db_session: Session):
    def _make(name: str = "Acme", organizer_id: int | None = None) -> Organizer:
        organizer = Organizer(name=name)
        if organizer_id is not None:
            organizer.id = organizer_id
        db_session.add(organizer)
        db_session.commit()
        db_session.refresh(organizer)
        return organizer

    return _make


@pytest.fixture
def make_user(db_session: Session):
    def _make(username: str = "alice", firstname: str = "Alice", lastname: str = "Smith") -> User:
        user = User(username=username, firstname=firstname, lastname=lastname)
        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)
        return user

    return _make


@pytest.fixture
def make_event(db_session: Session, make_event_type, make_organizer, future_ms):
    def _make(
        name: str = "Show1",
        max_participants: int = 10,
        event_type: EventType | None = None,
        organizer: Organizer | None = None,
        date_time: int | None = None,
    ) -> Event:
        event_type = event_type or make_event_type(f"Type {name}")
        organizer = organizer or make_organizer(f"Org {name}")
        event = Event(
            event_type_id=event_type.id,
            organizer_id=organizer.id,
            name=name,
            price=10,
            date_time=date_time or future_ms,
            location_latitude=40,
            location_longitude=-70,
            max_participants=max_participants,
        )
        db_session.add(event)
        db_session.commit()
        db_session.refresh(event)
        return event

    return _make
