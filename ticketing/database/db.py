from sqlalchemy import create_engine
from sqlalchemy.orm import DeclarativeBase, sessionmaker

from ticketing.core import config


def make_engine(url: str):
    """Create the engine; every store call is bounded by DB_TIMEOUT."""
    if url.startswith("sqlite"):
        return create_engine(
            url,
            connect_args={"check_same_thread": False, "timeout": config.DB_TIMEOUT},
        )
    return create_engine(url, pool_timeout=config.DB_TIMEOUT, pool_pre_ping=True)


engine = make_engine(config.get_database_url())
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


class Base(DeclarativeBase):
    pass


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
