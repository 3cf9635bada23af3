# /app/db/database.py

from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker

from app.core import config

DATABASE_URL = config.DATABASE_URL

# The 'check_same_thread' argument is only needed for SQLite.
engine_args = {"connect_args": {"check_same_thread": False}} if DATABASE_URL.startswith("sqlite") else {}
engine = create_engine(DATABASE_URL, **engine_args)

if DATABASE_URL.startswith("sqlite"):
    # SQLite leaves foreign keys (and therefore ON DELETE CASCADE) off by default.
    @event.listens_for(engine, "connect")
    def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

# Each instance of this class is a database session.
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db() -> None:
    """Create any missing tables. Used on startup for local development."""
    # Importing the registry makes sure every model is attached to Base.metadata.
    from .base import Base
    Base.metadata.create_all(bind=engine)


def dispose_engine() -> None:
    """Close every pooled connection. Called once on application shutdown."""
    engine.dispose()


# Dependency to get a DB session. This is used in our API routers.
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
