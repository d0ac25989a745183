from typing import Generator

from sqlalchemy.orm import Session

from app.db.base import SessionLocal


def get_db() -> Generator[Session, None, None]:
    """
    Dependency providing one database session per request

    The session is closed once the request has been handled.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
