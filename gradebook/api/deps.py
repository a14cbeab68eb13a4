# gradebook/api/deps.py
from fastapi import HTTPException

from gradebook.core.exceptions import DataIntegrityError, NotFoundError
from gradebook.db.session import SessionLocal


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def http_error(exc: Exception) -> HTTPException:
    if isinstance(exc, NotFoundError):
        return HTTPException(status_code=404, detail=str(exc))
    if isinstance(exc, DataIntegrityError):
        return HTTPException(status_code=400, detail=exc.reason)
    return HTTPException(status_code=500, detail="Internal error")
