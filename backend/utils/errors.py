# backend/utils/errors.py
import logging
from typing import Literal, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from utils.audit import write_log

logger = logging.getLogger(__name__)

FailureKind = Literal["fetch", "mutation"]

# Clients only ever see one of these two messages
GENERIC_MESSAGES = {
    "fetch": "Failed to load data",
    "mutation": "Failed to save changes",
}


class DataAccessError(Exception):
    """A read or write against the database failed."""

    def __init__(self, kind: FailureKind, resource: str):
        self.kind = kind
        self.resource = resource
        super().__init__(GENERIC_MESSAGES[kind])

    @property
    def message(self) -> str:
        return GENERIC_MESSAGES[self.kind]


def fetch_failed(db: Session, resource: str) -> DataAccessError:
    """Roll back and log the exception being handled; return the error to raise."""
    db.rollback()
    logger.exception("Error loading %s", resource)
    return DataAccessError("fetch", resource)


def _write_log_guarded(db: Session, **kwargs) -> None:
    # The audited change is already settled; a lost entry only gets logged
    try:
        write_log(db, **kwargs)
    except SQLAlchemyError as log_e:
        db.rollback()
        logger.exception("Failed to write audit log after %s: %s", kwargs.get("action"), log_e)


def mutation_failed(db: Session, resource: str, action: str, meta: Optional[dict] = None) -> DataAccessError:
    db.rollback()
    logger.exception("Error during %s on %s", action, resource)
    _write_log_guarded(db, action=action, resource=resource, status="FAIL", meta=meta)
    return DataAccessError("mutation", resource)


def log_success(db: Session, *, action: str, resource: str, ip: Optional[str] = None, meta: Optional[dict] = None) -> None:
    """Audit a committed mutation without failing the request."""
    _write_log_guarded(db, action=action, resource=resource, status="SUCCESS", ip=ip, meta=meta)
