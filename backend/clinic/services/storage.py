"""
Helpers shared by the data-access services.
"""
import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from clinic.exceptions import StorageError

logger = logging.getLogger(__name__)


def commit(db: Session) -> None:
    """Commit the session; on failure roll back and raise StorageError."""
    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Commit failed: {e}")
        raise StorageError(str(getattr(e, "orig", None) or e)) from e
