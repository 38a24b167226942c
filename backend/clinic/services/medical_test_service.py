"""
Medical test data access.
"""
import logging
from typing import List

from sqlalchemy.orm import Session

from clinic.database import MedicalTest as MedicalTestDB
from clinic.models.medical_test import MedicalTestCreate
from clinic.services.storage import commit

logger = logging.getLogger(__name__)


class MedicalTestService:
    """Service for test results recorded during appointments."""

    @staticmethod
    def list_for_appointment(db: Session, appointment_id: int) -> List[MedicalTestDB]:
        return db.query(MedicalTestDB).filter(
            MedicalTestDB.appointment_id == appointment_id
        ).order_by(MedicalTestDB.id).all()

    @staticmethod
    def create_test(db: Session, appointment_id: int, test_data: MedicalTestCreate) -> MedicalTestDB:
        """Record a test. The appointment is not checked for existence."""
        db_test = MedicalTestDB(appointment_id=appointment_id, **test_data.model_dump())
        db.add(db_test)
        commit(db)
        db.refresh(db_test)

        logger.info(f"Medical test created: {db_test.id} (appointment {appointment_id})")
        return db_test
