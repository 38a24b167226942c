"""
Doctor data access.
"""
import logging
from typing import List

from sqlalchemy.orm import Session

from clinic.database import Doctor as DoctorDB
from clinic.exceptions import NotFoundError
from clinic.models.doctor import DoctorCreate
from clinic.services.storage import commit

logger = logging.getLogger(__name__)


class DoctorService:
    """Service for doctor records."""

    @staticmethod
    def list_doctors(db: Session) -> List[DoctorDB]:
        return db.query(DoctorDB).order_by(DoctorDB.id).all()

    @staticmethod
    def get_doctor(db: Session, doctor_id: int) -> DoctorDB:
        doctor = db.query(DoctorDB).filter(DoctorDB.id == doctor_id).first()
        if not doctor:
            raise NotFoundError("Doctor")
        return doctor

    @staticmethod
    def create_doctor(db: Session, doctor_data: DoctorCreate) -> DoctorDB:
        db_doctor = DoctorDB(**doctor_data.model_dump())
        db.add(db_doctor)
        commit(db)
        db.refresh(db_doctor)

        logger.info(f"Doctor created: {db_doctor.id}")
        return db_doctor

    @staticmethod
    def delete_doctor(db: Session, doctor_id: int) -> int:
        """Delete a doctor; their appointments are left in place."""
        deleted = db.query(DoctorDB).filter(DoctorDB.id == doctor_id).delete(synchronize_session=False)
        commit(db)

        logger.info(f"Doctor deleted: {doctor_id} ({deleted} row(s))")
        return deleted
