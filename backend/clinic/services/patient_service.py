"""
Patient data access.
"""
import logging
from typing import List

from sqlalchemy.orm import Session, selectinload

from clinic.database import Patient as PatientDB, Appointment as AppointmentDB
from clinic.exceptions import NotFoundError
from clinic.models.patient import PatientCreate, PatientUpdate
from clinic.services.storage import commit

logger = logging.getLogger(__name__)


class PatientService:
    """Service for patient records."""

    @staticmethod
    def list_patients(db: Session) -> List[PatientDB]:
        """Get every patient."""
        return db.query(PatientDB).order_by(PatientDB.id).all()

    @staticmethod
    def get_patient(db: Session, patient_id: int) -> PatientDB:
        """Get a patient by ID, without related records."""
        patient = db.query(PatientDB).filter(PatientDB.id == patient_id).first()
        if not patient:
            raise NotFoundError("Patient")
        return patient

    @staticmethod
    def get_patient_detail(db: Session, patient_id: int) -> PatientDB:
        """Get a patient with medical history and appointments (each with its doctor)."""
        patient = db.query(PatientDB).options(
            selectinload(PatientDB.medical_history),
            selectinload(PatientDB.appointments).selectinload(AppointmentDB.doctor),
        ).filter(PatientDB.id == patient_id).first()

        if not patient:
            raise NotFoundError("Patient")
        return patient

    @staticmethod
    def create_patient(db: Session, patient_data: PatientCreate) -> PatientDB:
        """Create a new patient."""
        db_patient = PatientDB(**patient_data.model_dump())
        db.add(db_patient)
        commit(db)
        db.refresh(db_patient)

        logger.info(f"Patient created: {db_patient.id}")
        return db_patient

    @staticmethod
    def replace_patient(db: Session, patient_id: int, patient_data: PatientUpdate) -> PatientDB:
        """Overwrite every field of an existing patient."""
        patient = PatientService.get_patient(db, patient_id)

        for key, value in patient_data.model_dump().items():
            setattr(patient, key, value)

        commit(db)
        db.refresh(patient)

        logger.info(f"Patient updated: {patient.id}")
        return patient

    @staticmethod
    def delete_patient(db: Session, patient_id: int) -> int:
        """Delete a patient; appointments and history entries are left in place.

        Returns the number of rows removed (0 when the patient did not exist).
        """
        deleted = db.query(PatientDB).filter(PatientDB.id == patient_id).delete(synchronize_session=False)
        commit(db)

        logger.info(f"Patient deleted: {patient_id} ({deleted} row(s))")
        return deleted
