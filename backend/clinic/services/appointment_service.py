"""
Appointment data access.
"""
import logging
from typing import Iterable, List, Optional

from sqlalchemy.orm import Session, selectinload

from clinic.database import Appointment as AppointmentDB
from clinic.exceptions import NotFoundError
from clinic.models.appointment import AppointmentCreate, AppointmentUpdate
from clinic.services.storage import commit

logger = logging.getLogger(__name__)

# Related records that can be loaded alongside an appointment
RELATIONS = {
    "patient": AppointmentDB.patient,
    "doctor": AppointmentDB.doctor,
    "medical_tests": AppointmentDB.medical_tests,
}


class AppointmentService:
    """Service for appointment records."""

    @staticmethod
    def list_appointments(
        db: Session,
        patient_id: Optional[int] = None,
        doctor_id: Optional[int] = None,
        include: Iterable[str] = ("patient", "doctor"),
    ) -> List[AppointmentDB]:
        """List appointments, optionally filtered by patient and/or doctor.

        Args:
            db: Database session
            patient_id: Only appointments of this patient (no filter when None)
            doctor_id: Only appointments with this doctor (no filter when None)
            include: Names from RELATIONS to preload

        Returns:
            Matching appointments ordered by ID
        """
        query = db.query(AppointmentDB).options(
            *[selectinload(RELATIONS[name]) for name in include]
        )

        if patient_id is not None:
            query = query.filter(AppointmentDB.patient_id == patient_id)
        if doctor_id is not None:
            query = query.filter(AppointmentDB.doctor_id == doctor_id)

        return query.order_by(AppointmentDB.id).all()

    @staticmethod
    def get_appointment(
        db: Session,
        appointment_id: int,
        include: Iterable[str] = ("patient", "doctor", "medical_tests"),
    ) -> AppointmentDB:
        """Get an appointment by ID with its patient, doctor and tests."""
        appointment = db.query(AppointmentDB).options(
            *[selectinload(RELATIONS[name]) for name in include]
        ).filter(AppointmentDB.id == appointment_id).first()

        if not appointment:
            raise NotFoundError("Appointment")
        return appointment

    @staticmethod
    def create_appointment(db: Session, appointment_data: AppointmentCreate) -> AppointmentDB:
        """Create an appointment. The patient and doctor are not checked for existence."""
        db_appointment = AppointmentDB(**appointment_data.model_dump())
        db.add(db_appointment)
        commit(db)
        db.refresh(db_appointment)

        logger.info(f"Appointment created: {db_appointment.id}")
        return db_appointment

    @staticmethod
    def replace_appointment(db: Session, appointment_id: int, appointment_data: AppointmentUpdate) -> AppointmentDB:
        """Overwrite every field of an existing appointment."""
        appointment = AppointmentService.get_appointment(db, appointment_id, include=())

        for key, value in appointment_data.model_dump().items():
            setattr(appointment, key, value)

        commit(db)
        db.refresh(appointment)

        logger.info(f"Appointment updated: {appointment.id}")
        return appointment

    @staticmethod
    def delete_appointment(db: Session, appointment_id: int) -> int:
        """Delete an appointment; its medical tests are left in place."""
        deleted = db.query(AppointmentDB).filter(
            AppointmentDB.id == appointment_id
        ).delete(synchronize_session=False)
        commit(db)

        logger.info(f"Appointment deleted: {appointment_id} ({deleted} row(s))")
        return deleted
