"""
Appointment and medical test routes.
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from clinic.database import get_db
from clinic.models import (
    AppointmentCreate, AppointmentUpdate, AppointmentResponse,
    AppointmentWithParticipants, AppointmentDetailResponse,
    MedicalTestCreate, MedicalTestResponse, MessageResponse,
)
from clinic.routers.params import RecordId, optional_id
from clinic.services import AppointmentService, MedicalTestService

router = APIRouter(prefix="/appointments", tags=["Appointments"])


@router.get("", response_model=List[AppointmentWithParticipants])
def list_appointments(
    patient_id: Optional[str] = Query(None, description="Only appointments of this patient"),
    doctor_id: Optional[str] = Query(None, description="Only appointments with this doctor"),
    db: Session = Depends(get_db)
):
    """List appointments with patient and doctor, optionally filtered."""
    appointments = AppointmentService.list_appointments(
        db,
        patient_id=optional_id("patient_id", patient_id),
        doctor_id=optional_id("doctor_id", doctor_id),
    )
    return [AppointmentWithParticipants.model_validate(a) for a in appointments]


@router.get("/{appointment_id}", response_model=AppointmentDetailResponse)
def get_appointment(appointment_id: RecordId, db: Session = Depends(get_db)):
    """Get an appointment with patient, doctor and medical tests."""
    appointment = AppointmentService.get_appointment(db, appointment_id)
    return AppointmentDetailResponse.model_validate(appointment)


@router.post("", response_model=AppointmentResponse, status_code=status.HTTP_201_CREATED)
def create_appointment(appointment_data: AppointmentCreate, db: Session = Depends(get_db)):
    """Create an appointment."""
    appointment = AppointmentService.create_appointment(db, appointment_data)
    return AppointmentResponse.model_validate(appointment)


@router.put("/{appointment_id}", response_model=AppointmentResponse)
def update_appointment(appointment_id: RecordId, appointment_data: AppointmentUpdate, db: Session = Depends(get_db)):
    """Replace an appointment. Every field must be resent."""
    appointment = AppointmentService.replace_appointment(db, appointment_id, appointment_data)
    return AppointmentResponse.model_validate(appointment)


@router.delete("/{appointment_id}", response_model=MessageResponse)
def delete_appointment(appointment_id: RecordId, db: Session = Depends(get_db)):
    """Delete an appointment. Its medical tests are kept."""
    AppointmentService.delete_appointment(db, appointment_id)
    return MessageResponse(message="Appointment deleted")


@router.get("/{appointment_id}/tests", response_model=List[MedicalTestResponse])
def list_appointment_tests(appointment_id: RecordId, db: Session = Depends(get_db)):
    """List the medical tests recorded for an appointment."""
    tests = MedicalTestService.list_for_appointment(db, appointment_id)
    return [MedicalTestResponse.model_validate(t) for t in tests]


@router.post("/{appointment_id}/tests", response_model=MedicalTestResponse, status_code=status.HTTP_201_CREATED)
def create_appointment_test(appointment_id: RecordId, test_data: MedicalTestCreate, db: Session = Depends(get_db)):
    """Record a medical test for an appointment."""
    test = MedicalTestService.create_test(db, appointment_id, test_data)
    return MedicalTestResponse.model_validate(test)
