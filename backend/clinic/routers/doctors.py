"""
Doctor routes.
"""
from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from clinic.database import get_db
from clinic.models import DoctorCreate, DoctorResponse, AppointmentWithPatient, MessageResponse
from clinic.services import DoctorService, AppointmentService
from clinic.routers.params import RecordId

router = APIRouter(prefix="/doctors", tags=["Doctors"])


@router.get("", response_model=List[DoctorResponse])
def list_doctors(db: Session = Depends(get_db)):
    """List all doctors."""
    return [DoctorResponse.model_validate(d) for d in DoctorService.list_doctors(db)]


@router.get("/{doctor_id}", response_model=DoctorResponse)
def get_doctor(doctor_id: RecordId, db: Session = Depends(get_db)):
    """Get a specific doctor by ID."""
    return DoctorResponse.model_validate(DoctorService.get_doctor(db, doctor_id))


@router.post("", response_model=DoctorResponse, status_code=status.HTTP_201_CREATED)
def create_doctor(doctor_data: DoctorCreate, db: Session = Depends(get_db)):
    """Register a new doctor."""
    return DoctorResponse.model_validate(DoctorService.create_doctor(db, doctor_data))


@router.get("/{doctor_id}/appointments", response_model=List[AppointmentWithPatient])
def list_doctor_appointments(doctor_id: RecordId, db: Session = Depends(get_db)):
    """List a doctor's appointments, each with its patient."""
    appointments = AppointmentService.list_appointments(db, doctor_id=doctor_id, include=("patient",))
    return [AppointmentWithPatient.model_validate(a) for a in appointments]


@router.delete("/{doctor_id}", response_model=MessageResponse)
def delete_doctor(doctor_id: RecordId, db: Session = Depends(get_db)):
    """Delete a doctor. Succeeds even if the doctor does not exist."""
    DoctorService.delete_doctor(db, doctor_id)
    return MessageResponse(message="Doctor deleted")
