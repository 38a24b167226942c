"""
Patient management routes.
"""
from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from clinic.database import get_db
from clinic.models import (
    PatientCreate, PatientUpdate, PatientResponse, PatientDetailResponse,
    AppointmentWithDoctor, MedicalHistoryResponse, MessageResponse,
)
from clinic.services import PatientService, AppointmentService, MedicalHistoryService
from clinic.routers.params import RecordId

router = APIRouter(prefix="/patients", tags=["Patients"])


@router.get("", response_model=List[PatientResponse])
def list_patients(db: Session = Depends(get_db)):
    """List all patients."""
    patients = PatientService.list_patients(db)
    return [PatientResponse.model_validate(p) for p in patients]


@router.get("/{patient_id}", response_model=PatientDetailResponse)
def get_patient(patient_id: RecordId, db: Session = Depends(get_db)):
    """Get a patient with medical history and appointments."""
    patient = PatientService.get_patient_detail(db, patient_id)
    return PatientDetailResponse.model_validate(patient)


@router.post("", response_model=PatientResponse, status_code=status.HTTP_201_CREATED)
def create_patient(patient_data: PatientCreate, db: Session = Depends(get_db)):
    """Create a new patient record."""
    patient = PatientService.create_patient(db, patient_data)
    return PatientResponse.model_validate(patient)


@router.put("/{patient_id}", response_model=PatientResponse)
def update_patient(patient_id: RecordId, patient_data: PatientUpdate, db: Session = Depends(get_db)):
    """Replace a patient record. Every field must be resent."""
    patient = PatientService.replace_patient(db, patient_id, patient_data)
    return PatientResponse.model_validate(patient)


@router.delete("/{patient_id}", response_model=MessageResponse)
def delete_patient(patient_id: RecordId, db: Session = Depends(get_db)):
    """Delete a patient. Succeeds even if the patient does not exist."""
    PatientService.delete_patient(db, patient_id)
    return MessageResponse(message="Patient deleted")


@router.get("/{patient_id}/appointments", response_model=List[AppointmentWithDoctor])
def list_patient_appointments(patient_id: RecordId, db: Session = Depends(get_db)):
    """List a patient's appointments, each with its doctor."""
    appointments = AppointmentService.list_appointments(db, patient_id=patient_id, include=("doctor",))
    return [AppointmentWithDoctor.model_validate(a) for a in appointments]


@router.get("/{patient_id}/medical-history", response_model=List[MedicalHistoryResponse])
def list_patient_medical_history(patient_id: RecordId, db: Session = Depends(get_db)):
    """List a patient's medical history entries."""
    entries = MedicalHistoryService.list_entries(db, patient_id=patient_id, include_patient=False)
    return [MedicalHistoryResponse.model_validate(e) for e in entries]
