"""
Medical history (anamnesis) routes.
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from clinic.database import get_db
from clinic.models import (
    MedicalHistoryCreate, MedicalHistoryResponse, MedicalHistoryWithPatient, MessageResponse,
)
from clinic.routers.params import RecordId, optional_id, optional_text
from clinic.services import MedicalHistoryService

router = APIRouter(prefix="/medical_history", tags=["Medical History"])


@router.get("", response_model=List[MedicalHistoryWithPatient])
def list_medical_history(
    patient_id: Optional[str] = Query(None, description="Only entries of this patient"),
    history_type: Optional[str] = Query(None, alias="type", description="allergy, chronic, surgery, family, habit, ..."),
    db: Session = Depends(get_db)
):
    """List medical history entries with their patient, optionally filtered."""
    entries = MedicalHistoryService.list_entries(
        db,
        patient_id=optional_id("patient_id", patient_id),
        history_type=optional_text(history_type),
    )
    return [MedicalHistoryWithPatient.model_validate(e) for e in entries]


@router.get("/{entry_id}", response_model=MedicalHistoryWithPatient)
def get_medical_history(entry_id: RecordId, db: Session = Depends(get_db)):
    """Get a single medical history entry."""
    return MedicalHistoryWithPatient.model_validate(MedicalHistoryService.get_entry(db, entry_id))


@router.post("", response_model=MedicalHistoryResponse, status_code=status.HTTP_201_CREATED)
def create_medical_history(entry_data: MedicalHistoryCreate, db: Session = Depends(get_db)):
    """Create a medical history entry."""
    entry = MedicalHistoryService.create_entry(db, entry_data)
    return MedicalHistoryResponse.model_validate(entry)


@router.delete("/{entry_id}", response_model=MessageResponse)
def delete_medical_history(entry_id: RecordId, db: Session = Depends(get_db)):
    """Delete a medical history entry. Succeeds even if it does not exist."""
    MedicalHistoryService.delete_entry(db, entry_id)
    return MessageResponse(message="Medical history record deleted")
