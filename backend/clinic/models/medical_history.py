"""
Medical history (anamnesis) models.
"""
from pydantic import BaseModel, Field
from typing import Optional

from clinic.models.common import MAX_ID, StoredDateTime, UTCDateTime


class MedicalHistoryCreate(BaseModel):
    """Model for creating a medical history entry."""
    patient_id: int = Field(..., gt=0, le=MAX_ID)
    history_type: str = Field(..., min_length=1, max_length=50, description="allergy, chronic, surgery, family, habit, ...")
    description: str = Field(..., min_length=1)
    start_date: Optional[StoredDateTime] = None
    severity: Optional[str] = None
    status: Optional[str] = None
    notes: Optional[str] = None


class MedicalHistoryResponse(BaseModel):
    """Medical history model for API responses."""
    id: int
    created_at: UTCDateTime
    patient_id: int
    history_type: str
    description: str
    start_date: Optional[UTCDateTime] = None
    severity: Optional[str] = None
    status: Optional[str] = None
    notes: Optional[str] = None

    class Config:
        from_attributes = True
