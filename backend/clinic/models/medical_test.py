"""
Medical test (lab result) models.
"""
from pydantic import BaseModel, Field
from typing import Optional

from clinic.models.common import UTCDateTime


class MedicalTestCreate(BaseModel):
    """Model for recording a test under an appointment."""
    name: str = Field(..., min_length=1, max_length=255)
    result: Optional[str] = None
    unit: Optional[str] = None
    reference_range: Optional[str] = None


class MedicalTestResponse(BaseModel):
    id: int
    created_at: UTCDateTime
    appointment_id: int
    name: str
    result: Optional[str] = None
    unit: Optional[str] = None
    reference_range: Optional[str] = None

    class Config:
        from_attributes = True
