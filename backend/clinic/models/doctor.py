"""
Doctor models.
"""
from pydantic import BaseModel, Field
from typing import Optional

from clinic.models.common import UTCDateTime


class DoctorCreate(BaseModel):
    """Model for creating a new doctor."""
    full_name: str = Field(..., min_length=1, max_length=255)
    specialization: str = Field(..., min_length=1, max_length=100, description="e.g. Cardiologist, Neurologist")
    phone: Optional[str] = None
    email: Optional[str] = None


class DoctorResponse(BaseModel):
    """Doctor model for API responses."""
    id: int
    created_at: UTCDateTime
    full_name: str
    specialization: str
    phone: Optional[str] = None
    email: Optional[str] = None

    class Config:
        from_attributes = True
