"""
Patient models for patient data management.
"""
from pydantic import BaseModel, Field
from typing import Optional
from enum import Enum

from clinic.models.common import StoredDateTime, UTCDateTime


class Gender(str, Enum):
    """Patient gender."""
    MALE = "male"
    FEMALE = "female"


class PatientBase(BaseModel):
    """Base patient model."""
    full_name: str = Field(..., min_length=1, max_length=255)
    birth_date: StoredDateTime
    gender: Gender
    phone: Optional[str] = None
    email: Optional[str] = None

    class Config:
        use_enum_values = True


class PatientCreate(PatientBase):
    """Model for creating a new patient."""
    pass


class PatientUpdate(PatientBase):
    """Model for replacing a patient; fields left out are cleared, not kept."""
    pass


class PatientResponse(BaseModel):
    """Patient model for API responses."""
    id: int
    created_at: UTCDateTime
    full_name: str
    birth_date: UTCDateTime
    gender: Gender
    phone: Optional[str] = None
    email: Optional[str] = None

    class Config:
        from_attributes = True
