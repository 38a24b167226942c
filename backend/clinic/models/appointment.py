"""
Appointment models.
"""
from pydantic import BaseModel, Field
from typing import Optional

from clinic.models.common import MAX_ID, StoredDateTime, UTCDateTime


class AppointmentBase(BaseModel):
    """Base appointment model."""
    # Referenced patient/doctor are not required to exist
    patient_id: int = Field(..., gt=0, le=MAX_ID)
    doctor_id: int = Field(..., gt=0, le=MAX_ID)
    date: StoredDateTime
    diagnosis: Optional[str] = None
    treatment: Optional[str] = None
    notes: Optional[str] = None


class AppointmentCreate(AppointmentBase):
    """Model for creating an appointment."""
    pass


class AppointmentUpdate(AppointmentBase):
    """Model for replacing an appointment; fields left out are cleared."""
    pass


class AppointmentResponse(BaseModel):
    """Appointment model for API responses."""
    id: int
    created_at: UTCDateTime
    patient_id: int
    doctor_id: int
    date: UTCDateTime
    diagnosis: Optional[str] = None
    treatment: Optional[str] = None
    notes: Optional[str] = None

    class Config:
        from_attributes = True
