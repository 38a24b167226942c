"""
Pydantic models for the Clinic Records API.
"""
from clinic.models.common import MessageResponse
from clinic.models.patient import Gender, PatientCreate, PatientUpdate, PatientResponse
from clinic.models.doctor import DoctorCreate, DoctorResponse
from clinic.models.appointment import AppointmentCreate, AppointmentUpdate, AppointmentResponse
from clinic.models.medical_test import MedicalTestCreate, MedicalTestResponse
from clinic.models.medical_history import MedicalHistoryCreate, MedicalHistoryResponse
from clinic.models.composite import (
    AppointmentWithDoctor,
    AppointmentWithPatient,
    AppointmentWithParticipants,
    AppointmentDetailResponse,
    MedicalHistoryWithPatient,
    PatientDetailResponse,
)

__all__ = [
    "MessageResponse", "Gender", "PatientCreate", "PatientUpdate", "PatientResponse",
    "DoctorCreate", "DoctorResponse",
    "AppointmentCreate", "AppointmentUpdate", "AppointmentResponse",
    "MedicalTestCreate", "MedicalTestResponse",
    "MedicalHistoryCreate", "MedicalHistoryResponse",
    "AppointmentWithDoctor", "AppointmentWithPatient", "AppointmentWithParticipants",
    "AppointmentDetailResponse", "MedicalHistoryWithPatient", "PatientDetailResponse",
]
