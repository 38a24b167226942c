"""
Response shapes carrying preloaded related records.

A referenced parent that does not exist is rendered as ``null``.
"""
from typing import List, Optional

from clinic.models.appointment import AppointmentResponse
from clinic.models.doctor import DoctorResponse
from clinic.models.medical_history import MedicalHistoryResponse
from clinic.models.medical_test import MedicalTestResponse
from clinic.models.patient import PatientResponse


class AppointmentWithDoctor(AppointmentResponse):
    doctor: Optional[DoctorResponse] = None


class AppointmentWithPatient(AppointmentResponse):
    patient: Optional[PatientResponse] = None


class AppointmentWithParticipants(AppointmentResponse):
    patient: Optional[PatientResponse] = None
    doctor: Optional[DoctorResponse] = None


class AppointmentDetailResponse(AppointmentWithParticipants):
    """Appointment with its patient, doctor and test results."""
    medical_tests: List[MedicalTestResponse] = []


class MedicalHistoryWithPatient(MedicalHistoryResponse):
    patient: Optional[PatientResponse] = None


class PatientDetailResponse(PatientResponse):
    """Patient with history entries and appointments (each with its doctor)."""
    medical_history: List[MedicalHistoryResponse] = []
    appointments: List[AppointmentWithDoctor] = []
