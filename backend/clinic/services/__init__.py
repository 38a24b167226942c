"""
Data-access services for the Clinic Records API.
"""
from clinic.services.patient_service import PatientService
from clinic.services.doctor_service import DoctorService
from clinic.services.appointment_service import AppointmentService
from clinic.services.medical_test_service import MedicalTestService
from clinic.services.medical_history_service import MedicalHistoryService

__all__ = [
    "PatientService",
    "DoctorService",
    "AppointmentService",
    "MedicalTestService",
    "MedicalHistoryService",
]
