"""
API Routers for the Clinic Records API.
"""
from clinic.routers.patients import router as patients_router
from clinic.routers.doctors import router as doctors_router
from clinic.routers.appointments import router as appointments_router
from clinic.routers.medical_history import router as medical_history_router

__all__ = [
    "patients_router",
    "doctors_router",
    "appointments_router",
    "medical_history_router",
]
