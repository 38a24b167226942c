"""
Demonstration data loaded at startup.

Every run wipes all five tables and inserts the same records, so each
process start begins from an identical dataset.
"""
import logging
from datetime import datetime, timedelta, timezone
from typing import Dict

from sqlalchemy.orm import Session

from clinic.database import (
    Patient,
    Doctor,
    Appointment,
    MedicalTest,
    MedicalHistory,
)

logger = logging.getLogger(__name__)

# Children first so no row ever points at an already removed parent
DELETE_ORDER = (MedicalHistory, MedicalTest, Appointment, Patient, Doctor)


def _patients():
    return [
        Patient(full_name="Ivan Ivanov", birth_date=datetime(1985, 5, 15), gender="male",
                phone="+79990000001", email="ivanov@mail.ru"),
        Patient(full_name="Maria Petrova", birth_date=datetime(1990, 8, 22), gender="female",
                phone="+79990000002", email="petrova@mail.ru"),
        Patient(full_name="Alexey Sidorov", birth_date=datetime(1978, 3, 10), gender="male",
                phone="+79990000003", email="sidorov@mail.ru"),
        Patient(full_name="Elena Kuznetsova", birth_date=datetime(1982, 11, 5), gender="female",
                phone="+79990000004", email="kuznetsova@mail.ru"),
        Patient(full_name="Dmitry Smirnov", birth_date=datetime(1995, 7, 30), gender="male",
                phone="+79990000005", email="smirnov@mail.ru"),
    ]


def _doctors():
    return [
        Doctor(full_name="Andrey Prokhorov", specialization="Cardiologist",
               phone="+79991111111", email="prokhorov@clinic.ru"),
        Doctor(full_name="Olga Gromova", specialization="Neurologist",
               phone="+79991111112", email="gromova@clinic.ru"),
        Doctor(full_name="Stanislav Belov", specialization="General Practitioner",
               phone="+79991111113", email="belov@clinic.ru"),
        Doctor(full_name="Anna Kovalchuk", specialization="Ophthalmologist",
               phone="+79991111114", email="kovalchuk@clinic.ru"),
    ]


def seed_database(db: Session) -> Dict[str, int]:
    """Replace the contents of every table with the demonstration dataset.

    Runs as a single transaction; any failure rolls back and propagates.

    Returns:
        Number of inserted rows per table
    """
    try:
        for model in DELETE_ORDER:
            db.query(model).delete(synchronize_session=False)

        patients = _patients()
        doctors = _doctors()
        db.add_all(patients)
        db.add_all(doctors)
        db.flush()  # assigns IDs used by the references below

        now = datetime.now(timezone.utc).replace(tzinfo=None, microsecond=0)
        appointments = [
            Appointment(patient_id=patients[0].id, doctor_id=doctors[0].id, date=now - timedelta(hours=24),
                        diagnosis="Hypertension",
                        treatment="Blood pressure monitoring, lisinopril 10 mg once daily",
                        notes="Complains of headaches"),
            Appointment(patient_id=patients[1].id, doctor_id=doctors[1].id, date=now - timedelta(hours=12),
                        diagnosis="Migraine",
                        treatment="Ibuprofen as needed, regular sleep schedule",
                        notes="Rest recommended"),
            Appointment(patient_id=patients[2].id, doctor_id=doctors[2].id, date=now - timedelta(hours=6),
                        diagnosis="Acute respiratory viral infection",
                        treatment="Plenty of fluids, paracetamol",
                        notes="Temperature 37.8"),
            Appointment(patient_id=patients[3].id, doctor_id=doctors[3].id, date=now - timedelta(hours=3),
                        diagnosis="Conjunctivitis",
                        treatment="Antiviral eye drops",
                        notes="Follow-up visit in 5 days"),
            Appointment(patient_id=patients[4].id, doctor_id=doctors[0].id, date=now,
                        diagnosis="Arrhythmia",
                        treatment="Holter monitoring",
                        notes="Referred for further examination"),
        ]
        db.add_all(appointments)
        db.flush()

        medical_tests = [
            MedicalTest(appointment_id=appointments[0].id, name="Blood pressure", result="140/90",
                        unit="mmHg", reference_range="120/80"),
            MedicalTest(appointment_id=appointments[0].id, name="Cholesterol", result="5.2",
                        unit="mmol/L", reference_range="3.5-5.2"),
            MedicalTest(appointment_id=appointments[1].id, name="Brain MRI", result="No abnormalities",
                        unit="-", reference_range="-"),
            MedicalTest(appointment_id=appointments[2].id, name="Body temperature", result="37.8",
                        unit="°C", reference_range="36.6"),
            MedicalTest(appointment_id=appointments[3].id, name="Visual acuity", result="0.8",
                        unit="decimal", reference_range="1.0"),
            MedicalTest(appointment_id=appointments[4].id, name="ECG", result="Atrial fibrillation",
                        unit="-", reference_range="Sinus rhythm"),
        ]

        ivanov, petrova, sidorov, kuznetsova, smirnov = (p.id for p in patients)
        medical_histories = [
            # Allergies
            MedicalHistory(patient_id=ivanov, history_type="allergy", description="Penicillin allergy",
                           start_date=datetime(2005, 1, 1), severity="severe", status="active",
                           notes="Anaphylactic shock after administration"),
            MedicalHistory(patient_id=petrova, history_type="allergy", description="Seasonal pollen allergy",
                           start_date=datetime(2010, 1, 1), severity="moderate", status="active",
                           notes="Worse in spring"),
            # Chronic conditions
            MedicalHistory(patient_id=ivanov, history_type="chronic", description="Arterial hypertension",
                           start_date=datetime(2015, 1, 1), severity="moderate", status="chronic",
                           notes="Continuous medication"),
            MedicalHistory(patient_id=sidorov, history_type="chronic", description="Type 2 diabetes",
                           start_date=datetime(2018, 1, 1), severity="mild", status="chronic",
                           notes="Diet controlled"),
            MedicalHistory(patient_id=kuznetsova, history_type="chronic", description="Bronchial asthma",
                           start_date=datetime(2012, 1, 1), severity="mild", status="chronic",
                           notes="Inhaler as needed"),
            # Past surgeries
            MedicalHistory(patient_id=petrova, history_type="surgery", description="Appendectomy",
                           start_date=datetime(2015, 6, 15), severity="moderate", status="resolved",
                           notes="Recovered without complications"),
            MedicalHistory(patient_id=smirnov, history_type="surgery", description="Knee arthroscopy",
                           start_date=datetime(2020, 3, 10), severity="moderate", status="resolved",
                           notes="Sports injury"),
            # Family history
            MedicalHistory(patient_id=ivanov, history_type="family", description="Father had a heart attack at 55",
                           start_date=datetime(2010, 1, 1), severity="severe", status="active",
                           notes="Hereditary predisposition"),
            MedicalHistory(patient_id=sidorov, history_type="family", description="Cancer among relatives",
                           start_date=datetime(2000, 1, 1), severity="moderate", status="active",
                           notes="Grandmother: breast cancer"),
            # Habits
            MedicalHistory(patient_id=sidorov, history_type="habit", description="Smoking",
                           start_date=datetime(2000, 1, 1), severity="moderate", status="active",
                           notes="10 cigarettes a day for 20 years"),
            MedicalHistory(patient_id=smirnov, history_type="habit", description="Alcohol abuse",
                           start_date=datetime(2018, 1, 1), severity="mild", status="resolved",
                           notes="Abstinent for 2 years"),
        ]
        db.add_all(medical_tests)
        db.add_all(medical_histories)
        db.commit()
    except Exception:
        db.rollback()
        raise

    counts = {
        "patients": len(patients),
        "doctors": len(doctors),
        "appointments": len(appointments),
        "medical_tests": len(medical_tests),
        "medical_histories": len(medical_histories),
    }
    logger.info(f"🌱 Seeded demo data: {counts}")
    return counts
