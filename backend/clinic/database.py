"""
Database connection and models using SQLAlchemy.

Relationships are plain join conditions: no foreign-key constraints are
declared, so appointments, tests and history entries may point at parents
that do not exist.
"""
import logging

from fastapi import Request
from sqlalchemy import create_engine, text, CheckConstraint, Column, DateTime, Integer, String, Text
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session
from sqlalchemy.sql import func

logger = logging.getLogger(__name__)

Base = declarative_base()


# SQLAlchemy Models
class Patient(Base):
    __tablename__ = "patients"
    __table_args__ = (
        CheckConstraint("gender IN ('male', 'female')", name="ck_patients_gender"),
    )

    id = Column(Integer, primary_key=True)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)
    full_name = Column(String(255), nullable=False)
    birth_date = Column(DateTime, nullable=False)
    gender = Column(String(10), nullable=False)
    phone = Column(String(50), nullable=True)
    email = Column(String(255), nullable=True)

    appointments = relationship(
        "Appointment",
        primaryjoin="Patient.id == foreign(Appointment.patient_id)",
        order_by="Appointment.id",
        viewonly=True,
    )
    medical_history = relationship(
        "MedicalHistory",
        primaryjoin="Patient.id == foreign(MedicalHistory.patient_id)",
        order_by="MedicalHistory.id",
        viewonly=True,
    )


class Doctor(Base):
    __tablename__ = "doctors"

    id = Column(Integer, primary_key=True)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)
    full_name = Column(String(255), nullable=False)
    specialization = Column(String(100), nullable=False)
    phone = Column(String(50), nullable=True)
    email = Column(String(255), nullable=True)

    appointments = relationship(
        "Appointment",
        primaryjoin="Doctor.id == foreign(Appointment.doctor_id)",
        order_by="Appointment.id",
        viewonly=True,
    )


class Appointment(Base):
    __tablename__ = "appointments"

    id = Column(Integer, primary_key=True)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)
    patient_id = Column(Integer, nullable=False, index=True)
    doctor_id = Column(Integer, nullable=False, index=True)
    date = Column(DateTime, nullable=False)
    diagnosis = Column(Text, nullable=True)
    treatment = Column(Text, nullable=True)
    notes = Column(Text, nullable=True)

    patient = relationship(
        "Patient",
        primaryjoin="foreign(Appointment.patient_id) == Patient.id",
        viewonly=True,
    )
    doctor = relationship(
        "Doctor",
        primaryjoin="foreign(Appointment.doctor_id) == Doctor.id",
        viewonly=True,
    )
    medical_tests = relationship(
        "MedicalTest",
        primaryjoin="Appointment.id == foreign(MedicalTest.appointment_id)",
        order_by="MedicalTest.id",
        viewonly=True,
    )


class MedicalTest(Base):
    __tablename__ = "medical_tests"

    id = Column(Integer, primary_key=True)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)
    appointment_id = Column(Integer, nullable=False, index=True)
    name = Column(String(255), nullable=False)
    result = Column(String(255), nullable=True)
    unit = Column(String(50), nullable=True)
    reference_range = Column(String(100), nullable=True)

    appointment = relationship(
        "Appointment",
        primaryjoin="foreign(MedicalTest.appointment_id) == Appointment.id",
        viewonly=True,
    )


class MedicalHistory(Base):
    __tablename__ = "medical_histories"

    id = Column(Integer, primary_key=True)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)
    patient_id = Column(Integer, nullable=False, index=True)
    history_type = Column(String(50), nullable=False, index=True)  # allergy, chronic, surgery, family, habit, ...
    description = Column(Text, nullable=False)
    start_date = Column(DateTime, nullable=True)
    severity = Column(String(50), nullable=True)
    status = Column(String(50), nullable=True)
    notes = Column(Text, nullable=True)

    patient = relationship(
        "Patient",
        primaryjoin="foreign(MedicalHistory.patient_id) == Patient.id",
        viewonly=True,
    )


class Database:
    """Engine and session factory shared by every request for the process lifetime."""

    def __init__(self, database_url: str, echo: bool = False):
        connect_args = {}
        if database_url.startswith("sqlite"):
            # Requests are served from a thread pool
            connect_args["check_same_thread"] = False

        self.engine = create_engine(
            database_url,
            echo=echo,
            pool_pre_ping=True,
            connect_args=connect_args,
        )
        self.SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            expire_on_commit=False,
            bind=self.engine,
        )

    def session(self) -> Session:
        return self.SessionLocal()

    def ping(self) -> None:
        """Run a trivial statement to prove the database is reachable."""
        with self.engine.connect() as conn:
            conn.execute(text("SELECT 1"))

    def dispose(self) -> None:
        self.engine.dispose()


def init_db(database: Database):
    """Create all tables."""
    Base.metadata.create_all(bind=database.engine)
    logger.info("✅ Database tables created successfully!")


def get_db(request: Request):
    """Dependency to get database session."""
    db = request.app.state.database.session()
    try:
        yield db
    finally:
        db.close()
