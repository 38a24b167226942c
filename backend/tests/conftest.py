"""
Shared fixtures: each test gets its own SQLite file under tmp_path.
"""
import pytest
from fastapi.testclient import TestClient

from clinic.config import Settings
from clinic.main import create_app


def make_settings(tmp_path, seed_on_startup=False):
    return Settings(
        database_url=f"sqlite:///{tmp_path / 'clinic.db'}",
        seed_on_startup=seed_on_startup,
    )


@pytest.fixture
def client(tmp_path):
    """Client against an empty database."""
    app = create_app(make_settings(tmp_path))
    with TestClient(app) as c:
        yield c


@pytest.fixture
def seeded_client(tmp_path):
    """Client against a database holding the demo dataset."""
    app = create_app(make_settings(tmp_path, seed_on_startup=True))
    with TestClient(app) as c:
        yield c


@pytest.fixture
def patient_payload():
    return {
        "full_name": "Test User",
        "birth_date": "1990-01-01T00:00:00Z",
        "gender": "male",
        "phone": "+10000000000",
        "email": "test@example.com",
    }


@pytest.fixture
def doctor_payload():
    return {
        "full_name": "Gregory House",
        "specialization": "Diagnostician",
        "phone": "+10000000001",
        "email": "house@clinic.example",
    }


@pytest.fixture
def create_patient(client, patient_payload):
    def _create(**overrides):
        response = client.post("/patients", json={**patient_payload, **overrides})
        assert response.status_code == 201, response.text
        return response.json()
    return _create


@pytest.fixture
def create_doctor(client, doctor_payload):
    def _create(**overrides):
        response = client.post("/doctors", json={**doctor_payload, **overrides})
        assert response.status_code == 201, response.text
        return response.json()
    return _create


@pytest.fixture
def create_appointment(client):
    def _create(patient_id, doctor_id, **overrides):
        payload = {
            "patient_id": patient_id,
            "doctor_id": doctor_id,
            "date": "2024-05-01T10:00:00Z",
            "diagnosis": "Hypertension",
            "treatment": "Lisinopril",
            "notes": "First visit",
        }
        payload.update(overrides)
        response = client.post("/appointments", json=payload)
        assert response.status_code == 201, response.text
        return response.json()
    return _create
