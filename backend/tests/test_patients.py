"""
Tests for the patient routes.
"""


def test_create_and_get_patient(client, patient_payload):
    response = client.post("/patients", json=patient_payload)
    assert response.status_code == 201
    created = response.json()
    assert created["id"] > 0
    assert created["full_name"] == "Test User"
    assert created["gender"] == "male"
    assert created["birth_date"] == "1990-01-01T00:00:00Z"
    assert created["created_at"].endswith("Z")

    response = client.get(f"/patients/{created['id']}")
    assert response.status_code == 200
    fetched = response.json()
    assert fetched["full_name"] == "Test User"
    assert fetched["gender"] == "male"
    assert fetched["appointments"] == []
    assert fetched["medical_history"] == []


def test_get_returns_the_record_as_created(client, create_patient):
    created = create_patient()
    fetched = client.get(f"/patients/{created['id']}").json()
    fetched.pop("appointments")
    fetched.pop("medical_history")
    assert fetched == created


def test_created_ids_are_unique(client, create_patient):
    ids = [create_patient(full_name=f"Patient {i}")["id"] for i in range(5)]
    assert len(set(ids)) == 5

    listed = client.get("/patients").json()
    assert [p["id"] for p in listed] == ids


def test_list_patients_empty(client):
    response = client.get("/patients")
    assert response.status_code == 200
    assert response.json() == []


def test_get_missing_patient(client):
    response = client.get("/patients/12345")
    assert response.status_code == 404
    assert response.json() == {"error": "Patient not found"}


def test_missing_required_fields_rejected(client):
    response = client.post("/patients", json={"phone": "+1"})
    assert response.status_code == 400
    body = response.json()
    assert set(body["fields"]) == {"full_name", "birth_date", "gender"}
    assert body["error"].startswith("Validation failed")


def test_empty_full_name_rejected(client, patient_payload):
    response = client.post("/patients", json={**patient_payload, "full_name": ""})
    assert response.status_code == 400
    assert response.json()["fields"] == ["full_name"]


def test_unknown_gender_rejected(client, patient_payload):
    response = client.post("/patients", json={**patient_payload, "gender": "other"})
    assert response.status_code == 400
    assert response.json()["fields"] == ["gender"]
    assert client.get("/patients").json() == []


def test_malformed_birth_date_rejected(client, patient_payload):
    response = client.post("/patients", json={**patient_payload, "birth_date": "yesterday"})
    assert response.status_code == 400
    assert response.json()["fields"] == ["birth_date"]


def test_replace_patient_overwrites_every_field(client, create_patient):
    patient = create_patient()

    replacement = {
        "full_name": "Renamed User",
        "birth_date": "1991-02-03T00:00:00Z",
        "gender": "female",
    }
    response = client.put(f"/patients/{patient['id']}", json=replacement)
    assert response.status_code == 200
    updated = response.json()
    assert updated["id"] == patient["id"]
    assert updated["created_at"] == patient["created_at"]

    fetched = client.get(f"/patients/{patient['id']}").json()
    assert fetched["full_name"] == "Renamed User"
    assert fetched["birth_date"] == "1991-02-03T00:00:00Z"
    assert fetched["gender"] == "female"
    # Not resent, so cleared rather than merged
    assert fetched["phone"] is None
    assert fetched["email"] is None


def test_replace_missing_patient(client, patient_payload):
    response = client.put("/patients/999", json=patient_payload)
    assert response.status_code == 404
    assert response.json() == {"error": "Patient not found"}


def test_replace_requires_full_payload(client, create_patient):
    patient = create_patient()
    response = client.put(f"/patients/{patient['id']}", json={"full_name": "Only Name"})
    assert response.status_code == 400
    assert set(response.json()["fields"]) == {"birth_date", "gender"}


def test_replace_missing_patient_with_invalid_body(client):
    # Body is checked before the row lookup
    response = client.put("/patients/999", json={"full_name": "Only Name"})
    assert response.status_code == 400
    assert set(response.json()["fields"]) == {"birth_date", "gender"}


def test_delete_patient(client, create_patient):
    patient = create_patient()

    response = client.delete(f"/patients/{patient['id']}")
    assert response.status_code == 200
    assert response.json() == {"message": "Patient deleted"}

    assert client.get(f"/patients/{patient['id']}").status_code == 404


def test_delete_missing_patient_succeeds(client):
    response = client.delete("/patients/4242")
    assert response.status_code == 200
    assert response.json() == {"message": "Patient deleted"}


def test_delete_patient_keeps_appointments_and_history(client, create_patient, create_doctor, create_appointment):
    patient = create_patient()
    doctor = create_doctor()
    appointment = create_appointment(patient["id"], doctor["id"])
    client.post("/medical_history", json={
        "patient_id": patient["id"],
        "history_type": "allergy",
        "description": "Penicillin",
    })

    client.delete(f"/patients/{patient['id']}")

    orphan = client.get(f"/appointments/{appointment['id']}").json()
    assert orphan["patient"] is None
    assert orphan["doctor"]["id"] == doctor["id"]
    assert len(client.get(f"/patients/{patient['id']}/medical-history").json()) == 1


def test_patient_detail_preloads_history_and_appointments(client, create_patient, create_doctor, create_appointment):
    patient = create_patient()
    doctor = create_doctor()
    create_appointment(patient["id"], doctor["id"])
    client.post("/medical_history", json={
        "patient_id": patient["id"],
        "history_type": "chronic",
        "description": "Asthma",
    })

    detail = client.get(f"/patients/{patient['id']}").json()
    assert len(detail["appointments"]) == 1
    assert detail["appointments"][0]["doctor"]["full_name"] == "Gregory House"
    assert [h["description"] for h in detail["medical_history"]] == ["Asthma"]


def test_patient_appointments(client, create_patient, create_doctor, create_appointment):
    patient = create_patient()
    other = create_patient(full_name="Someone Else")
    doctor = create_doctor()
    first = create_appointment(patient["id"], doctor["id"])
    create_appointment(other["id"], doctor["id"])

    response = client.get(f"/patients/{patient['id']}/appointments")
    assert response.status_code == 200
    appointments = response.json()
    assert [a["id"] for a in appointments] == [first["id"]]
    assert appointments[0]["doctor"]["id"] == doctor["id"]
    assert "patient" not in appointments[0]


def test_patient_medical_history(client, create_patient):
    patient = create_patient()
    for kind in ("allergy", "habit"):
        client.post("/medical_history", json={
            "patient_id": patient["id"],
            "history_type": kind,
            "description": f"{kind} entry",
        })

    response = client.get(f"/patients/{patient['id']}/medical-history")
    assert response.status_code == 200
    assert [e["history_type"] for e in response.json()] == ["allergy", "habit"]
    assert client.get("/patients/777/medical-history").json() == []
