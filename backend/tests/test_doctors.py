"""
Tests for the doctor routes.
"""


def test_create_list_and_get_doctor(client, doctor_payload):
    response = client.post("/doctors", json=doctor_payload)
    assert response.status_code == 201
    doctor = response.json()
    assert doctor["id"] > 0
    assert doctor["specialization"] == "Diagnostician"

    assert client.get("/doctors").json() == [doctor]
    assert client.get(f"/doctors/{doctor['id']}").json() == doctor


def test_doctor_requires_name_and_specialization(client):
    response = client.post("/doctors", json={"full_name": "No Specialty"})
    assert response.status_code == 400
    assert response.json()["fields"] == ["specialization"]


def test_get_missing_doctor(client):
    response = client.get("/doctors/31337")
    assert response.status_code == 404
    assert response.json() == {"error": "Doctor not found"}


def test_delete_doctor(client, create_doctor):
    doctor = create_doctor()
    response = client.delete(f"/doctors/{doctor['id']}")
    assert response.status_code == 200
    assert response.json() == {"message": "Doctor deleted"}
    assert client.get(f"/doctors/{doctor['id']}").status_code == 404

    # Deleting again still reports success
    assert client.delete(f"/doctors/{doctor['id']}").status_code == 200


def test_doctor_appointments_include_patient(client, create_patient, create_doctor, create_appointment):
    patient = create_patient()
    doctor = create_doctor()
    other_doctor = create_doctor(full_name="James Wilson", specialization="Oncologist")
    appointment = create_appointment(patient["id"], doctor["id"])
    create_appointment(patient["id"], other_doctor["id"])

    response = client.get(f"/doctors/{doctor['id']}/appointments")
    assert response.status_code == 200
    appointments = response.json()
    assert [a["id"] for a in appointments] == [appointment["id"]]
    assert appointments[0]["patient"]["full_name"] == "Test User"
    assert "doctor" not in appointments[0]


def test_doctor_without_appointments(client, create_doctor):
    doctor = create_doctor()
    assert client.get(f"/doctors/{doctor['id']}/appointments").json() == []
