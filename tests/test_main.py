"""Tests for the registration service HTTP endpoints."""
import pytest
from fastapi.testclient import TestClient

from registration_service.main import app

PASSENGER_FORM = {
    "email": "test@example.com",
    "password": "Passw0rd!",
    "firstName": "John",
    "lastName": "Doe",
    "phoneNumber": "(123) 456-7890",
}

DRIVER_FORM = {
    **PASSENGER_FORM,
    "year": "2020",
    "make": "Toyota",
    "model": "Model 3",
    "licensePlate": "ABC1234",
    "state": "CA",
}


@pytest.fixture
def client():
    return TestClient(app)


class TestHealth:

    def test_health(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json()["success"] is True

    def test_unknown_route_uses_envelope(self, client):
        resp = client.get("/nope")
        assert resp.status_code == 404
        assert resp.json()["success"] is False


class TestValidateEndpoints:

    def test_valid_passenger(self, client):
        body = client.post("/validate/passenger", json=PASSENGER_FORM).json()
        assert body == {"success": True, "data": None, "message": "Registration input is valid"}

    def test_invalid_passenger_reports_first_rule(self, client):
        form = {**PASSENGER_FORM, "email": "", "password": ""}
        resp = client.post("/validate/passenger", json=form)
        assert resp.status_code == 200
        body = resp.json()
        assert body["success"] is False
        assert body["message"] == "Email cannot be empty"
        assert body["data"] == {"field": "email"}

    def test_missing_fields_fail_as_empty(self, client):
        body = client.post("/validate/passenger", json={"email": "test@example.com"}).json()
        assert body["message"] == "Password cannot be empty"

    def test_valid_driver(self, client):
        body = client.post("/validate/driver", json=DRIVER_FORM).json()
        assert body["success"] is True

    def test_invalid_plate(self, client):
        form = {**DRIVER_FORM, "licensePlate": "abc"}
        body = client.post("/validate/driver", json=form).json()
        assert body["success"] is False
        assert body["message"] == "Invalid license plate format"

    def test_wrong_type_is_422(self, client):
        resp = client.post("/validate/passenger", json={**PASSENGER_FORM, "email": 5})
        assert resp.status_code == 422
        assert resp.json()["success"] is False


class TestSignup:

    def test_passenger_signup(self, client):
        resp = client.post("/signup", json=PASSENGER_FORM)
        assert resp.status_code == 200
        body = resp.json()
        assert body["message"] == "Registration accepted"
        assert body["data"]["role"] == "passenger"
        assert "password" not in body["data"]
        assert "year" not in body["data"]

    def test_driver_signup(self, client):
        resp = client.post("/signup", json={"role": "driver", **DRIVER_FORM})
        assert resp.status_code == 200
        data = resp.json()["data"]
        assert data["role"] == "driver"
        assert data["license_plate"] == "ABC1234"
        assert "password" not in data

    def test_driver_signup_missing_vehicle(self, client):
        resp = client.post("/signup", json={"role": "driver", **PASSENGER_FORM})
        assert resp.status_code == 400
        assert resp.json() == {"success": False, "data": None, "message": "Year cannot be empty"}

    def test_null_role_signs_up_passenger(self, client):
        resp = client.post("/signup", json={"role": None, **PASSENGER_FORM})
        assert resp.status_code == 200
        assert resp.json()["data"]["role"] == "passenger"

    def test_passenger_signup_ignores_vehicle_fields(self, client):
        form = {**PASSENGER_FORM, "licensePlate": "not a plate"}
        resp = client.post("/signup", json=form)
        assert resp.status_code == 200


class TestFormHelpers:

    def test_format_phone_number(self, client):
        body = client.post("/format/phone-number", json={"value": "1234567890"}).json()
        assert body["data"] == {"value": "(123) 456-7890"}

    def test_format_license_plate(self, client):
        body = client.post("/format/license-plate", json={"value": "abc1234xyz"}).json()
        assert body["data"] == {"value": "ABC1234X"}

    def test_options(self, client):
        data = client.get("/options").json()["data"]
        assert data["years"][0] == "1980"
        assert "CA" in data["states"]


class TestMetrics:

    def test_metrics_count_validations(self, client):
        client.post("/validate/passenger", json={**PASSENGER_FORM, "phoneNumber": "bad"})
        text = client.get("/metrics").text
        assert "registration_validations_total" in text
        assert 'registration_rule_failures_total{account_kind="passenger",field="phone_number"}' in text
