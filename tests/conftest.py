import pytest

from registration_service.schemas import DriverRegistrationInput, PassengerRegistrationInput

VALID_PASSENGER = {
    "email": "test@example.com",
    "password": "Passw0rd!",
    "first_name": "John",
    "last_name": "Doe",
    "phone_number": "(123) 456-7890",
}

VALID_VEHICLE = {
    "year": "2020",
    "make": "Toyota",
    "model": "Model 3",
    "license_plate": "ABC1234",
    "state": "CA",
}


@pytest.fixture
def passenger_fields():
    return dict(VALID_PASSENGER)


@pytest.fixture
def driver_fields():
    return {**VALID_PASSENGER, **VALID_VEHICLE}


@pytest.fixture
def make_passenger(passenger_fields):
    def _make(**overrides):
        return PassengerRegistrationInput(**{**passenger_fields, **overrides})
    return _make


@pytest.fixture
def make_driver(driver_fields):
    def _make(**overrides):
        return DriverRegistrationInput(**{**driver_fields, **overrides})
    return _make
