from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Role(str, Enum):
    passenger = "passenger"
    driver = "driver"


PASSENGER_FIELDS = ("email", "password", "first_name", "last_name", "phone_number")
VEHICLE_FIELDS = ("year", "make", "model", "license_plate", "state")


class PassengerRegistrationInput(BaseModel):
    """
    Raw passenger form values. Absent or null fields are stored as "" so
    they fail their "cannot be empty" rule instead of the request.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    email: str = ""
    password: str = ""
    first_name: str = Field("", alias="firstName")
    last_name: str = Field("", alias="lastName")
    phone_number: str = Field("", alias="phoneNumber")

    @field_validator(*PASSENGER_FIELDS, mode="before")
    @classmethod
    def none_as_empty(cls, v):
        return "" if v is None else v


class DriverRegistrationInput(PassengerRegistrationInput):
    year: str = ""
    make: str = ""
    model: str = ""
    license_plate: str = Field("", alias="licensePlate")
    state: str = ""

    @field_validator(*VEHICLE_FIELDS, mode="before")
    @classmethod
    def vehicle_none_as_empty(cls, v):
        return "" if v is None else v

    def passenger(self) -> PassengerRegistrationInput:
        return PassengerRegistrationInput(**self.model_dump(include=set(PASSENGER_FIELDS)))


class SignupRequest(DriverRegistrationInput):
    role: Role = Role.passenger

    @field_validator("role", mode="before")
    @classmethod
    def default_role(cls, v):
        return Role.passenger if v is None else v

    def to_input(self) -> PassengerRegistrationInput:
        if self.role == Role.driver:
            return DriverRegistrationInput(
                **self.model_dump(include=set(PASSENGER_FIELDS + VEHICLE_FIELDS))
            )
        return self.passenger()


class FormatRequest(BaseModel):
    value: str = ""

    @field_validator("value", mode="before")
    @classmethod
    def none_as_empty(cls, v):
        return "" if v is None else v
