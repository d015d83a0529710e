"""
Registration input validation for passenger and driver accounts.

Every check is a pure function of its arguments. The two composite
procedures walk an ordered rule table and stop at the first violation, so
callers only ever see one message per call.
"""
import logging
import re
from dataclasses import dataclass
from typing import Callable, Iterable, Optional

from .config import settings
from .schemas import DriverRegistrationInput, PassengerRegistrationInput

logger = logging.getLogger(settings.service_name)

EMAIL_PATTERN = re.compile(r"[A-Za-z0-9+._%\-]+@[A-Za-z0-9.\-]+\.[A-Za-z]{2,}")
PASSWORD_PATTERN = re.compile(r"(?=.*[0-9])(?=.*[a-z])(?=.*[A-Z])(?=.*[@#$%^&+=!])\S{8,20}")
NAME_PATTERN = re.compile(r"[A-Za-z]+")
PHONE_PATTERN = re.compile(r"\([0-9]{3}\) [0-9]{3}-[0-9]{4}|[0-9]{10}")
LICENSE_PLATE_PATTERN = re.compile(r"[A-Z0-9]+")

PASSWORD_REQUIREMENTS_MESSAGE = (
    "Password must be 8-20 characters long, include at least one uppercase letter, "
    "one lowercase letter, one digit, and one special character"
)


# ---------------------------------------------------------
# Field predicates
# ---------------------------------------------------------
def is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def is_valid_email_format(email: str) -> bool:
    return len(email) <= settings.max_field_length and EMAIL_PATTERN.fullmatch(email) is not None


def is_valid_password(password: str) -> bool:
    """8-20 non-whitespace chars with a digit, a lower, an upper and one of @#$%^&+=!"""
    return PASSWORD_PATTERN.fullmatch(password) is not None


def is_valid_name(name: str) -> bool:
    return len(name) <= settings.max_field_length and NAME_PATTERN.fullmatch(name) is not None


def is_valid_phone_number_format(phone_number: str) -> bool:
    """Either "(123) 456-7890" or ten bare digits."""
    return PHONE_PATTERN.fullmatch(phone_number) is not None


def is_valid_license_plate(license_plate: str) -> bool:
    return (
        len(license_plate) <= settings.license_plate_max_length
        and LICENSE_PLATE_PATTERN.fullmatch(license_plate) is not None
    )


def _not_blank(value: str) -> bool:
    return not is_blank(value)


# ---------------------------------------------------------
# Rule tables
# ---------------------------------------------------------
@dataclass(frozen=True)
class Rule:
    field: str
    check: Callable[[str], bool]
    message: str


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    message: Optional[str] = None
    field: Optional[str] = None

    def __bool__(self) -> bool:
        return self.valid


VALID = ValidationResult(valid=True)

PASSENGER_RULES = (
    Rule("email", _not_blank, "Email cannot be empty"),
    Rule("email", is_valid_email_format, "Invalid email format"),
    Rule("password", _not_blank, "Password cannot be empty"),
    Rule("password", is_valid_password, PASSWORD_REQUIREMENTS_MESSAGE),
    Rule("first_name", _not_blank, "First name cannot be empty"),
    Rule("first_name", is_valid_name, "First name must contain only letters"),
    Rule("last_name", _not_blank, "Last name cannot be empty"),
    Rule("last_name", is_valid_name, "Last name must contain only letters"),
    Rule("phone_number", _not_blank, "Phone number cannot be empty"),
    Rule("phone_number", is_valid_phone_number_format, "Invalid phone number format"),
)

# Evaluated only once every passenger rule has passed
VEHICLE_RULES = (
    Rule("year", _not_blank, "Year cannot be empty"),
    Rule("make", _not_blank, "Make cannot be empty"),
    Rule("model", _not_blank, "Model cannot be empty"),
    Rule("license_plate", _not_blank, "License plate cannot be empty"),
    Rule("license_plate", is_valid_license_plate, "Invalid license plate format"),
    Rule("state", _not_blank, "State cannot be empty"),
)

DRIVER_RULES = PASSENGER_RULES + VEHICLE_RULES


def _first_violation(rules: Iterable[Rule], record) -> ValidationResult:
    for rule in rules:
        value = getattr(record, rule.field)
        if not rule.check(value):
            logger.debug(f"[Validator] {rule.field} rejected: {rule.message}")
            return ValidationResult(valid=False, message=rule.message, field=rule.field)
    return VALID


# ---------------------------------------------------------
# Composite checks
# ---------------------------------------------------------
def check_passenger(data: PassengerRegistrationInput) -> ValidationResult:
    return _first_violation(PASSENGER_RULES, data)


def check_driver(data: DriverRegistrationInput) -> ValidationResult:
    result = check_passenger(data)
    if not result.valid:
        return result
    return _first_violation(VEHICLE_RULES, data)


def validate_passenger(data: PassengerRegistrationInput, on_error: Callable[[str], None]) -> bool:
    """
    Validate a passenger registration.

    Returns True when every rule passes. Otherwise calls ``on_error`` once
    with the message of the first failing rule and returns False.
    """
    result = check_passenger(data)
    if not result.valid:
        on_error(result.message)
    return result.valid


def validate_driver(data: DriverRegistrationInput, on_error: Callable[[str], None]) -> bool:
    """Same contract as ``validate_passenger``; vehicle rules run after all passenger rules pass."""
    result = check_driver(data)
    if not result.valid:
        on_error(result.message)
    return result.valid
