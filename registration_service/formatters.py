"""Normalizers applied to form input while the user types."""
import re

from .config import settings

_NON_DIGIT = re.compile(r"[^0-9]")


def format_phone_number(number: str) -> str:
    """
    Mask a US phone number as it is typed.

    Non-digits are dropped, then "1234567890" becomes "(123) 456-7890".
    Partial input gets the partial mask ("(123) 45"). Digits past the
    tenth are kept so the validator can reject them.
    """
    digits = _NON_DIGIT.sub("", number or "")
    if len(digits) <= 3:
        return digits
    if len(digits) <= 6:
        return f"({digits[:3]}) {digits[3:]}"
    return f"({digits[:3]}) {digits[3:6]}-{digits[6:]}"


def format_license_plate(plate: str) -> str:
    return (plate or "")[:settings.license_plate_max_length].upper()
