"""Field validators.

Every check returns None when the value is acceptable and raises
InvalidDataError with a readable reason otherwise.
"""

import re
from datetime import date

from core.constants import MAX_AGE, MAX_NAME_LENGTH, MIN_AGE, MIN_NAME_LENGTH
from core.exceptions import InvalidDataError

EMAIL_PATTERN = re.compile(r"^[A-Za-z0-9+_.-]+@(.+)$")
PHONE_PATTERN = re.compile(r"^[0-9]{10}$")


def validate_name(name: str) -> None:
    if name is None or not str(name).strip():
        raise InvalidDataError("Name cannot be null or empty")
    if len(name) < MIN_NAME_LENGTH or len(name) > MAX_NAME_LENGTH:
        raise InvalidDataError(
            f"Name must be between {MIN_NAME_LENGTH} and {MAX_NAME_LENGTH} characters"
        )


def validate_email(email: str) -> None:
    if email is None or not str(email).strip():
        raise InvalidDataError("Email cannot be null or empty")
    if not EMAIL_PATTERN.match(email):
        raise InvalidDataError("Invalid email format")


def validate_phone(phone: str) -> None:
    if phone is None or not str(phone).strip():
        raise InvalidDataError("Phone number cannot be null or empty")
    digits_only = re.sub(r"[^0-9]", "", phone)
    if not PHONE_PATTERN.match(digits_only):
        raise InvalidDataError("Phone number must be 10 digits")


def validate_age(age: int) -> None:
    if age is None or age < MIN_AGE or age > MAX_AGE:
        raise InvalidDataError(f"Age must be between {MIN_AGE} and {MAX_AGE}")


def validate_date_of_birth(date_of_birth: date) -> None:
    if date_of_birth is None:
        raise InvalidDataError("Date of birth cannot be null")
    if date_of_birth > date.today():
        raise InvalidDataError("Date of birth cannot be in the future")


def validate_amount(amount: float) -> None:
    validate_not_null(amount, "Amount")
    if amount < 0:
        raise InvalidDataError("Amount cannot be negative")


def validate_id(record_id: int) -> None:
    # bool is an int subclass; True must not pass as ID 1
    if isinstance(record_id, bool) or not isinstance(record_id, int) or record_id <= 0:
        raise InvalidDataError("ID must be a positive number")


def validate_not_null(value, field_name: str) -> None:
    if value is None:
        raise InvalidDataError(f"{field_name} cannot be null")
