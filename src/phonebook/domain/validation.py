"""Name and phone number rules applied before anything is persisted.

A number is either all digits ("040123456") or two digit blocks joined by a
single hyphen, the first block 2-3 digits long ("09-1234556", "040-22334455").
Either way it must be at least 8 characters long, hyphen included.
"""

import re

from phonebook.domain.errors import ValidationError

NAME_MIN_LENGTH = 3
NUMBER_MIN_LENGTH = 8

_DIGITS = re.compile(r"[0-9]+")
_AREA_CODE = re.compile(r"[0-9]{2,3}")


def is_valid_number_format(value: str) -> bool:
    """True if value is all digits, or exactly one hyphen between 2-3 digits and digits."""
    parts = value.split("-")
    if len(parts) == 1:
        return _DIGITS.fullmatch(value) is not None
    if len(parts) != 2:
        return False
    first, second = parts
    return (
        _AREA_CODE.fullmatch(first) is not None
        and _DIGITS.fullmatch(second) is not None
    )


def validate_name(name: str | None) -> ValidationError | None:
    if not name:
        return ValidationError("name", "name is required")
    if len(name) < NAME_MIN_LENGTH:
        return ValidationError(
            "name",
            f"name `{name}` is shorter than the minimum allowed length ({NAME_MIN_LENGTH})",
        )
    return None


def validate_number(number: str | None) -> ValidationError | None:
    if not number:
        return ValidationError("number", "number is required")
    if len(number) < NUMBER_MIN_LENGTH:
        return ValidationError(
            "number",
            f"number `{number}` is shorter than the minimum allowed length ({NUMBER_MIN_LENGTH})",
        )
    if not is_valid_number_format(number):
        return ValidationError("number", f"{number} is not a valid phone number")
    return None


def validate(name: str | None, number: str | None) -> ValidationError | None:
    """Return the first problem with (name, number), or None if the pair may be stored."""
    return validate_name(name) or validate_number(number)
