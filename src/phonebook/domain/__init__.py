"""Domain layer: Person, validation rules, and the error taxonomy. No dependencies on outer layers."""

from phonebook.domain.entities import Person, new_person_id, parse_person_id
from phonebook.domain.errors import (
    ErrorKind,
    MalformedIdError,
    PhonebookError,
    ValidationError,
)
from phonebook.domain.validation import validate, validate_name, validate_number

__all__ = [
    "ErrorKind",
    "MalformedIdError",
    "Person",
    "PhonebookError",
    "ValidationError",
    "new_person_id",
    "parse_person_id",
    "validate",
    "validate_name",
    "validate_number",
]
