"""Error taxonomy shared by the validator, the stores, and the HTTP error mapper."""

from enum import Enum


class ErrorKind(Enum):
    VALIDATION = "validation"
    MALFORMED_ID = "malformed_id"


class PhonebookError(Exception):
    """Base for failures the phonebook reports to its callers. Discriminate on `kind`."""

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(PhonebookError, ValueError):
    """A name or number that may not be persisted."""

    kind = ErrorKind.VALIDATION

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field


class MalformedIdError(PhonebookError):
    """The id cannot be a Person id at all (as opposed to an id with no record)."""

    kind = ErrorKind.MALFORMED_ID

    def __init__(self, person_id: str) -> None:
        super().__init__(f"malformatted id: {person_id!r}")
        self.person_id = person_id
