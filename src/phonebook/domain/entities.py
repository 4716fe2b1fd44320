"""Domain entity: Person, and the shape of its id."""

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone

from phonebook.domain.errors import MalformedIdError
from phonebook.domain.validation import validate


def new_person_id() -> str:
    return str(uuid.uuid4())


def parse_person_id(raw: str) -> str:
    """Return the canonical form of a Person id. Raises MalformedIdError if raw is not a UUID."""
    try:
        return str(uuid.UUID(raw))
    except (ValueError, TypeError, AttributeError):
        raise MalformedIdError(raw) from None


@dataclass(frozen=True)
class Person:
    """
    A phonebook entry.
    A Person cannot exist with an invalid name or number; construction raises ValidationError.
    """

    id: str = field(default_factory=new_person_id)
    name: str = field(default="")
    number: str = field(default="")
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self):
        if not self.id:
            raise ValueError("Person id must be non-empty.")
        error = validate(self.name, self.number)
        if error is not None:
            raise error

    def to_json(self) -> dict[str, str]:
        return {"id": self.id, "name": self.name, "number": self.number}
