"""Application ports (interfaces). Implemented by infrastructure adapters."""

from typing import Protocol

from phonebook.domain import Person


class PersonRepository(Protocol):
    """Persists and queries Person records.

    Writes are validated here, not only at the HTTP layer: the CLI talks to the
    store directly. Id-taking operations raise MalformedIdError for ids that
    cannot be a Person id; a well-formed id without a record is None, not an error.
    """

    async def create(self, name: str, number: str) -> Person:
        """Store a new Person and return it with its id. Raises ValidationError."""
        ...

    async def find_all(self) -> list[Person]:
        """Return all persons in creation order (or any stable order)."""
        ...

    async def find_by_id(self, person_id: str) -> Person | None:
        """Return the person with the given id, or None."""
        ...

    async def update_number(self, person_id: str, number: str) -> Person | None:
        """Replace the number and return the updated person, or None if not found."""
        ...

    async def delete_by_id(self, person_id: str) -> None:
        """Delete the person. Deleting an absent id succeeds."""
        ...

    async def count(self) -> int:
        """Return the number of stored persons."""
        ...
