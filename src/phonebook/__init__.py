"""
Phonebook core: clean-architecture layout.

- domain: Person, validation rules, error taxonomy. No outer dependencies.
- application: ports (PersonRepository).
- infrastructure: adapters (InMemoryPersonRepository, Neo4jPersonRepository) and settings.
"""

from phonebook.application import PersonRepository
from phonebook.domain import (
    ErrorKind,
    MalformedIdError,
    Person,
    PhonebookError,
    ValidationError,
    validate,
)
from phonebook.infrastructure import InMemoryPersonRepository, Neo4jPersonRepository

__all__ = [
    "ErrorKind",
    "InMemoryPersonRepository",
    "MalformedIdError",
    "Neo4jPersonRepository",
    "Person",
    "PersonRepository",
    "PhonebookError",
    "ValidationError",
    "validate",
]
