"""Infrastructure layer: concrete implementations of application ports, and configuration."""

from phonebook.infrastructure.memory_repository import InMemoryPersonRepository
from phonebook.infrastructure.persistence.neo4j_repository import (
    Neo4jPersonRepository,
    create_driver,
    ensure_person_constraint,
)
from phonebook.infrastructure.settings import (
    DatabaseSettings,
    database_settings,
    listen_port,
    load_env,
)

__all__ = [
    "DatabaseSettings",
    "InMemoryPersonRepository",
    "Neo4jPersonRepository",
    "create_driver",
    "database_settings",
    "ensure_person_constraint",
    "listen_port",
    "load_env",
]
