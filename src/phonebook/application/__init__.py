"""Application layer: ports. Depends only on domain."""

from phonebook.application.ports import PersonRepository

__all__ = ["PersonRepository"]
