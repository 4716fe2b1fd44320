"""In-memory implementation of PersonRepository (no DB)."""

from dataclasses import replace

from phonebook.domain import Person, parse_person_id, validate_number


class InMemoryPersonRepository:
    """Stores persons in memory. Order preserved by insertion.
    No operation awaits internally, so each one runs atomically on the event loop.
    """

    def __init__(self) -> None:
        self._by_id: dict[str, Person] = {}
        self._order: list[str] = []

    async def create(self, name: str, number: str) -> Person:
        person = Person(name=name, number=number)
        self._by_id[person.id] = person
        self._order.append(person.id)
        return person

    async def find_all(self) -> list[Person]:
        return [self._by_id[pid] for pid in self._order if pid in self._by_id]

    async def find_by_id(self, person_id: str) -> Person | None:
        return self._by_id.get(parse_person_id(person_id))

    async def update_number(self, person_id: str, number: str) -> Person | None:
        pid = parse_person_id(person_id)
        error = validate_number(number)
        if error is not None:
            raise error
        person = self._by_id.get(pid)
        if person is None:
            return None
        updated = replace(person, number=number)
        self._by_id[pid] = updated
        return updated

    async def delete_by_id(self, person_id: str) -> None:
        pid = parse_person_id(person_id)
        if self._by_id.pop(pid, None) is not None:
            self._order.remove(pid)

    async def count(self) -> int:
        return len(self._by_id)
