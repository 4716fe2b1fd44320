"""Neo4j implementation of PersonRepository.
Each phonebook entry is a (:Person {id, name, number, created_at}) node; id is a UUID4 string
assigned here, never by the database, so deleted ids are never handed out again.
All operations use the async driver; one driver is shared by the whole process.
"""

from datetime import datetime

from neo4j import AsyncDriver, AsyncGraphDatabase

from phonebook.domain import Person, parse_person_id, validate_number
from phonebook.infrastructure.settings import DatabaseSettings

_CONSTRAINT_QUERY = """
CREATE CONSTRAINT person_id_unique IF NOT EXISTS
FOR (p:Person) REQUIRE p.id IS UNIQUE
"""

_CREATE_QUERY = """
CREATE (p:Person { id: $id, name: $name, number: $number, created_at: $created_at })
RETURN p
"""

_FIND_ALL_QUERY = """
MATCH (p:Person)
RETURN p
ORDER BY p.created_at
"""

_FIND_BY_ID_QUERY = """
MATCH (p:Person { id: $id })
RETURN p
"""

_UPDATE_NUMBER_QUERY = """
MATCH (p:Person { id: $id })
SET p.number = $number
RETURN p
"""

_DELETE_QUERY = """
MATCH (p:Person { id: $id })
DETACH DELETE p
"""

_COUNT_QUERY = """
MATCH (p:Person)
RETURN count(p) AS total
"""


def create_driver(settings: DatabaseSettings) -> AsyncDriver:
    return AsyncGraphDatabase.driver(
        settings.uri, auth=(settings.user, settings.password)
    )


async def ensure_person_constraint(driver: AsyncDriver) -> None:
    """Create unique constraint on Person(id) if missing."""
    async with driver.session() as session:
        await session.run(_CONSTRAINT_QUERY)


def _datetime_to_iso(dt: datetime) -> str:
    return dt.isoformat()


def _iso_to_datetime(s: str) -> datetime:
    return datetime.fromisoformat(s.replace("Z", "+00:00"))


class Neo4jPersonRepository:
    """Stores persons in Neo4j."""

    def __init__(self, driver: AsyncDriver) -> None:
        self._driver = driver

    async def create(self, name: str, number: str) -> Person:
        person = Person(name=name, number=number)
        async with self._driver.session() as session:
            result = await session.run(
                _CREATE_QUERY,
                id=person.id,
                name=person.name,
                number=person.number,
                created_at=_datetime_to_iso(person.created_at),
            )
            record = await result.single()
        if not record:
            raise RuntimeError("create: expected one result")
        return _record_to_person(record)

    async def find_all(self) -> list[Person]:
        async with self._driver.session() as session:
            result = await session.run(_FIND_ALL_QUERY)
            return [_record_to_person(rec) async for rec in result]

    async def find_by_id(self, person_id: str) -> Person | None:
        pid = parse_person_id(person_id)
        async with self._driver.session() as session:
            result = await session.run(_FIND_BY_ID_QUERY, id=pid)
            record = await result.single()
        if not record:
            return None
        return _record_to_person(record)

    async def update_number(self, person_id: str, number: str) -> Person | None:
        pid = parse_person_id(person_id)
        error = validate_number(number)
        if error is not None:
            raise error
        async with self._driver.session() as session:
            result = await session.run(_UPDATE_NUMBER_QUERY, id=pid, number=number)
            record = await result.single()
        if not record:
            return None
        return _record_to_person(record)

    async def delete_by_id(self, person_id: str) -> None:
        pid = parse_person_id(person_id)
        async with self._driver.session() as session:
            result = await session.run(_DELETE_QUERY, id=pid)
            await result.consume()

    async def count(self) -> int:
        async with self._driver.session() as session:
            result = await session.run(_COUNT_QUERY)
            record = await result.single()
        return record["total"] if record else 0


def _record_to_person(record) -> Person:
    p = record["p"]
    return Person(
        id=p["id"],
        name=p["name"],
        number=p["number"],
        created_at=_iso_to_datetime(p["created_at"]),
    )
