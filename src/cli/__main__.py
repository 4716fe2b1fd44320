"""
Phonebook CLI: list or add persons directly against the store, bypassing HTTP.
Run: python -m cli                      (list everyone)
     python -m cli "<name>" "<number>"  (add a person)
"""

import asyncio
import sys

from neo4j.exceptions import DriverError, Neo4jError

from phonebook.application import PersonRepository
from phonebook.domain import PhonebookError
from phonebook.infrastructure import (
    Neo4jPersonRepository,
    create_driver,
    database_settings,
    load_env,
)

USAGE = """Usage:
  python -m cli                      list all persons
  python -m cli "<name>" "<number>"  add a person to the phonebook"""


async def list_persons(repository: PersonRepository) -> int:
    try:
        persons = await repository.find_all()
    except (DriverError, Neo4jError) as e:
        print(f"Error listing persons: {e}", file=sys.stderr)
        return 1
    print("phonebook:")
    for person in persons:
        print(f"{person.name} {person.number}")
    return 0


async def add_person(repository: PersonRepository, name: str, number: str) -> int:
    try:
        person = await repository.create(name, number)
    except PhonebookError as e:
        print(f"Error adding person: {e.message}", file=sys.stderr)
        return 1
    except (DriverError, Neo4jError) as e:
        print(f"Error adding person: {e}", file=sys.stderr)
        return 1
    print(f"added {person.name} number {person.number} to phonebook")
    return 0


async def run(args: list[str], repository: PersonRepository) -> int:
    """Dispatch on argument count. Caller has already rejected counts other than 0 and 2."""
    if not args:
        return await list_persons(repository)
    name, number = args
    return await add_person(repository, name, number)


async def _run_with_database(args: list[str]) -> int:
    settings = database_settings()
    if settings is None:
        print("Error: NEO4J_URI is not set (environment or .env)", file=sys.stderr)
        return 1
    driver = create_driver(settings)
    try:
        return await run(args, Neo4jPersonRepository(driver))
    finally:
        await driver.close()


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) not in (0, 2):
        print(USAGE)
        return 1
    load_env()
    return asyncio.run(_run_with_database(args))


if __name__ == "__main__":
    sys.exit(main())
