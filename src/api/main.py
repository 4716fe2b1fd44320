"""
FastAPI backend: phonebook REST API.
Run with uvicorn: uvicorn api.main:app --reload  (or: python -m api)
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime

from fastapi import Depends, FastAPI, Request, Response, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse
from neo4j.exceptions import DriverError, Neo4jError
from pydantic import BaseModel

from api.error_handlers import error_body, register_error_handlers
from api.request_log import RequestLogMiddleware
from phonebook.application import PersonRepository
from phonebook.infrastructure import (
    Neo4jPersonRepository,
    create_driver,
    database_settings,
    ensure_person_constraint,
    load_env,
)

load_env()

logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=logging.INFO,
)
logger = logging.getLogger(__name__)

NAME_OR_NUMBER_MISSING = "name or number missing"
PERSON_NOT_FOUND = "person not found"


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.repository = None
    settings = database_settings()
    if settings is None:
        logger.error("NEO4J_URI is not set; phonebook requests will fail until it is configured")
        yield
        return
    driver = create_driver(settings)
    try:
        try:
            await ensure_person_constraint(driver)
            logger.info("Connected to Neo4j at %s", settings.uri)
        except (DriverError, Neo4jError) as e:
            logger.error("Error connecting to Neo4j: %s", e)
        app.state.repository = Neo4jPersonRepository(driver)
        yield
    finally:
        await driver.close()


def get_repository(request: Request) -> PersonRepository:
    repository = getattr(request.app.state, "repository", None)
    if repository is None:
        raise RuntimeError("Person store is not available (is NEO4J_URI set?)")
    return repository


app = FastAPI(title="Phonebook API", lifespan=lifespan)
app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])
app.add_middleware(RequestLogMiddleware)
register_error_handlers(app)


class CreatePersonBody(BaseModel):
    name: str | None = None
    number: str | None = None


class UpdatePersonBody(BaseModel):
    number: str | None = None


def _not_found() -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content=error_body(PERSON_NOT_FOUND))


# --- REST: health ---


@app.get("/health")
def health():
    return {"status": "ok"}


# --- REST: info ---


@app.get("/info", response_class=HTMLResponse)
async def info(repository: PersonRepository = Depends(get_repository)):
    count = await repository.count()
    now = datetime.now().astimezone()
    return (
        f"<p>Phonebook has info for {count} people</p>"
        f"<p>{now.strftime('%a %b %d %Y %H:%M:%S GMT%z (%Z)')}</p>"
    )


# --- REST: persons ---


@app.get("/api/persons")
async def list_persons(repository: PersonRepository = Depends(get_repository)):
    return [person.to_json() for person in await repository.find_all()]


@app.get("/api/persons/{person_id}")
async def get_person(person_id: str, repository: PersonRepository = Depends(get_repository)):
    person = await repository.find_by_id(person_id)
    if person is None:
        return _not_found()
    return person.to_json()


@app.post("/api/persons")
async def create_person(
    body: CreatePersonBody | None = None,
    repository: PersonRepository = Depends(get_repository),
):
    if body is None or not body.name or not body.number:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST, content=error_body(NAME_OR_NUMBER_MISSING)
        )
    person = await repository.create(body.name, body.number)
    return person.to_json()


@app.put("/api/persons/{person_id}")
async def update_person(
    person_id: str,
    body: UpdatePersonBody | None = None,
    repository: PersonRepository = Depends(get_repository),
):
    """Only the number changes; a name in the body is ignored."""
    number = body.number if body is not None else None
    person = await repository.update_number(person_id, number or "")
    if person is None:
        return _not_found()
    return person.to_json()


@app.delete("/api/persons/{person_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_person(person_id: str, repository: PersonRepository = Depends(get_repository)):
    await repository.delete_by_id(person_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
