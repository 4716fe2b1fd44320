"""Environment configuration: .env loading, database connection, listen port."""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Repo root: src/phonebook/infrastructure/settings.py -> four levels up
_REPO_ROOT = Path(__file__).resolve().parent.parent.parent.parent

DEFAULT_PORT = 3001


@dataclass(frozen=True)
class DatabaseSettings:
    uri: str
    user: str
    password: str


def load_env() -> None:
    """Load .env from repo root or current dir (first one found wins)."""
    for path in (_REPO_ROOT / ".env", Path.cwd() / ".env"):
        if path.exists():
            load_dotenv(path)
            break


def database_settings() -> DatabaseSettings | None:
    """Read NEO4J_URI / NEO4J_USER / NEO4J_PASSWORD. None when NEO4J_URI is not set."""
    uri = os.environ.get("NEO4J_URI", "").strip()
    if not uri:
        return None
    return DatabaseSettings(
        uri=uri,
        user=os.environ.get("NEO4J_USER", "neo4j").strip(),
        password=os.environ.get("NEO4J_PASSWORD", "password").strip(),
    )


def listen_port() -> int:
    raw = os.environ.get("PORT", "").strip()
    return int(raw) if raw else DEFAULT_PORT
