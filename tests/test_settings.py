"""Tests for environment configuration."""

from phonebook.infrastructure import database_settings, listen_port


def test_database_settings_require_uri(monkeypatch):
    monkeypatch.delenv("NEO4J_URI", raising=False)
    assert database_settings() is None
    monkeypatch.setenv("NEO4J_URI", "   ")
    assert database_settings() is None


def test_database_settings_defaults(monkeypatch):
    monkeypatch.setenv("NEO4J_URI", "bolt://localhost:7687")
    monkeypatch.delenv("NEO4J_USER", raising=False)
    monkeypatch.delenv("NEO4J_PASSWORD", raising=False)
    settings = database_settings()
    assert settings.uri == "bolt://localhost:7687"
    assert settings.user == "neo4j"
    assert settings.password == "password"


def test_listen_port(monkeypatch):
    monkeypatch.delenv("PORT", raising=False)
    assert listen_port() == 3001
    monkeypatch.setenv("PORT", "8080")
    assert listen_port() == 8080
