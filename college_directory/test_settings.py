"""Unit tests for settings and database configuration."""

from sqlalchemy.pool import StaticPool

from college_directory.db import engine_options
from college_directory.settings import Settings


class TestSettings:
    """Test cases for environment-driven settings."""

    def test_port_defaults_to_3000(self, monkeypatch):
        """Test the port falls back to 3000 when PORT is unset."""
        monkeypatch.delenv("PORT", raising=False)
        assert Settings(_env_file=None).port == 3000

    def test_port_from_environment(self, monkeypatch):
        """Test PORT overrides the default."""
        monkeypatch.setenv("PORT", "8080")
        assert Settings(_env_file=None).port == 8080

    def test_database_url_from_environment(self, monkeypatch):
        """Test DATABASE_URL selects the database."""
        monkeypatch.setenv("DATABASE_URL", "sqlite:///./other.db")
        assert Settings(_env_file=None).database_url == "sqlite:///./other.db"


class TestEngineOptions:
    """Test cases for engine options per database URL."""

    def test_sqlite_file(self):
        """Test file databases may be shared across threads."""
        options = engine_options("sqlite:///./college.db")
        assert options == {"connect_args": {"check_same_thread": False}}

    def test_sqlite_memory_uses_single_connection(self):
        """Test in-memory databases keep one shared connection."""
        options = engine_options("sqlite://")
        assert options["poolclass"] is StaticPool

    def test_other_databases(self):
        """Test server databases get no extra options."""
        assert engine_options("postgresql://user:pass@db:5432/college") == {}
