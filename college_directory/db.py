"""Database engine, session factory and declarative base."""
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from college_directory.settings import settings

IN_MEMORY_URLS = ("sqlite://", "sqlite:///:memory:")


def engine_options(url: str) -> dict:
    """Extra create_engine() arguments for the given database URL."""
    if not url.startswith("sqlite"):
        return {}
    options = {"connect_args": {"check_same_thread": False}}
    # an in-memory database only lives as long as its connection
    if url in IN_MEMORY_URLS:
        options["poolclass"] = StaticPool
    return options


engine = create_engine(settings.database_url, **engine_options(settings.database_url))
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def init_db():
    """Create the tables that don't exist yet."""
    from college_directory.students import models  # noqa: F401  registers tables

    Base.metadata.create_all(bind=engine)


# Dependency to get DB session
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
