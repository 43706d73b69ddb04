# app/database.py

from contextlib import contextmanager
from typing import Iterator

from fastapi import Request
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.schema import CreateSchema

from app.core.config import Settings

# Base class for models
Base = declarative_base()

# PostgreSQL namespaces used by the models
SCHEMAS = ("entity", "product", "purchase", "sale")


class StorageGateway:
    """
    Owns the engine, its connection pool and the session factory.

    Built once at startup, stored on ``app.state`` and disposed at shutdown.
    """

    def __init__(self, engine: Engine):
        self.engine = engine
        self.session_factory = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=engine,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "StorageGateway":
        engine = create_engine(
            settings.database_url,
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=0,
            pool_timeout=settings.DB_POOL_TIMEOUT,
            pool_recycle=settings.DB_POOL_RECYCLE,
            pool_pre_ping=True,
            echo=settings.DEBUG,
        )
        return cls(engine)

    def session(self) -> Session:
        return self.session_factory()

    @contextmanager
    def transaction(self) -> Iterator[Session]:
        """Session whose work commits on exit and rolls back on any error."""
        session = self.session()
        try:
            with session.begin():
                yield session
        finally:
            session.close()

    def create_all(self):
        # Import models so they register on Base.metadata
        import app.models  # noqa: F401

        with self.engine.begin() as conn:
            if conn.dialect.name == "postgresql":
                for schema in SCHEMAS:
                    conn.execute(CreateSchema(schema, if_not_exists=True))
            Base.metadata.create_all(bind=conn)

    def ping(self) -> bool:
        with self.engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return True

    def dispose(self):
        self.engine.dispose()


def get_gateway(request: Request) -> StorageGateway:
    return request.app.state.gateway


# Database dependency
def get_db(request: Request):
    """Database session dependency for FastAPI"""
    db = get_gateway(request).session()
    try:
        yield db
    finally:
        db.close()
