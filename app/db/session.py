from typing import Generator

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from app.core.config import settings
from app.db.base import Base
from app.utils.logger import get_logger


logger = get_logger("db")

STREET_CODE_GLOBAL_INDEX = "uq_street_code_global"


def enable_sqlite_foreign_keys(engine: Engine) -> None:
    """SQLite ignores ON DELETE CASCADE unless the pragma is set per connection."""

    @event.listens_for(engine, "connect")
    def _set_pragma(dbapi_connection, _connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def apply_street_code_scope(engine: Engine, scope: str) -> None:
    """Add or drop the store-wide unique index on street codes.

    Under the "global" scope the index backs up the service lookup when two
    writers race. The per-district constraint is part of the table itself.
    """
    if scope == "global":
        ddl = (
            f"CREATE UNIQUE INDEX IF NOT EXISTS {STREET_CODE_GLOBAL_INDEX} "
            "ON street (street_code)"
        )
    else:
        ddl = f"DROP INDEX IF EXISTS {STREET_CODE_GLOBAL_INDEX}"
    with engine.begin() as conn:
        conn.execute(text(ddl))


class DBSessionManager:

    def __init__(self, database_url: str | None = None) -> None:
        url = database_url or settings.database.database_url
        if url.startswith("sqlite"):
            self.engine = create_engine(
                url,
                future=True,
                connect_args={"check_same_thread": False},
            )
            enable_sqlite_foreign_keys(self.engine)
        else:
            self.engine = create_engine(
                url,
                future=True,
                pool_size=settings.database.pool_size,
                max_overflow=settings.database.max_overflow,
                pool_timeout=settings.database.pool_timeout,
                pool_recycle=settings.database.pool_recycle,
                pool_pre_ping=settings.database.pool_pre_ping,
            )
        self.SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=self.engine,
            expire_on_commit=False,
        )

    def get_session(self) -> Generator[Session, None, None]:
        session: Session = self.SessionLocal()
        try:
            yield session
        finally:
            session.close()

    def init_db(self) -> None:
        # Importing the package registers every model on Base.metadata
        import app.models  # noqa: F401

        Base.metadata.create_all(bind=self.engine)
        apply_street_code_scope(self.engine, settings.street_code_scope)
        logger.info(
            f"Database schema ready (street code scope: {settings.street_code_scope})"
        )


db_manager = DBSessionManager()


def get_db() -> Generator[Session, None, None]:
    yield from db_manager.get_session()
