import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import SQLModel, Session, create_engine

logger = logging.getLogger(__name__)


class DatabaseUnavailable(RuntimeError):
    """The database file could not be opened."""


def open_database(dsn: str) -> Engine:
    try:
        engine = create_engine(dsn, echo=False)
        # sqlite opens lazily; touch the file now so a bad path fails at startup
        with engine.connect():
            pass
    except SQLAlchemyError as exc:
        raise DatabaseUnavailable(f"cannot open database {dsn!r}") from exc
    return engine


def ensure_schema(engine: Engine) -> None:
    # import models so SQLModel registers the tables
    from slot_machine.db import models  # noqa: F401
    for table in SQLModel.metadata.sorted_tables:
        try:
            table.create(engine, checkfirst=True)
        except SQLAlchemyError:
            logger.error("Error executing query: create table %s", table.name, exc_info=True)


@contextmanager
def session_scope(engine: Engine) -> Iterator[Session]:
    with Session(engine) as session:
        yield session
