# invoicing/db/engine.py

from functools import lru_cache
from typing import Any

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine

from invoicing.config import get_settings


def create_db_engine(url: str, echo: bool = False) -> Engine:
    """Build an engine; SQLite connections get foreign key enforcement."""
    engine = create_engine(url, echo=echo, future=True, pool_pre_ping=True)

    if engine.dialect.name == "sqlite":

        @event.listens_for(engine, "connect")
        def _set_sqlite_pragma(dbapi_conn: Any, _: Any) -> None:
            cursor = dbapi_conn.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return engine


@lru_cache
def get_engine() -> Engine:
    settings = get_settings()
    # echo=True if you want to see SQL printed in the terminal
    return create_db_engine(settings.database_url, echo=settings.database_echo)
