"""
Database connector — SQLAlchemy engine factory and scoped connections.
"""
import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy import create_engine, inspect
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import SQLAlchemyError

from tablegen.core.errors import DataAccessError

logger = logging.getLogger(__name__)


def create_engine_from_url(url: str) -> Engine:
    """Build a SQLAlchemy engine; a malformed URL or missing driver is a data access error."""
    try:
        return create_engine(url, pool_pre_ping=True)
    except (SQLAlchemyError, ImportError) as e:
        raise DataAccessError(f"Could not create database engine: {e}") from e


@contextmanager
def open_connection(url: str) -> Iterator[Connection]:
    """
    Yield one connection for the duration of the block.
    The connection is closed and the engine disposed on every exit path.
    """
    engine = create_engine_from_url(url)
    try:
        with engine.connect() as conn:
            logger.debug("Connected to %s", engine.url.render_as_string(hide_password=True))
            yield conn
    finally:
        engine.dispose()


def resolve_schema(conn: Connection, schema: Optional[str], default_schema: Optional[str] = None) -> str:
    """Blank schema -> configured default -> the connection's own default schema."""
    if schema and schema.strip():
        return schema.strip()
    if default_schema and default_schema.strip():
        return default_schema.strip()
    return inspect(conn).default_schema_name or "dbo"
