"""
Database Session Management
============================

Handles database connections and session lifecycle.

Every session opens its own SQLite connection and closes it again when
the scope ends (``NullPool``), so nothing is shared between calls.
"""

import logging
import os
from contextlib import contextmanager
from typing import Generator

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import NullPool

from userstore.core.exceptions import (
    DatabaseConnectionError,
    QueryError,
    UserStoreError,
)

logger = logging.getLogger(__name__)


def create_db_engine(database_path: str, echo: bool = False) -> Engine:
    """
    Create an engine bound to a SQLite database file.

    Args:
        database_path: Path of the database file
        echo: Log every statement SQLAlchemy emits

    Returns:
        Engine that opens a fresh connection per checkout
    """
    # Ensure data directory exists
    db_dir = os.path.dirname(database_path)
    if db_dir and not os.path.exists(db_dir):
        os.makedirs(db_dir, exist_ok=True)

    engine = create_engine(
        f"sqlite:///{database_path}",
        poolclass=NullPool,
        echo=echo
    )

    @event.listens_for(engine, "connect")
    def set_sqlite_pragma(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    return engine


def create_session_factory(engine: Engine) -> sessionmaker:
    """Create a session factory for an engine."""
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@contextmanager
def session_scope(session_factory: sessionmaker) -> Generator[Session, None, None]:
    """
    Open a connection and run one transaction on it.

    The connection is opened eagerly so an unopenable file surfaces as
    DatabaseConnectionError before any statement runs. The transaction
    commits when the block exits cleanly and rolls back otherwise.

    Usage:
        with session_scope(factory) as db:
            db.add(user)

    Raises:
        DatabaseConnectionError: The database file could not be opened
        QueryError: Any other engine error inside the block
    """
    db = session_factory()
    try:
        db.connection()
    except SQLAlchemyError as e:
        db.close()
        logger.error(f"Could not open database: {e}")
        raise DatabaseConnectionError("Could not open database", cause=e) from e

    try:
        yield db
        db.commit()
    except UserStoreError:
        db.rollback()
        raise
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Statement failed, transaction rolled back: {e}")
        raise QueryError("Database statement failed", cause=e) from e
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def create_all_tables(engine: Engine) -> None:
    """Create the Users and Userdata tables if they do not exist."""
    from userstore.models.base import Base

    Base.metadata.create_all(bind=engine)

