"""
Database Access

Connection handling for the SQLAlchemy engine. Driver-level connection
errors are re-raised as ConnectionFailure so callers only have to match
one error kind.
"""

import logging
from contextlib import contextmanager
from sqlalchemy import text
from sqlalchemy.exc import ArgumentError, DBAPIError, OperationalError
from shopfront.extensions import db
from shopfront.errors import ConnectionFailure

logger = logging.getLogger(__name__)

CONNECTION_FAILED = 'Could not connect to the database'


def connect():
    """Open a connection from the application's engine.

    Must be called inside an application context. The caller owns the
    returned connection and should close it (use it in a ``with`` block).
    """
    try:
        return db.engine.connect()
    except (DBAPIError, ArgumentError) as e:
        raise ConnectionFailure(CONNECTION_FAILED) from e


def check_connection():
    """Probe the database with a trivial query."""
    with connect() as conn:
        conn.execute(text('SELECT 1'))
    return True


@contextmanager
def guard_connection():
    """Translate driver errors raised inside the block when the database is gone.

    Operational errors on a live connection (missing table, locked
    database, bad SQL) are re-raised unchanged.
    """
    try:
        yield
    except OperationalError as e:
        if not e.connection_invalidated and _reachable():
            raise
        raise ConnectionFailure(CONNECTION_FAILED) from e


def _reachable():
    try:
        check_connection()
    except (ConnectionFailure, DBAPIError):
        return False
    return True


def init_schema(app):
    """Verify the database is reachable and create missing tables."""
    with app.app_context():
        try:
            check_connection()
            with guard_connection():
                db.create_all()
        except ConnectionFailure as e:
            logger.error('Database unavailable at start-up: %s', e.__cause__)
            raise
        logger.debug('Schema verified for %s', db.engine.url.render_as_string(hide_password=True))
