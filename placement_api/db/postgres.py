import logging
from contextlib import contextmanager
from functools import lru_cache
from typing import Any, Dict, Iterator, List, Optional, Sequence

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from placement_api.core.config import get_settings

logger = logging.getLogger(__name__)


@lru_cache()
def get_engine() -> Engine:
    """
    Build the process-wide engine with a connection pool.
    pool_size: connections kept ready
    max_overflow: extra connections allowed under load
    """
    settings = get_settings()
    return create_engine(
        settings.postgres_url,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_pre_ping=True,
        echo=settings.db_echo
    )


def _placeholders(count: int) -> str:
    return ", ".join(f":p{i}" for i in range(count))


def build_function_call(name: str, arg_count: int) -> str:
    """SELECT over a set-returning routine, e.g. SELECT * FROM GetEligibleStudents(:p0)"""
    return f"SELECT * FROM {name}({_placeholders(arg_count)})"


def build_procedure_call(name: str, arg_count: int, output_count: int) -> str:
    """
    CALL with trailing INOUT parameters passed as NULL.
    PostgreSQL returns the output values as a single result row.
    """
    parts = [_placeholders(arg_count)] if arg_count else []
    parts.extend(["NULL"] * output_count)
    return f"CALL {name}({', '.join(parts)})"


class PlacementStore:
    """
    Pooled access to the placement database.

    Each operation checks a session out of the pool, commits on success,
    rolls back and re-raises on error, and always returns the connection.
    Handlers receive the store through the get_store dependency.
    """

    def __init__(self, engine: Engine):
        self.engine = engine
        self.session_factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    @contextmanager
    def session(self) -> Iterator[Session]:
        """
        Context manager for database sessions.
        Usage:
            with store.session() as db:
                db.execute(text("SELECT * FROM Student"))
        """
        session = self.session_factory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def fetch_all(self, sql: str, params: Optional[dict] = None) -> List[Dict[str, Any]]:
        """Execute a query and return rows as list of dicts."""
        with self.session() as db:
            result = db.execute(text(sql), params or {})
            columns = result.keys()
            return [dict(zip(columns, row)) for row in result.fetchall()]

    def insert(self, sql: str, params: dict) -> int:
        """Execute an INSERT ... RETURNING <id> and return the generated id."""
        with self.session() as db:
            result = db.execute(text(sql), params)
            return result.scalar_one()

    def call_function(self, name: str, *args: Any) -> List[Dict[str, Any]]:
        """Run a set-returning stored routine and return its rows."""
        params = {f"p{i}": value for i, value in enumerate(args)}
        return self.fetch_all(build_function_call(name, len(args)), params)

    def call_procedure(self, name: str, args: Sequence[Any], outputs: Sequence[str]) -> Dict[str, Any]:
        """
        Run a stored procedure whose last parameters are INOUT values.
        Returns the outputs keyed by the names given in `outputs`.
        """
        params = {f"p{i}": value for i, value in enumerate(args)}
        sql = build_procedure_call(name, len(args), len(outputs))
        with self.session() as db:
            row = db.execute(text(sql), params).fetchone()
        values = tuple(row) if row is not None else (None,) * len(outputs)
        return dict(zip(outputs, values))

    def ping(self) -> bool:
        """
        Test if the database is reachable.
        Returns True if connection successful, False otherwise.
        """
        try:
            with self.session() as db:
                return db.execute(text("SELECT 1")).scalar() == 1
        except Exception as e:
            logger.warning("Database connection failed: %s", e)
            return False


@lru_cache()
def _default_store() -> PlacementStore:
    return PlacementStore(get_engine())


def get_store() -> PlacementStore:
    """
    Dependency for FastAPI route injection.
    Usage:
        @router.get("/things")
        async def list_things(store: PlacementStore = Depends(get_store)):
            ...
    """
    return _default_store()
