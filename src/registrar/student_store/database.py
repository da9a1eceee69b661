"""SQLite engine and session setup for the student table."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

from sqlalchemy import create_engine, event, text
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from registrar.logging import get_logger
from registrar.student_store.models import Base

if TYPE_CHECKING:
    from sqlalchemy import Engine

logger = get_logger("student_store")

MEMORY_PATH = ":memory:"

# How long a writer waits on another connection's lock before failing
DEFAULT_BUSY_TIMEOUT_MS = 5000


class Database:
    """Owns the engine for one student database.

    File databases run in WAL mode so list and lookup requests keep reading
    while a save is committing; writers queue on the busy timeout instead of
    failing immediately. ``":memory:"`` keeps a single shared connection so
    every request thread sees the same rows.
    """

    def __init__(
        self,
        db_path: str = "registrar.db",
        busy_timeout_ms: int = DEFAULT_BUSY_TIMEOUT_MS,
    ) -> None:
        self.db_path = db_path
        self.busy_timeout_ms = busy_timeout_ms
        self._engine: Engine | None = None
        self._session_factory: sessionmaker[Session] | None = None

    @property
    def in_memory(self) -> bool:
        return self.db_path == MEMORY_PATH

    def _create_engine(self) -> Engine:
        # Sync endpoints run on FastAPI's threadpool, not the creating thread
        options: dict[str, Any] = {"connect_args": {"check_same_thread": False}}
        if self.in_memory:
            options["poolclass"] = StaticPool
        else:
            Path(self.db_path).parent.mkdir(parents=True, exist_ok=True)

        engine = create_engine(f"sqlite:///{self.db_path}", **options)

        @event.listens_for(engine, "connect")
        def configure_connection(dbapi_connection: Any, _connection_record: Any) -> None:
            cursor = dbapi_connection.cursor()
            if not self.in_memory:
                cursor.execute("PRAGMA journal_mode=WAL")
            cursor.execute(f"PRAGMA busy_timeout={int(self.busy_timeout_ms)}")
            cursor.close()

        return engine

    @property
    def engine(self) -> Engine:
        if self._engine is None:
            self._engine = self._create_engine()
        return self._engine

    def create_tables(self) -> None:
        """Create the students table and its indexes if they don't exist."""
        Base.metadata.create_all(self.engine)
        logger.debug("Student schema ready in %s", self.db_path)

    def get_session(self) -> Session:
        """Open a session whose loaded students stay readable after commit."""
        if self._session_factory is None:
            self._session_factory = sessionmaker(bind=self.engine, expire_on_commit=False)
        return self._session_factory()

    def pragma(self, name: str) -> Any:
        """Read a SQLite pragma from a pooled connection."""
        with self.engine.connect() as conn:
            return conn.execute(text(f"PRAGMA {name}")).scalar()

    def is_wal_mode(self) -> bool:
        """True for file databases; in-memory ones report "memory"."""
        return self.pragma("journal_mode") == "wal"

    def close(self) -> None:
        """Dispose of the engine; the next use opens a fresh one."""
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None
            self._session_factory = None
