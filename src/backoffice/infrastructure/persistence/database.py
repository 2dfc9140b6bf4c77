"""Storage handle: engine, session factory and transaction scope.

One ``Database`` is built by the composition root and handed to every
repository; the entry point closes it.  SQLAlchemy errors are translated
into domain exceptions at the transaction boundary.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import IntegrityError, InterfaceError, OperationalError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from backoffice.domain.exceptions import (
    ReferentialIntegrityError,
    StorageUnavailableError,
)
from backoffice.infrastructure.persistence.tables import Base

logger = logging.getLogger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:

    def __init__(self, url: str, echo: bool = False) -> None:
        self._url = make_url(url)
        kwargs: dict = {"echo": echo}
        if self._is_sqlite and self._url.database in (None, "", ":memory:"):
            # A single shared connection, or each session would see its own empty database.
            kwargs["poolclass"] = StaticPool
            kwargs["connect_args"] = {"check_same_thread": False}

        self._engine: Engine = create_engine(self._url, **kwargs)
        if self._is_sqlite:
            event.listen(self._engine, "connect", _enable_sqlite_foreign_keys)
        self._session_factory = sessionmaker(bind=self._engine, expire_on_commit=False)

    @property
    def _is_sqlite(self) -> bool:
        return self._url.get_backend_name() == "sqlite"

    def create_schema(self) -> None:
        """Create any missing tables (and the SQLite file's directory)."""
        if self._is_sqlite and self._url.database not in (None, "", ":memory:"):
            Path(self._url.database).parent.mkdir(parents=True, exist_ok=True)
        try:
            Base.metadata.create_all(self._engine)
        except (OperationalError, InterfaceError) as exc:
            raise StorageUnavailableError(f"Database not available: {exc.orig}") from exc
        logger.debug("Schema ready on %s", self._url.render_as_string(hide_password=True))

    @contextmanager
    def transaction(self) -> Iterator[Session]:
        """Yield a session inside one transaction.

        Commits when the block exits normally, rolls back on any
        exception.
        """
        try:
            with self._session_factory.begin() as session:
                yield session
        except IntegrityError as exc:
            raise ReferentialIntegrityError(
                f"Integrity violation: {exc.orig}"
            ) from exc
        except (OperationalError, InterfaceError) as exc:
            raise StorageUnavailableError(f"Database not available: {exc.orig}") from exc

    def close(self) -> None:
        self._engine.dispose()
