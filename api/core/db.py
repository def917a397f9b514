"""
Async database access helpers (raw SQL) using aiosqlite.

`Database` owns the single connection to the SQLite file. FastAPI opens it on
startup, closes it on shutdown and hands it to routes through `get_db`
(see `api/main.py`).

SQL parameter style:
- sqlite uses positional placeholders: ?, ?, ?, ...
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import aiosqlite
from fastapi import Request

from .errors import ServiceError

logger = logging.getLogger(__name__)


# Store failures are explicit and separable from other runtime errors.
class StoreError(ServiceError):
    pass


def _database_uri(path: str) -> str:
    # mode=rw: never create the file, the schema is owned elsewhere.
    return Path(path).resolve().as_uri() + "?mode=rw"


class Database:
    def __init__(self, path: str) -> None:
        self.path = path
        self._connection: aiosqlite.Connection | None = None

    @property
    def is_open(self) -> bool:
        return self._connection is not None

    async def open(self) -> None:
        """
        Open the database file in read-write mode.

        A failure is logged and swallowed: the process keeps serving and every
        store call fails with `StoreError` until the file can be opened.
        """
        if self._connection is not None:
            return None
        name = Path(self.path).name
        try:
            # isolation_level=None: every statement commits on its own.
            connection = await aiosqlite.connect(
                _database_uri(self.path),
                uri=True,
                isolation_level=None,
            )
        except aiosqlite.Error:
            logger.exception("db_open_failed file=%s", name)
            return None
        connection.row_factory = aiosqlite.Row
        self._connection = connection
        logger.info("db_connected file=%s", name)

    async def close(self) -> None:
        if self._connection is None:
            return None
        await self._connection.close()
        self._connection = None

    def connection(self) -> aiosqlite.Connection:
        if self._connection is None:
            raise StoreError(f"Database {Path(self.path).name} is not open.")
        return self._connection

    async def fetch_all(self, sql: str, *args: Any) -> list[dict[str, Any]]:
        """
        Run a query and return all rows as a list of dicts.
        """
        try:
            async with self.connection().execute(sql, args) as cursor:
                rows = await cursor.fetchall()
        except aiosqlite.Error as exc:
            raise StoreError(str(exc)) from exc
        return [dict(r) for r in rows]

    async def execute(self, sql: str, *args: Any) -> None:
        """
        Run a statement (INSERT/UPDATE/DELETE). No result returned.
        """
        try:
            cursor = await self.connection().execute(sql, args)
            await cursor.close()
        except aiosqlite.Error as exc:
            raise StoreError(str(exc)) from exc


def get_db(request: Request) -> Database:
    return request.app.state.db
