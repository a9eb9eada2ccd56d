"""
Async database access helpers (raw SQL) using asyncpg.

This module owns the connection pool. FastAPI initializes it on startup and
closes it on shutdown (see `api/main.py`).

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...

Every driver or connectivity failure leaves this module as `StorageError`;
callers never see asyncpg exception types.
"""

from __future__ import annotations

import asyncio
import logging
import os
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import asyncpg

from . import config

logger = logging.getLogger(__name__)

_pool: asyncpg.Pool | None = None

_DRIVER_ERRORS = (
    asyncpg.PostgresError,
    asyncpg.InterfaceError,
    OSError,
    asyncio.TimeoutError,
)


class StorageError(RuntimeError):
    pass


@dataclass(frozen=True)
class QueryResult:
    rows: list[dict[str, Any]] = field(default_factory=list)
    row_count: int = 0


def _sanitize_database_url(url: str) -> str:
    parts = urlsplit(url)
    if not parts.query:
        return url

    # TLS is driven by DATABASE_SSL, not by the URL.
    params = [(k, v) for (k, v) in parse_qsl(parts.query, keep_blank_values=True) if k != "sslmode"]
    query = urlencode(params)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


def database_url() -> str:
    url = os.environ.get("DATABASE_URL", "").strip()
    if not url:
        raise RuntimeError("DATABASE_URL is not set.")
    return _sanitize_database_url(url)


def _row_count_from_status(status: str | None) -> int:
    """
    Parse the affected row count out of a command tag.

    "UPDATE 3" -> 3, "INSERT 0 1" -> 1, "CREATE TABLE" -> 0.
    """
    parts = (status or "").split()
    if not parts:
        return 0
    try:
        return int(parts[-1])
    except ValueError:
        return 0


async def init_pool() -> None:
    global _pool
    if _pool is not None:
        return None
    _pool = await asyncpg.create_pool(
        dsn=database_url(),
        min_size=config.pool_min_size(),
        max_size=config.pool_max_size(),
        command_timeout=config.command_timeout_s(),
        ssl=config.database_ssl(),
    )
    logger.info(
        "db_pool_opened min_size=%s max_size=%s ssl=%s",
        config.pool_min_size(),
        config.pool_max_size(),
        config.database_ssl(),
    )
    await _probe()


async def _probe() -> None:
    try:
        row = await fetch_one("SELECT now() AS now")
    except StorageError:
        logger.exception("db_probe_failed")
        return
    logger.info("db_probe_ok server_time=%s", (row or {}).get("now"))


async def close_pool() -> None:
    global _pool
    if _pool is None:
        return None
    await _pool.close()
    _pool = None
    logger.info("db_pool_closed")


def pool() -> asyncpg.Pool:
    if _pool is None:
        raise StorageError("DB pool is not initialized. Call init_pool() on startup.")
    return _pool


def _record_to_dict(record: asyncpg.Record) -> dict[str, Any]:
    return dict(record)


async def query(sql: str, *args: Any) -> QueryResult:
    """
    Run one parameterized statement and return its rows plus row count.

    For statements without RETURNING, `rows` is empty and `row_count` comes
    from the command tag.
    """
    try:
        async with pool().acquire() as conn:  # type: asyncpg.Connection
            stmt = await conn.prepare(sql)
            records = await stmt.fetch(*args)
            status = stmt.get_statusmsg()
    except _DRIVER_ERRORS as exc:
        raise StorageError(str(exc) or exc.__class__.__name__) from exc

    rows = [_record_to_dict(r) for r in records]
    row_count = _row_count_from_status(status) if status else len(rows)
    return QueryResult(rows=rows, row_count=row_count)


async def fetch_one(sql: str, *args: Any) -> dict[str, Any] | None:
    """
    Run a query and return a single row as a dict (or None).
    """
    result = await query(sql, *args)
    return result.rows[0] if result.rows else None


async def fetch_all(sql: str, *args: Any) -> list[dict[str, Any]]:
    """
    Run a query and return all rows as a list of dicts.
    """
    result = await query(sql, *args)
    return result.rows


async def execute(sql: str, *args: Any) -> int:
    """
    Run a statement (INSERT/UPDATE/DELETE/DDL) and return the affected row count.
    """
    try:
        status = await pool().execute(sql, *args)
    except _DRIVER_ERRORS as exc:
        raise StorageError(str(exc) or exc.__class__.__name__) from exc
    return _row_count_from_status(status)


async def run_script(sql: str) -> None:
    """
    Run a multi-statement SQL script (no parameters) in one transaction.

    Used for schema management only; request handlers issue one statement each.
    """
    try:
        async with pool().acquire() as conn:  # type: asyncpg.Connection
            async with conn.transaction():
                await conn.execute(sql)
    except _DRIVER_ERRORS as exc:
        raise StorageError(str(exc) or exc.__class__.__name__) from exc
