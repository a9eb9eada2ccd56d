"""
Database schema for users, courses and enrollments.

`reset_schema()` drops and recreates all three tables (dev/test reset).
`ensure_schema()` only creates what is missing and is safe on every startup.

Usage:
    python -m core.schema            # create missing tables
    python -m core.schema --reset    # drop everything and recreate
"""

from __future__ import annotations

import argparse
import asyncio
import logging

from . import config, db

logger = logging.getLogger(__name__)

TABLES = ("users", "courses", "enrollments")

# Child tables first so FK dependencies never block the drop.
DROP_SQL = """
DROP TABLE IF EXISTS enrollments;
DROP TABLE IF EXISTS courses;
DROP TABLE IF EXISTS users;
"""

CREATE_SQL = """
CREATE TABLE IF NOT EXISTS users (
    id SERIAL PRIMARY KEY,
    name VARCHAR(100) NOT NULL,
    email VARCHAR(100) UNIQUE NOT NULL,
    role VARCHAR(20) NOT NULL CHECK (role IN ('student', 'teacher'))
);

CREATE TABLE IF NOT EXISTS courses (
    id SERIAL PRIMARY KEY,
    title VARCHAR(200) NOT NULL,
    description TEXT,
    teacher_id INTEGER REFERENCES users(id) ON DELETE SET NULL,
    created_at TIMESTAMP DEFAULT now()
);

CREATE TABLE IF NOT EXISTS enrollments (
    id SERIAL PRIMARY KEY,
    student_id INTEGER REFERENCES users(id) ON DELETE CASCADE,
    course_id INTEGER REFERENCES courses(id) ON DELETE CASCADE,
    progress INTEGER DEFAULT 0
);
"""


async def ensure_schema() -> None:
    await db.run_script(CREATE_SQL)
    logger.info("schema_ensured tables=%s", ",".join(TABLES))


async def reset_schema() -> None:
    await db.run_script(DROP_SQL + CREATE_SQL)
    logger.info("schema_reset tables=%s", ",".join(TABLES))


async def _main(reset: bool) -> None:
    await db.init_pool()
    try:
        if reset:
            await reset_schema()
        else:
            await ensure_schema()
    finally:
        await db.close_pool()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Create or reset the learning platform schema.")
    parser.add_argument("--reset", action="store_true", help="drop all tables and recreate them")
    args = parser.parse_args()

    config.configure_logging()
    asyncio.run(_main(args.reset))
