"""
Course authoring persistence (raw SQL).

Every write is scoped by `teacher_id` in the WHERE clause, so "not found"
and "owned by someone else" look the same to callers.
"""

from __future__ import annotations

from typing import Any

from core import db

COURSE_COLUMNS = "id, title, description, teacher_id, created_at"


async def create_course(*, teacher_id: int, title: str | None, description: str | None) -> dict[str, Any]:
    row = await db.fetch_one(
        f"""
        INSERT INTO courses (title, description, teacher_id)
        VALUES ($1, $2, $3)
        RETURNING {COURSE_COLUMNS}
        """,
        title,
        description,
        teacher_id,
    )
    if row is None:
        raise db.StorageError("Failed to create course.")
    return row


async def list_teacher_courses(*, teacher_id: int) -> list[dict[str, Any]]:
    return await db.fetch_all(
        f"""
        SELECT {COURSE_COLUMNS}
        FROM courses
        WHERE teacher_id = $1
        ORDER BY id
        """,
        teacher_id,
    )


async def update_course_description(
    *,
    teacher_id: int,
    course_id: int,
    description: str | None,
) -> dict[str, Any] | None:
    result = await db.query(
        f"""
        UPDATE courses
        SET description = $1
        WHERE id = $2
          AND teacher_id = $3
        RETURNING {COURSE_COLUMNS}
        """,
        description,
        course_id,
        teacher_id,
    )
    if result.row_count == 0:
        return None
    return result.rows[0]


async def course_belongs_to_teacher(course_id: int, *, teacher_id: int) -> bool:
    row = await db.fetch_one(
        """
        SELECT 1 AS ok
        FROM courses
        WHERE id = $1
          AND teacher_id = $2
        LIMIT 1
        """,
        course_id,
        teacher_id,
    )
    return row is not None
