"""
Enrollment persistence (raw SQL).

`(student_id, course_id)` is not unique in the schema; enrolling twice
creates two rows and progress updates touch all of them.
"""

from __future__ import annotations

from typing import Any

from core import db

ENROLLMENT_COLUMNS = "id, student_id, course_id, progress"


async def create_enrollment(*, student_id: int, course_id: int) -> dict[str, Any]:
    row = await db.fetch_one(
        f"""
        INSERT INTO enrollments (student_id, course_id)
        VALUES ($1, $2)
        RETURNING {ENROLLMENT_COLUMNS}
        """,
        student_id,
        course_id,
    )
    if row is None:
        raise db.StorageError("Failed to create enrollment.")
    return row


async def list_student_courses(*, student_id: int) -> list[dict[str, Any]]:
    return await db.fetch_all(
        """
        SELECT c.id, c.title, c.description, c.teacher_id, c.created_at, e.progress
        FROM enrollments e
        JOIN courses c ON e.course_id = c.id
        WHERE e.student_id = $1
        ORDER BY c.id, e.id
        """,
        student_id,
    )


async def update_progress(*, student_id: int, course_id: int, progress: int) -> dict[str, Any] | None:
    """
    Returns the first updated enrollment, or None when no row matched.
    """
    result = await db.query(
        f"""
        UPDATE enrollments
        SET progress = $1
        WHERE student_id = $2
          AND course_id = $3
        RETURNING {ENROLLMENT_COLUMNS}
        """,
        progress,
        student_id,
        course_id,
    )
    if result.row_count == 0:
        return None
    return result.rows[0]
