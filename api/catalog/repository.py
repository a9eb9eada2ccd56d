"""
Course catalog persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core import db

COURSE_COLUMNS = "id, title, description, teacher_id, created_at"


async def list_courses() -> list[dict[str, Any]]:
    return await db.fetch_all(
        f"""
        SELECT {COURSE_COLUMNS}
        FROM courses
        ORDER BY id
        """
    )
