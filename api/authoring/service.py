"""
Course authoring business logic.

Scope:
- create / list courses owned by a teacher
- update a course description (owner only)
- materials upload stub (owner only)
"""

from __future__ import annotations

import logging
from typing import Any

from core.errors import not_found, storage_guard

from . import repository

logger = logging.getLogger(__name__)

NOT_OWNED_DETAIL = "Course not found or not owned by this teacher."


async def create_course(*, teacher_id: int, title: str | None, description: str | None) -> dict[str, Any]:
    with storage_guard("Failed to create course."):
        course = await repository.create_course(
            teacher_id=teacher_id,
            title=title,
            description=description,
        )

    logger.info("course_created course_id=%s teacher_id=%s", course["id"], teacher_id)
    return course


async def list_my_courses(*, teacher_id: int) -> list[dict[str, Any]]:
    with storage_guard("Failed to list teacher courses."):
        return await repository.list_teacher_courses(teacher_id=teacher_id)


async def update_course_description(
    *,
    teacher_id: int,
    course_id: int,
    description: str | None,
) -> dict[str, Any]:
    with storage_guard("Failed to update course."):
        course = await repository.update_course_description(
            teacher_id=teacher_id,
            course_id=course_id,
            description=description,
        )

    if course is None:
        raise not_found(NOT_OWNED_DETAIL)
    return {"message": "Course updated.", "course": course}


async def upload_materials(*, teacher_id: int, course_id: int) -> dict[str, str]:
    # Stub: ownership is enforced, nothing is stored yet.
    with storage_guard("Failed to add course materials."):
        owned = await repository.course_belongs_to_teacher(course_id, teacher_id=teacher_id)

    if not owned:
        raise not_found(NOT_OWNED_DETAIL)
    return {"message": "Materials added (stub)."}
