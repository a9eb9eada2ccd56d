"""
Enrollment business logic.

Progress is always stored within [MIN_PROGRESS, MAX_PROGRESS].
"""

from __future__ import annotations

import logging
from typing import Any

from core.errors import not_found, storage_guard

from . import repository

MIN_PROGRESS = 0
MAX_PROGRESS = 100

logger = logging.getLogger(__name__)


def clamp_progress(progress: int) -> int:
    return max(MIN_PROGRESS, min(int(progress), MAX_PROGRESS))


async def enroll(*, student_id: int, course_id: int) -> dict[str, Any]:
    with storage_guard("Failed to enroll in course."):
        enrollment = await repository.create_enrollment(student_id=student_id, course_id=course_id)

    logger.info("enrolled student_id=%s course_id=%s enrollment_id=%s", student_id, course_id, enrollment["id"])
    return {"message": "Enrollment created.", "enrollment": enrollment}


async def list_my_courses(*, student_id: int) -> list[dict[str, Any]]:
    with storage_guard("Failed to list enrolled courses."):
        return await repository.list_student_courses(student_id=student_id)


async def update_progress(*, student_id: int, course_id: int, progress: int) -> dict[str, Any]:
    with storage_guard("Failed to update progress."):
        enrollment = await repository.update_progress(
            student_id=student_id,
            course_id=course_id,
            progress=clamp_progress(progress),
        )

    if enrollment is None:
        raise not_found("Enrollment not found.")
    return {"message": "Progress updated.", "enrollment": enrollment}
