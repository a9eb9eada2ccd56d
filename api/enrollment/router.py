"""
Student enrollment API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from auth import dependencies as auth_dependencies

from . import schemas, service

router = APIRouter()


@router.post("/enroll/{course_id}")
async def enroll(
    course_id: int,
    student_id: int = Depends(auth_dependencies.get_current_user_id),
) -> dict:
    """
    Enroll the current student in a course with progress 0.

    Neither course existence nor a previous enrollment is checked up front.
    """
    return await service.enroll(student_id=student_id, course_id=course_id)


@router.get("/my-courses")
async def my_courses(
    student_id: int = Depends(auth_dependencies.get_current_user_id),
) -> list[dict]:
    return await service.list_my_courses(student_id=student_id)


@router.patch("/progress/{course_id}")
async def update_progress(
    course_id: int,
    request: schemas.ProgressUpdateRequest,
    student_id: int = Depends(auth_dependencies.get_current_user_id),
) -> dict:
    return await service.update_progress(
        student_id=student_id,
        course_id=course_id,
        progress=request.progress,
    )
