"""
Teacher course-authoring API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from auth import dependencies as auth_dependencies

from . import schemas, service

router = APIRouter()


@router.post("/courses")
async def create_course(
    request: schemas.CreateCourseRequest,
    teacher_id: int = Depends(auth_dependencies.get_current_user_id),
) -> dict:
    return await service.create_course(
        teacher_id=teacher_id,
        title=request.title,
        description=request.description,
    )


@router.get("/my-courses")
async def my_courses(
    teacher_id: int = Depends(auth_dependencies.get_current_user_id),
) -> list[dict]:
    return await service.list_my_courses(teacher_id=teacher_id)


@router.patch("/courses/{course_id}")
async def update_course(
    course_id: int,
    request: schemas.UpdateCourseRequest,
    teacher_id: int = Depends(auth_dependencies.get_current_user_id),
) -> dict:
    """
    Replace the description of a course owned by the current teacher.
    """
    return await service.update_course_description(
        teacher_id=teacher_id,
        course_id=course_id,
        description=request.description,
    )


@router.post("/materials/{course_id}")
async def upload_materials(
    course_id: int,
    teacher_id: int = Depends(auth_dependencies.get_current_user_id),
) -> dict:
    """
    Materials upload placeholder; only checks course ownership.
    """
    return await service.upload_materials(teacher_id=teacher_id, course_id=course_id)
