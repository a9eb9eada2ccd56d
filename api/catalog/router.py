"""
Course catalog API endpoints (public, no identity required).
"""

from __future__ import annotations

from fastapi import APIRouter

from . import service

router = APIRouter()


@router.get("/courses")
async def list_courses() -> list[dict]:
    """
    List every course, oldest id first.
    """
    return await service.list_courses()
