"""
Pydantic schemas for course authoring endpoints.

Fields are optional on purpose: the `courses.title NOT NULL` constraint is
the only required-field check.
"""

from __future__ import annotations

from pydantic import BaseModel


class CreateCourseRequest(BaseModel):
    title: str | None = None
    description: str | None = None


class UpdateCourseRequest(BaseModel):
    description: str | None = None
