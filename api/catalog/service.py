"""
Course catalog business logic.
"""

from __future__ import annotations

from typing import Any

from core.errors import storage_guard

from . import repository


async def list_courses() -> list[dict[str, Any]]:
    with storage_guard("Failed to list courses."):
        return await repository.list_courses()
