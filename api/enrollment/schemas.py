"""
Pydantic schemas for enrollment endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel


class ProgressUpdateRequest(BaseModel):
    # Out-of-range values are clamped by the service, not rejected.
    progress: int
