"""
Conversion of storage failures into HTTP errors.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from fastapi import HTTPException, status

from .db import StorageError

logger = logging.getLogger(__name__)


@contextmanager
def storage_guard(message: str) -> Iterator[None]:
    """
    Turn a `StorageError` raised inside the block into a 500 with `message`.

    The underlying failure is logged with its traceback; the client only
    sees `message`.
    """
    try:
        yield
    except StorageError as exc:
        logger.exception("storage_failed message=%r", message)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=message,
        ) from exc


def not_found(message: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=message)
