"""
Actor identity for protected routes.

Handlers never read headers themselves; they depend on
`get_current_user_id` and pass the id into service calls.

AUTH_MODE=header  -> `x-user-id: <int>` (unverified, development only)
AUTH_MODE=token   -> `Authorization: Bearer <jwt>` verified with JWT_SECRET
"""

from __future__ import annotations

from fastapi import Header, HTTPException, status

from core import config

from . import security

USER_ID_HEADER = "x-user-id"


def _bad_request(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


def _user_id_from_header(raw: str | None) -> int:
    value = (raw or "").strip()
    if not value:
        raise _bad_request(f"Missing {USER_ID_HEADER} header.")
    if not value.isdigit():
        raise _bad_request(f"{USER_ID_HEADER} must be an integer user id.")
    return int(value)


def _extract_bearer_token(authorization: str | None) -> str:
    raw = (authorization or "").strip()
    if not raw:
        raise _bad_request("Missing Authorization header.")

    parts = raw.split(" ", 1)
    if len(parts) != 2:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid Authorization header format.",
        )

    scheme, token = parts[0].strip().lower(), parts[1].strip()
    if scheme != "bearer" or not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authorization must be: Bearer <token>.",
        )
    return token


def _user_id_from_token(authorization: str | None) -> int:
    token = _extract_bearer_token(authorization)
    try:
        return security.user_id_from_token(token)
    except security.AuthSecurityError as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(exc),
        ) from exc


async def get_current_user_id(
    x_user_id: str | None = Header(default=None),
    authorization: str | None = Header(default=None),
) -> int:
    if config.auth_mode() == "token":
        return _user_id_from_token(authorization)
    return _user_id_from_header(x_user_id)
