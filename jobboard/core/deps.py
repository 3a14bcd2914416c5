"""
FastAPI dependencies for the admin page session.

API routes never depend on these; they are unauthenticated.
"""

from typing import Optional
from fastapi import HTTPException, Request, status

from jobboard.core.config import settings
from jobboard.core.security import read_session_token

LOGIN_PATH = "/login"


def get_optional_admin(request: Request) -> Optional[str]:
    """Return the logged-in admin username, or None for anonymous visitors."""
    return read_session_token(request.cookies.get(settings.SESSION_COOKIE_NAME))


def require_admin(request: Request) -> str:
    """
    Require an admin session for HTML pages.

    Anonymous visitors are redirected to the login form, mirroring a classic
    form-login flow instead of answering 401.
    """
    username = get_optional_admin(request)
    if username is None:
        raise HTTPException(
            status_code=status.HTTP_303_SEE_OTHER,
            detail="Login required",
            headers={"Location": LOGIN_PATH},
        )
    return username
