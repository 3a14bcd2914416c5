"""
Admin form login for the HTML pages.

- GET /login: login form
- POST /login: check credentials, set the session cookie
- POST /logout: clear the session cookie

Both POSTs require the CSRF token issued with the form.
"""

import logging
from typing import Optional
from fastapi import APIRouter, Depends, Form, HTTPException, Request, status
from fastapi.responses import RedirectResponse

from jobboard.core.config import settings
from jobboard.core.deps import get_optional_admin
from jobboard.core.security import authenticate_admin, create_session_token, csrf_tokens_match
from jobboard.web.templating import render

router = APIRouter(tags=["Auth"], include_in_schema=False)
logger = logging.getLogger(__name__)

HOME_AFTER_LOGIN = "/jobs"


def _check_csrf(request: Request, form_token: Optional[str]) -> None:
    if not csrf_tokens_match(request.cookies.get(settings.CSRF_COOKIE_NAME), form_token):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Invalid CSRF token")


@router.get("/login")
def login_form(
    request: Request,
    error: Optional[str] = None,
    logout: Optional[str] = None,
    admin: Optional[str] = Depends(get_optional_admin)
):
    if admin:
        return RedirectResponse(url=HOME_AFTER_LOGIN, status_code=303)
    return render(request, "login.html", {"error": error is not None, "logged_out": logout is not None})


@router.post("/login")
def login(
    request: Request,
    username: str = Form(...),
    password: str = Form(...),
    csrf_token: Optional[str] = Form(None)
):
    _check_csrf(request, csrf_token)

    if not authenticate_admin(username, password):
        logger.warning(f"Failed admin login for '{username}'")
        return RedirectResponse(url="/login?error", status_code=303)

    logger.info(f"Admin '{username}' logged in")
    response = RedirectResponse(url=HOME_AFTER_LOGIN, status_code=303)
    response.set_cookie(
        settings.SESSION_COOKIE_NAME,
        create_session_token(username),
        max_age=settings.SESSION_EXPIRE_MINUTES * 60,
        httponly=True,
        samesite="lax",
    )
    return response


@router.post("/logout")
def logout(request: Request, csrf_token: Optional[str] = Form(None)):
    _check_csrf(request, csrf_token)

    response = RedirectResponse(url="/login?logout", status_code=303)
    response.delete_cookie(settings.SESSION_COOKIE_NAME)
    return response
