"""
Jinja2 rendering for the HTML pages.

Every rendered page carries a CSRF token (cookie + template variable) so
the login and logout forms can be posted from any page.
"""

from pathlib import Path
from typing import Any, Dict, Optional
from fastapi import Request
from fastapi.templating import Jinja2Templates

from jobboard.core.config import settings
from jobboard.core.security import generate_csrf_token

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def render(
    request: Request,
    name: str,
    context: Optional[Dict[str, Any]] = None,
    status_code: int = 200
):
    csrf_token = request.cookies.get(settings.CSRF_COOKIE_NAME)
    is_new_token = not csrf_token
    if is_new_token:
        csrf_token = generate_csrf_token()

    page_context = {"csrf_token": csrf_token, "project_name": settings.PROJECT_NAME}
    page_context.update(context or {})

    response = templates.TemplateResponse(request, name, page_context, status_code=status_code)
    if is_new_token:
        response.set_cookie(settings.CSRF_COOKIE_NAME, csrf_token, httponly=True, samesite="lax")
    return response
