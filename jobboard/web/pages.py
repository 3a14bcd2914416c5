"""
Server-rendered job pages.

- GET /: recent jobs (public)
- GET /jobs?q=: search results (admin session)
- GET /jobs/{job_id}: job detail, unknown ids redirect to /jobs (admin session)
"""

import logging
from typing import Optional
from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import RedirectResponse
from sqlalchemy.orm import Session

from jobboard.core.database import get_db
from jobboard.core.deps import get_optional_admin, require_admin
from jobboard.services import job_service
from jobboard.web.templating import render

router = APIRouter(tags=["Pages"], include_in_schema=False)
logger = logging.getLogger(__name__)


@router.get("/")
def home(
    request: Request,
    db: Session = Depends(get_db),
    admin: Optional[str] = Depends(get_optional_admin)
):
    return render(request, "index.html", {"recent_jobs": job_service.recent(db), "admin": admin})


@router.get("/jobs")
def job_list(
    request: Request,
    q: Optional[str] = Query(None),
    db: Session = Depends(get_db),
    admin: str = Depends(require_admin)
):
    return render(request, "jobs/list.html", {"q": q, "jobs": job_service.search(db, q), "admin": admin})


@router.get("/jobs/{job_id}")
def job_detail(
    request: Request,
    job_id: int,
    db: Session = Depends(get_db),
    admin: str = Depends(require_admin)
):
    job = job_service.find_by_id(db, job_id)
    if job is None:
        logger.debug(f"Job page requested for missing job {job_id}")
        return RedirectResponse(url="/jobs", status_code=303)

    return render(request, "jobs/detail.html", {"job": job, "admin": admin})
