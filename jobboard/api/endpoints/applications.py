"""
Application endpoints.

- POST /applications: submit an application (404 unknown job, 409 duplicate)
- GET /applications/job/{job_id}: applications for a job, newest first
- GET /applications/check: whether an email already applied to a job
"""

import logging
from fastapi import APIRouter, Depends, Query
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from jobboard.core.database import get_db
from jobboard.schemas.application import (
    ApplicationCreateRequest,
    ApplicationResponse,
    ApplicationCheckResponse
)
from jobboard.services import application_service

router = APIRouter(prefix="/applications", tags=["Applications"])
logger = logging.getLogger(__name__)


@router.post("", response_model=ApplicationResponse)
def submit_application(request: ApplicationCreateRequest, db: Session = Depends(get_db)):
    try:
        return application_service.submit(
            db,
            job_id=request.job_id,
            applicant_name=request.applicant_name,
            applicant_email=request.applicant_email,
            cover_letter=request.cover_letter,
            resume_url=request.resume_url,
        )
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error submitting application for job {request.job_id}: {e}")
        raise


@router.get("/job/{job_id}", response_model=list[ApplicationResponse])
def list_applications_for_job(job_id: int, db: Session = Depends(get_db)):
    return application_service.list_for_job(db, job_id)


@router.get("/check", response_model=ApplicationCheckResponse)
def check_if_applied(
    job_id: int = Query(..., alias="jobId"),
    email: str = Query(...),
    db: Session = Depends(get_db)
):
    """Returns `{"hasApplied": true|false}`."""
    return ApplicationCheckResponse(has_applied=application_service.has_applied(db, job_id, email))
