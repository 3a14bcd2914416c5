"""
Application submission and lookup.

The duplicate check runs before insert; the (job_id, applicant_email)
unique constraint catches submissions that race past it.
"""

import logging
from datetime import datetime, timezone
from typing import List, Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from jobboard.core.exceptions import ConflictError, NotFoundError, ValidationError
from jobboard.crud import application as application_crud
from jobboard.crud import job as job_crud
from jobboard.models.application import Application

logger = logging.getLogger(__name__)

ALREADY_APPLIED = "You have already applied for this job"


def normalize_email(email: str) -> str:
    """Canonical form used for storage and lookups: trimmed, domain lowercased."""
    local_part, sep, domain = email.strip().rpartition("@")
    if not sep:
        return email.strip()
    return f"{local_part}@{domain.lower()}"


def submit(
    db: Session,
    job_id: int,
    applicant_name: str,
    applicant_email: str,
    cover_letter: Optional[str],
    resume_url: Optional[str]
) -> Application:
    """
    Submit an application for a job.

    Raises:
        NotFoundError: If the job does not exist
        ValidationError: If the applicant name is blank
        ConflictError: If this email already applied to this job
    """
    job = job_crud.get_by_id(db, job_id)
    if not job:
        raise NotFoundError("Job not found")

    if not applicant_name.strip():
        raise ValidationError("applicantName must not be blank")

    applicant_email = normalize_email(applicant_email)

    if application_crud.exists_by_job_and_email(db, job_id, applicant_email):
        logger.warning(f"Duplicate application rejected for job {job_id}: {applicant_email}")
        raise ConflictError(ALREADY_APPLIED)

    application = Application(
        job=job,
        applicant_name=applicant_name,
        applicant_email=applicant_email,
        cover_letter=cover_letter,
        resume_url=resume_url,
        created_at=datetime.now(timezone.utc),
    )

    try:
        application = application_crud.save(db, application)
    except IntegrityError:
        db.rollback()
        logger.warning(f"Concurrent duplicate application for job {job_id}: {applicant_email}")
        raise ConflictError(ALREADY_APPLIED)

    logger.info(f"Application {application.id} submitted for job {job_id}")
    return application


def list_for_job(db: Session, job_id: int) -> List[Application]:
    return application_crud.get_by_job(db, job_id)


def has_applied(db: Session, job_id: int, email: str) -> bool:
    return application_crud.exists_by_job_and_email(db, job_id, normalize_email(email))
