"""
Job orchestration: search, existence checks and explicit timestamping
on top of the job/company CRUD modules.
"""

import logging
from datetime import datetime, timezone
from typing import List, Optional
from sqlalchemy.orm import Session

from jobboard.core.config import settings
from jobboard.core.exceptions import NotFoundError, ValidationError
from jobboard.crud import company as company_crud
from jobboard.crud import job as job_crud
from jobboard.models.job import Job, JobStatus

logger = logging.getLogger(__name__)


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _require_text(value: str, field: str) -> str:
    if value is None or not value.strip():
        raise ValidationError(f"{field} must not be blank")
    return value


def recent(db: Session) -> List[Job]:
    """Newest jobs first, capped at RECENT_JOBS_LIMIT."""
    return job_crud.get_most_recent(db, limit=settings.RECENT_JOBS_LIMIT)


def search(db: Session, query: Optional[str]) -> List[Job]:
    """
    Search jobs by title or company name.

    A missing or blank query falls back to the recent listing.
    """
    if query is None or not query.strip():
        return recent(db)

    text = query.strip()
    return job_crud.search_by_title_or_company_name(db, text, text)


def find_by_id(db: Session, job_id: int) -> Optional[Job]:
    return job_crud.get_by_id(db, job_id)


def create(
    db: Session,
    title: str,
    description: str,
    location: Optional[str],
    tags: Optional[str],
    company_id: int,
    status: Optional[JobStatus] = None
) -> Job:
    """
    Create a job under an existing company.

    Raises:
        ValidationError: If title or description is blank
        NotFoundError: If company_id does not resolve. Nothing is written.
    """
    _require_text(title, "title")
    _require_text(description, "description")

    company = company_crud.get_by_id(db, company_id)
    if not company:
        raise NotFoundError("Company not found")

    now = _now()
    job = Job(
        title=title,
        description=description,
        location=location,
        tags=tags,
        status=status or JobStatus.DRAFT,
        company=company,
        created_at=now,
        updated_at=now,
    )
    job = job_crud.save(db, job)

    logger.info(f"Created job {job.id}: {job.title} (company {company.id}, status {job.status.value})")
    return job


def update(
    db: Session,
    job_id: int,
    title: str,
    description: str,
    location: Optional[str],
    tags: Optional[str],
    status: Optional[JobStatus] = None
) -> Job:
    """
    Replace a job's editable fields.

    title/description/location/tags are always overwritten (None clears the
    optional ones); status only changes when one is given.

    Raises:
        ValidationError: If title or description is blank
        NotFoundError: If the job does not exist.
    """
    job = job_crud.get_by_id(db, job_id)
    if not job:
        raise NotFoundError("Job not found")

    _require_text(title, "title")
    _require_text(description, "description")

    job.title = title
    job.description = description
    job.location = location
    job.tags = tags
    if status is not None:
        job.status = status
    job.updated_at = _now()

    job = job_crud.save(db, job)
    logger.info(f"Updated job {job.id}")
    return job


def update_status(db: Session, job_id: int, status: JobStatus) -> Job:
    """
    Change only the status of a job.

    Raises:
        NotFoundError: If the job does not exist.
    """
    job = job_crud.get_by_id(db, job_id)
    if not job:
        raise NotFoundError("Job not found")

    job.status = status
    job.updated_at = _now()

    job = job_crud.save(db, job)
    logger.info(f"Job {job.id} status -> {status.value}")
    return job


def publish(db: Session, job_id: int) -> Job:
    return update_status(db, job_id, JobStatus.PUBLISHED)


def unpublish(db: Session, job_id: int) -> Job:
    return update_status(db, job_id, JobStatus.DRAFT)


def delete(db: Session, job_id: int) -> None:
    """Delete a job by id; deleting a missing job is a no-op."""
    if job_crud.delete_by_id(db, job_id):
        logger.info(f"Deleted job {job_id}")
    else:
        logger.debug(f"Delete requested for missing job {job_id}")
