"""
CRUD operations for Job model.

Implements the Repository pattern to encapsulate all database operations
for jobs, providing a clean interface for the service layer.
"""

from typing import List, Optional
from sqlalchemy import or_
from sqlalchemy.orm import Session
from jobboard.models.company import Company
from jobboard.models.job import Job


def save(db: Session, job: Job) -> Job:
    """
    Persist a new or modified job.

    Timestamps are expected to be set by the caller.

    Args:
        db: Database session
        job: Job instance (transient or already attached)

    Returns:
        The saved Job, refreshed from the database
    """
    db.add(job)
    db.commit()
    db.refresh(job)

    return job


def get_by_id(db: Session, job_id: int) -> Optional[Job]:
    """
    Retrieve a job by its ID.

    Args:
        db: Database session
        job_id: Job ID to retrieve

    Returns:
        Job instance if found, None otherwise
    """
    return db.query(Job).filter(Job.id == job_id).first()


def get_most_recent(db: Session, limit: int = 20) -> List[Job]:
    """
    Retrieve the newest jobs first.

    Args:
        db: Database session
        limit: Maximum number of jobs to return

    Returns:
        Up to `limit` jobs ordered by creation time, newest first
    """
    return (
        db.query(Job)
        .order_by(Job.created_at.desc(), Job.id.desc())
        .limit(limit)
        .all()
    )


def search_by_title_or_company_name(db: Session, title: str, company_name: str) -> List[Job]:
    """
    Case-insensitive substring search on job title OR owning company name.

    Wildcard characters in the search text match literally.

    Args:
        db: Database session
        title: Text to look for in the job title
        company_name: Text to look for in the company name

    Returns:
        All matching jobs, newest first (unbounded)
    """
    return (
        db.query(Job)
        .join(Company, Job.company_id == Company.id)
        .filter(
            or_(
                Job.title.icontains(title, autoescape=True),
                Company.name.icontains(company_name, autoescape=True),
            )
        )
        .order_by(Job.created_at.desc(), Job.id.desc())
        .all()
    )


def delete_by_id(db: Session, job_id: int) -> bool:
    """
    Delete a job by ID. Missing ids are ignored.

    Args:
        db: Database session
        job_id: Job ID to delete

    Returns:
        True if a job was deleted, False if none existed
    """
    job = get_by_id(db, job_id)
    if not job:
        return False

    db.delete(job)
    db.commit()

    return True
