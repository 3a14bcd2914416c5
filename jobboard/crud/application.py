"""
CRUD operations for Application model.
"""

from typing import List
from sqlalchemy.orm import Session
from jobboard.models.application import Application


def save(db: Session, application: Application) -> Application:
    """
    Insert an application.

    Raises:
        sqlalchemy.exc.IntegrityError: If (job_id, applicant_email) already exists.
            The session is left for the caller to roll back.
    """
    db.add(application)
    db.commit()
    db.refresh(application)
    return application


def get_by_job(db: Session, job_id: int) -> List[Application]:
    """Applications for a job, newest first."""
    return (
        db.query(Application)
        .filter(Application.job_id == job_id)
        .order_by(Application.created_at.desc(), Application.id.desc())
        .all()
    )


def exists_by_job_and_email(db: Session, job_id: int, email: str) -> bool:
    query = db.query(Application.id).filter(
        Application.job_id == job_id,
        Application.applicant_email == email,
    )
    return bool(db.query(query.exists()).scalar())
