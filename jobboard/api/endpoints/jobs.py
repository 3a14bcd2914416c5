import logging
from typing import Optional
from fastapi import APIRouter, HTTPException, Depends, Query, Response
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from jobboard.core.database import get_db
from jobboard.schemas.job import JobCreateRequest, JobUpdateRequest, JobStatusUpdateRequest, JobResponse
from jobboard.services import job_service

router = APIRouter(prefix="/jobs", tags=["Jobs"])
logger = logging.getLogger(__name__)


@router.get("", response_model=list[JobResponse])
def list_jobs(
    q: Optional[str] = Query(None, description="Case-insensitive match on title or company name"),
    db: Session = Depends(get_db)
):
    """
    Search jobs by title or company name.

    Without `q` (or with a blank one) the 20 most recent jobs are returned.
    """
    return job_service.search(db, q)


@router.get("/{job_id}", response_model=JobResponse)
def get_job(job_id: int, db: Session = Depends(get_db)):
    """Retrieve a job by ID."""
    job = job_service.find_by_id(db, job_id)

    if not job:
        raise HTTPException(status_code=404, detail="Job not found")

    return job


@router.post("", response_model=JobResponse)
def create_job(request: JobCreateRequest, db: Session = Depends(get_db)):
    """
    Create a job under an existing company.

    Responds 404 if `companyId` does not exist. Status defaults to DRAFT.
    """
    try:
        return job_service.create(
            db,
            title=request.title,
            description=request.description,
            location=request.location,
            tags=request.tags,
            company_id=request.company_id,
            status=request.status,
        )
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error creating job: {e}")
        raise


@router.put("/{job_id}", response_model=JobResponse)
def update_job(job_id: int, request: JobUpdateRequest, db: Session = Depends(get_db)):
    """
    Replace a job's title, description, location and tags.

    `status` is only applied when present.
    """
    try:
        return job_service.update(
            db,
            job_id,
            title=request.title,
            description=request.description,
            location=request.location,
            tags=request.tags,
            status=request.status,
        )
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error updating job {job_id}: {e}")
        raise


@router.patch("/{job_id}/status", response_model=JobResponse)
def update_job_status(job_id: int, request: JobStatusUpdateRequest, db: Session = Depends(get_db)):
    return job_service.update_status(db, job_id, request.status)


@router.patch("/{job_id}/publish", response_model=JobResponse)
def publish_job(job_id: int, db: Session = Depends(get_db)):
    return job_service.publish(db, job_id)


@router.patch("/{job_id}/unpublish", response_model=JobResponse)
def unpublish_job(job_id: int, db: Session = Depends(get_db)):
    return job_service.unpublish(db, job_id)


@router.delete("/{job_id}")
def delete_job(job_id: int, db: Session = Depends(get_db)):
    """
    Delete a job by ID. Succeeds with an empty body even if the job is absent.
    """
    job_service.delete(db, job_id)
    return Response(status_code=200)
