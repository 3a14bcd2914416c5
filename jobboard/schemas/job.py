from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel
from typing import Optional
from datetime import datetime

from jobboard.models.job import JobStatus
from jobboard.schemas.company import CompanyResponse


class JobCreateRequest(BaseModel):
    """Schema for creating a new job"""
    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    location: Optional[str] = Field(None, max_length=255)
    tags: Optional[str] = Field(None, description="Free-text tags, e.g. 'python, remote'")
    company_id: int
    status: Optional[JobStatus] = Field(None, description="Defaults to DRAFT")

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class JobUpdateRequest(BaseModel):
    """
    Schema for replacing a job's fields.

    Omitted location/tags are cleared; omitted status is left unchanged.
    """
    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    location: Optional[str] = Field(None, max_length=255)
    tags: Optional[str] = None
    status: Optional[JobStatus] = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class JobStatusUpdateRequest(BaseModel):
    status: JobStatus


class JobResponse(BaseModel):
    """Schema for job response"""
    id: int
    title: str
    description: str
    location: Optional[str] = None
    tags: Optional[str] = None
    status: JobStatus
    company: Optional[CompanyResponse] = None
    created_at: datetime
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True  # Allows conversion from SQLAlchemy models
        alias_generator = to_camel
        populate_by_name = True
