"""
Pydantic schemas for Application API requests/responses.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, EmailStr
from pydantic.alias_generators import to_camel


class ApplicationCreateRequest(BaseModel):
    """Body of POST /applications."""
    job_id: int
    applicant_name: str = Field(..., min_length=1, max_length=255)
    applicant_email: EmailStr
    cover_letter: Optional[str] = None
    resume_url: Optional[str] = Field(None, max_length=500, description="Link to the applicant's resume")

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class ApplicationResponse(BaseModel):
    id: int
    job_id: int
    applicant_name: str
    applicant_email: str
    cover_letter: Optional[str] = None
    resume_url: Optional[str] = None
    created_at: datetime

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True


class ApplicationCheckResponse(BaseModel):
    has_applied: bool

    class Config:
        alias_generator = to_camel
        populate_by_name = True
