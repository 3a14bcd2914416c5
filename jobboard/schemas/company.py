from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class CompanyCreateRequest(BaseModel):
    """Schema for registering a company"""
    name: str = Field(..., min_length=1, max_length=255)
    website: Optional[str] = Field(None, max_length=255)

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class CompanyResponse(BaseModel):
    """Schema for company response"""
    id: int
    name: str
    website: Optional[str] = None
    created_at: datetime

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True
