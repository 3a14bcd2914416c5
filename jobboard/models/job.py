import enum
from sqlalchemy import Column, Integer, String, Text, DateTime, Enum, ForeignKey
from sqlalchemy.orm import relationship
from jobboard.core.database import Base


class JobStatus(str, enum.Enum):
    """
    Publication status of a job posting.

    - DRAFT: Created, not visible to applicants yet
    - PUBLISHED: Open for applications
    - CLOSED: No longer accepting applications
    """
    DRAFT = "DRAFT"
    PUBLISHED = "PUBLISHED"
    CLOSED = "CLOSED"


class Job(Base):
    """
    A job posting owned by exactly one company.
    """
    __tablename__ = "jobs"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False, index=True)
    description = Column(Text, nullable=False)
    location = Column(String(255), nullable=True)
    tags = Column(Text, nullable=True)

    status = Column(Enum(JobStatus), default=JobStatus.DRAFT, nullable=False, index=True)

    company_id = Column(Integer, ForeignKey("companies.id"), nullable=False, index=True)

    # Both assigned by the service layer; updated_at changes on every save
    created_at = Column(DateTime(timezone=True), nullable=False, index=True)
    updated_at = Column(DateTime(timezone=True), nullable=True)

    # Relationships
    company = relationship("Company", back_populates="jobs", lazy="joined")
    applications = relationship("Application", back_populates="job", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Job(id={self.id}, title='{self.title}', status={self.status.value})>"
