"""
Application database model.

One applicant's submission for a job posting. A (job, applicant email) pair
may appear at most once.
"""

from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from jobboard.core.database import Base


class Application(Base):
    __tablename__ = "applications"
    __table_args__ = (
        UniqueConstraint("job_id", "applicant_email", name="uq_application_job_email"),
    )

    id = Column(Integer, primary_key=True, index=True)
    job_id = Column(Integer, ForeignKey("jobs.id", ondelete="CASCADE"), nullable=False, index=True)

    applicant_name = Column(String(255), nullable=False)
    applicant_email = Column(String(255), nullable=False)
    cover_letter = Column(Text, nullable=True)
    resume_url = Column(String(500), nullable=True)

    created_at = Column(DateTime(timezone=True), nullable=False)

    job = relationship("Job", back_populates="applications")

    def __repr__(self):
        return f"<Application(id={self.id}, job_id={self.job_id}, email='{self.applicant_email}')>"
