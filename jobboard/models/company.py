from sqlalchemy import Column, Integer, String, DateTime, UniqueConstraint
from sqlalchemy.orm import relationship
from jobboard.core.database import Base


class Company(Base):
    """
    A hiring company. Jobs reference it; deleting a company is not supported,
    so the relationship carries no cascade.
    """
    __tablename__ = "companies"
    __table_args__ = (
        UniqueConstraint("name", name="uq_companies_name"),
    )

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    website = Column(String(255), nullable=True)

    # Assigned by the service layer on first save
    created_at = Column(DateTime(timezone=True), nullable=False)

    jobs = relationship("Job", back_populates="company")

    def __repr__(self):
        return f"<Company(id={self.id}, name='{self.name}')>"
