"""
CRUD operations for Company model.
"""

from typing import List, Optional
from sqlalchemy.orm import Session
from jobboard.models.company import Company


def save(db: Session, company: Company) -> Company:
    """Insert or update a company and return it with its id populated."""
    db.add(company)
    db.commit()
    db.refresh(company)
    return company


def get_by_id(db: Session, company_id: int) -> Optional[Company]:
    return db.query(Company).filter(Company.id == company_id).first()


def get_by_name(db: Session, name: str) -> Optional[Company]:
    return db.query(Company).filter(Company.name == name).first()


def get_all(db: Session) -> List[Company]:
    return db.query(Company).order_by(Company.id).all()
