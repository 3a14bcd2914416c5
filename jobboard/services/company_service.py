import logging
from datetime import datetime, timezone
from typing import List, Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from jobboard.core.exceptions import ConflictError, ValidationError
from jobboard.crud import company as company_crud
from jobboard.models.company import Company

logger = logging.getLogger(__name__)


def list_all(db: Session) -> List[Company]:
    return company_crud.get_all(db)


def find_by_id(db: Session, company_id: int) -> Optional[Company]:
    return company_crud.get_by_id(db, company_id)


def create(db: Session, name: str, website: Optional[str] = None) -> Company:
    """
    Register a company. Names are unique.

    Raises:
        ValidationError: If the name is blank
        ConflictError: If a company with this name already exists
    """
    if not name.strip():
        raise ValidationError("name must not be blank")

    if company_crud.get_by_name(db, name):
        raise ConflictError(f"Company '{name}' already exists")

    company = Company(name=name, website=website, created_at=datetime.now(timezone.utc))
    try:
        company = company_crud.save(db, company)
    except IntegrityError:
        db.rollback()
        raise ConflictError(f"Company '{name}' already exists")

    logger.info(f"Created company {company.id}: {company.name}")
    return company
