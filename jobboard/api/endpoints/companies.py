import logging
from fastapi import APIRouter, HTTPException, Depends
from sqlalchemy.orm import Session

from jobboard.core.database import get_db
from jobboard.schemas.company import CompanyCreateRequest, CompanyResponse
from jobboard.services import company_service

router = APIRouter(prefix="/companies", tags=["Companies"])
logger = logging.getLogger(__name__)


@router.get("", response_model=list[CompanyResponse])
def list_companies(db: Session = Depends(get_db)):
    return company_service.list_all(db)


@router.get("/{company_id}", response_model=CompanyResponse)
def get_company(company_id: int, db: Session = Depends(get_db)):
    company = company_service.find_by_id(db, company_id)

    if not company:
        raise HTTPException(status_code=404, detail="Company not found")

    return company


@router.post("", response_model=CompanyResponse)
def create_company(request: CompanyCreateRequest, db: Session = Depends(get_db)):
    """Register a company. Responds 409 if the name is taken."""
    return company_service.create(db, name=request.name, website=request.website)
