from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from staff_eval.database import get_db
from staff_eval.schemas.company import CompanyCreate, CompanyResponse, StaffCreate, StaffResponse
from staff_eval.services import company_service

router = APIRouter(
    prefix="/companies",
    tags=["companies"]
)


@router.post("", response_model=CompanyResponse, status_code=201)
def register_company(payload: CompanyCreate, db: Session = Depends(get_db)):
    return company_service.create_company(db, payload)


@router.get("/{company_id}", response_model=CompanyResponse)
def get_company(company_id: int, db: Session = Depends(get_db)):
    return company_service.get_company_or_404(db, company_id)


@router.post("/{company_id}/staff", response_model=StaffResponse, status_code=201)
def add_staff(company_id: int, payload: StaffCreate, db: Session = Depends(get_db)):
    company = company_service.get_company_or_404(db, company_id)
    return company_service.create_staff(db, company, payload)


@router.get("/{company_id}/staff", response_model=List[StaffResponse])
def list_staff(company_id: int, db: Session = Depends(get_db)):
    company_service.get_company_or_404(db, company_id)
    return company_service.list_staff(db, company_id)
