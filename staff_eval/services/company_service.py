"""
Company and staff lookups.

Every query is scoped by company so one tenant can never read another's rows.
"""
import logging
from datetime import date
from typing import List

from sqlalchemy.orm import Session

from staff_eval.core.exceptions import (
    AccessDeniedError,
    AppException,
    EstablishmentDateMissingError,
    NotFoundError,
    NotStaffMemberError,
)
from staff_eval.models.company import Company
from staff_eval.models.user import User
from staff_eval.schemas.company import CompanyCreate, StaffCreate

logger = logging.getLogger(__name__)


def create_company(db: Session, payload: CompanyCreate) -> Company:
    company = Company(name=payload.name, establishment_date=payload.establishment_date)
    db.add(company)
    db.commit()
    db.refresh(company)
    logger.info(f"Company registered: {company.id}", extra={"company_id": company.id})
    return company


def get_company_or_404(db: Session, company_id: int) -> Company:
    company = db.query(Company).filter(Company.id == company_id).first()
    if company is None:
        raise NotFoundError(f"Company {company_id} not found")
    return company


def require_establishment_date(company: Company) -> date:
    if company.establishment_date is None:
        raise EstablishmentDateMissingError(company.id)
    return company.establishment_date


def create_staff(db: Session, company: Company, payload: StaffCreate) -> User:
    if db.query(User).filter(User.email == payload.email).first():
        raise AppException(
            message=f"User with email {payload.email} already exists",
            status_code=409,
            error_code="DUPLICATE_EMAIL",
        )
    user = User(
        company_id=company.id,
        email=payload.email,
        full_name=payload.full_name,
        role=payload.role,
        department=payload.department,
        position=payload.position,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def list_staff(db: Session, company_id: int) -> List[User]:
    return db.query(User).filter(
        User.company_id == company_id,
        User.is_active == True  # noqa: E712
    ).order_by(User.id).all()


def get_member_or_404(db: Session, company_id: int, user_id: int) -> User:
    user = db.query(User).filter(
        User.id == user_id,
        User.company_id == company_id
    ).first()
    if user is None:
        raise NotFoundError(f"User {user_id} not found")
    return user


def get_staff_or_404(db: Session, company_id: int, staff_id: int) -> User:
    """A company member with the staff role; admins cannot be evaluated."""
    user = get_member_or_404(db, company_id, staff_id)
    if not user.is_staff:
        raise NotStaffMemberError(user.id)
    return user


def get_admin_or_403(db: Session, company_id: int, admin_id: int) -> User:
    user = get_member_or_404(db, company_id, admin_id)
    if not user.is_admin:
        raise AccessDeniedError(f"User {admin_id} is not an admin of company {company_id}")
    return user
