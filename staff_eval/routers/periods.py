"""
Fiscal period endpoints.

Thin wrappers over the period calculator, resolved against the company's
establishment date.
"""
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List, Optional
from datetime import date

from staff_eval.database import get_db
from staff_eval.schemas.period import (
    MonthEntryResponse,
    PeriodBoundsResponse,
    PeriodInfoResponse,
    QuarterGroupResponse,
)
from staff_eval.services import company_service, period_calculator

router = APIRouter(
    prefix="/companies/{company_id}/periods",
    tags=["periods"]
)


def _founding_date(company_id: int, db: Session) -> date:
    company = company_service.get_company_or_404(db, company_id)
    return company_service.require_establishment_date(company)


@router.get("", response_model=List[PeriodBoundsResponse])
def list_periods(
    company_id: int,
    max_periods: Optional[int] = Query(None, description="Defaults to the current period"),
    db: Session = Depends(get_db)
):
    founding = _founding_date(company_id, db)
    periods = period_calculator.enumerate_periods(founding, max_periods)
    return [PeriodBoundsResponse.model_validate(p) for p in periods]


@router.get("/current", response_model=PeriodInfoResponse)
def current_period(
    company_id: int,
    target_date: Optional[date] = Query(None, description="Defaults to today"),
    db: Session = Depends(get_db)
):
    founding = _founding_date(company_id, db)
    info = period_calculator.resolve_current_period(founding, target_date)
    return PeriodInfoResponse.model_validate(info)


@router.get("/{period_number}", response_model=PeriodBoundsResponse)
def period_bounds(company_id: int, period_number: int, db: Session = Depends(get_db)):
    founding = _founding_date(company_id, db)
    bounds = period_calculator.resolve_period_bounds(founding, period_number)
    return PeriodBoundsResponse.model_validate(bounds)


@router.get("/{period_number}/months", response_model=List[MonthEntryResponse])
def period_months(company_id: int, period_number: int, db: Session = Depends(get_db)):
    founding = _founding_date(company_id, db)
    months = period_calculator.enumerate_months(founding, period_number)
    return [MonthEntryResponse.model_validate(m) for m in months]


@router.get("/{period_number}/quarters", response_model=List[QuarterGroupResponse])
def period_quarters(company_id: int, period_number: int, db: Session = Depends(get_db)):
    founding = _founding_date(company_id, db)
    groups = period_calculator.group_by_quarter(founding, period_number)
    return [QuarterGroupResponse.model_validate(g) for g in groups]
