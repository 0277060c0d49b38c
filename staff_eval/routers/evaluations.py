from fastapi import APIRouter, Depends, Path
from sqlalchemy.orm import Session
from typing import List

from staff_eval.database import get_db
from staff_eval.schemas.evaluation import (
    EvaluationFormData,
    EvaluationPreview,
    EvaluationResponse,
    EvaluationUpsert,
)
from staff_eval.schemas.report import PeriodEvaluation
from staff_eval.services import company_service, evaluation_service, report_service

router = APIRouter(
    prefix="/companies/{company_id}",
    tags=["evaluations"]
)


@router.post("/evaluations/preview", response_model=EvaluationPreview)
def preview(company_id: int, form: EvaluationFormData, db: Session = Depends(get_db)):
    company_service.get_company_or_404(db, company_id)
    return evaluation_service.preview_evaluation(form)


@router.put(
    "/staff/{staff_id}/evaluations/{year}/{month}",
    response_model=EvaluationResponse
)
def save_evaluation(
    company_id: int,
    staff_id: int,
    payload: EvaluationUpsert,
    year: int = Path(..., ge=1, le=9999),
    month: int = Path(..., ge=1, le=12),
    db: Session = Depends(get_db)
):
    company = company_service.get_company_or_404(db, company_id)
    staff = company_service.get_staff_or_404(db, company_id, staff_id)
    evaluator = company_service.get_admin_or_403(db, company_id, payload.evaluator_id)
    return evaluation_service.upsert_evaluation(db, company, staff, evaluator, year, month, payload)


@router.get("/staff/{staff_id}/evaluations", response_model=List[EvaluationResponse])
def staff_evaluations(company_id: int, staff_id: int, db: Session = Depends(get_db)):
    company_service.get_staff_or_404(db, company_id, staff_id)
    return evaluation_service.list_evaluations(db, company_id, staff_id)


@router.get("/staff/{staff_id}/reports/{period_number}", response_model=PeriodEvaluation)
def period_report(company_id: int, staff_id: int, period_number: int, db: Session = Depends(get_db)):
    company = company_service.get_company_or_404(db, company_id)
    founding = company_service.require_establishment_date(company)
    company_service.get_staff_or_404(db, company_id, staff_id)

    evaluations = report_service.list_period_evaluations(db, company_id, staff_id, founding, period_number)
    return report_service.build_period_evaluation(founding, period_number, evaluations, staff_id=staff_id)
