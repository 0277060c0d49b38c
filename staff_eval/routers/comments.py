from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List, Optional

from staff_eval.database import get_db
from staff_eval.schemas.comment import CommentCreate, CommentResponse
from staff_eval.services import comment_service, company_service

router = APIRouter(
    prefix="/companies/{company_id}/staff/{staff_id}/comments",
    tags=["comments"]
)


@router.get("", response_model=List[CommentResponse])
def list_comments(
    company_id: int,
    staff_id: int,
    period_number: Optional[int] = Query(None, description="Restrict to one fiscal period"),
    db: Session = Depends(get_db)
):
    company = company_service.get_company_or_404(db, company_id)
    staff = company_service.get_staff_or_404(db, company_id, staff_id)
    founding = None
    if period_number is not None:
        founding = company_service.require_establishment_date(company)
    return comment_service.list_comments(db, staff, founding, period_number)


@router.post("", response_model=CommentResponse, status_code=201)
def add_comment(company_id: int, staff_id: int, payload: CommentCreate, db: Session = Depends(get_db)):
    staff = company_service.get_staff_or_404(db, company_id, staff_id)
    admin = company_service.get_admin_or_403(db, company_id, payload.admin_id)
    return comment_service.add_comment(db, staff, admin, payload.evaluation_id, payload.comment)
