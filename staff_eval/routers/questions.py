"""
Evaluation Q&A.

Staff post questions under their own staff path; admins list every question
in the company and answer them.
"""
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List, Optional

from staff_eval.database import get_db
from staff_eval.schemas.question import AnswerCreate, QuestionCreate, QuestionResponse
from staff_eval.services import company_service, question_service

router = APIRouter(
    prefix="/companies/{company_id}",
    tags=["questions"]
)


@router.post("/staff/{staff_id}/questions", response_model=QuestionResponse, status_code=201)
def ask_question(company_id: int, staff_id: int, payload: QuestionCreate, db: Session = Depends(get_db)):
    staff = company_service.get_staff_or_404(db, company_id, staff_id)
    return question_service.ask_question(db, staff, payload.evaluation_id, payload.question)


@router.get("/staff/{staff_id}/questions", response_model=List[QuestionResponse])
def staff_questions(company_id: int, staff_id: int, db: Session = Depends(get_db)):
    staff = company_service.get_staff_or_404(db, company_id, staff_id)
    return question_service.list_questions(db, company_id, staff_id=staff.id)


@router.get("/questions", response_model=List[QuestionResponse])
def company_questions(
    company_id: int,
    staff_id: Optional[int] = Query(None),
    unanswered_only: bool = Query(False),
    db: Session = Depends(get_db)
):
    company_service.get_company_or_404(db, company_id)
    return question_service.list_questions(db, company_id, staff_id=staff_id, unanswered_only=unanswered_only)


@router.post("/questions/{question_id}/answer", response_model=QuestionResponse)
def answer_question(company_id: int, question_id: int, payload: AnswerCreate, db: Session = Depends(get_db)):
    admin = company_service.get_admin_or_403(db, company_id, payload.admin_id)
    question = question_service.get_question_or_404(db, company_id, question_id)
    return question_service.answer_question(db, question, admin, payload.answer)
