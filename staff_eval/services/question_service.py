"""
Evaluation Q&A: staff ask about one of their monthly evaluations and an admin
answers. A later answer replaces the earlier one.
"""
import logging
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy.orm import Session

from staff_eval.core.exceptions import NotFoundError
from staff_eval.models.question import EvaluationQuestion
from staff_eval.models.user import User
from staff_eval.services.evaluation_service import get_evaluation_or_404

logger = logging.getLogger(__name__)


def ask_question(db: Session, staff: User, evaluation_id: int, text: str) -> EvaluationQuestion:
    evaluation = get_evaluation_or_404(db, staff.company_id, evaluation_id)
    if evaluation.staff_id != staff.id:
        # Staff may only ask about their own evaluations
        raise NotFoundError(f"Evaluation {evaluation_id} not found")

    question = EvaluationQuestion(
        company_id=staff.company_id,
        evaluation_id=evaluation.id,
        staff_id=staff.id,
        question=text,
    )
    db.add(question)
    db.commit()
    db.refresh(question)
    logger.info(f"Question {question.id} posted on evaluation {evaluation.id}", extra={"staff_id": staff.id})
    return question


def list_questions(
    db: Session,
    company_id: int,
    staff_id: Optional[int] = None,
    unanswered_only: bool = False
) -> List[EvaluationQuestion]:
    query = db.query(EvaluationQuestion).filter(EvaluationQuestion.company_id == company_id)
    if staff_id is not None:
        query = query.filter(EvaluationQuestion.staff_id == staff_id)
    if unanswered_only:
        query = query.filter(EvaluationQuestion.answer.is_(None))
    return query.order_by(EvaluationQuestion.created_at.desc(), EvaluationQuestion.id.desc()).all()


def get_question_or_404(db: Session, company_id: int, question_id: int) -> EvaluationQuestion:
    question = db.query(EvaluationQuestion).filter(
        EvaluationQuestion.id == question_id,
        EvaluationQuestion.company_id == company_id
    ).first()
    if question is None:
        raise NotFoundError(f"Question {question_id} not found")
    return question


def answer_question(db: Session, question: EvaluationQuestion, admin: User, text: str) -> EvaluationQuestion:
    question.answer = text
    question.admin_id = admin.id
    question.answered_at = datetime.now(timezone.utc)
    db.commit()
    db.refresh(question)
    logger.info(f"Question {question.id} answered by admin {admin.id}", extra={"company_id": question.company_id})
    return question
