"""
Monthly Evaluation Service

Router -> Service (this module) -> Models. Each admin submits their own
response for a staff member's month; the monthly evaluation carries the
average of those responses. Scores are always recomputed from the submitted
form; clients never send totals or ranks.
"""
import logging
from datetime import datetime, timezone
from typing import List

from sqlalchemy.orm import Session

from staff_eval.core.exceptions import (
    AccessDeniedError,
    EvaluationValidationError,
    NotFoundError,
    NotStaffMemberError,
)
from staff_eval.models.company import Company
from staff_eval.models.evaluation import Evaluation, EvaluationStatus, EvaluatorResponse
from staff_eval.models.user import User
from staff_eval.schemas.evaluation import EvaluationFormData, EvaluationPreview, EvaluationUpsert
from staff_eval.services import evaluation_calculator as calc
from staff_eval.services.period_calculator import locate_month

logger = logging.getLogger(__name__)


def preview_evaluation(form: EvaluationFormData) -> EvaluationPreview:
    is_valid, errors = calc.validate_evaluation_form(form)
    scores = calc.calculate_scores(form)
    rank = calc.get_rank_info(calc.determine_rank(scores.total_score)) if is_valid else None
    return EvaluationPreview(is_valid=is_valid, errors=errors, scores=scores, rank=rank)


def _apply_averages(evaluation: Evaluation) -> None:
    responses = evaluation.responses
    evaluation.performance_score = calc.calculate_average_score(r.performance_score for r in responses)
    evaluation.behavior_score = calc.calculate_average_score(r.behavior_score for r in responses)
    evaluation.growth_score = calc.calculate_average_score(r.growth_score for r in responses)
    evaluation.total_score = calc.calculate_average_score(r.total_score for r in responses)

    rank = calc.determine_rank(evaluation.total_score)
    evaluation.rank = rank.value
    evaluation.reward = calc.calculate_reward(rank)


def upsert_evaluation(
    db: Session,
    company: Company,
    staff: User,
    evaluator: User,
    year: int,
    month: int,
    payload: EvaluationUpsert
) -> Evaluation:
    """
    Create or replace ``evaluator``'s response for ``staff`` in ``year``/``month``
    and refresh the monthly average.

    Raises:
        NotStaffMemberError: ``staff`` does not have the staff role.
        AccessDeniedError: ``evaluator`` does not have the admin role.
        EvaluationValidationError: an item score is out of range.
        PreFoundingDateError: the month precedes the company's founding month.
    """
    if not staff.is_staff:
        raise NotStaffMemberError(staff.id)
    if not evaluator.is_admin:
        raise AccessDeniedError(f"User {evaluator.id} cannot evaluate staff")

    is_valid, errors = calc.validate_evaluation_form(payload.form)
    if not is_valid:
        raise EvaluationValidationError(errors)

    if company.establishment_date is not None:
        locate_month(company.establishment_date, year, month)

    scores = calc.calculate_scores(payload.form)

    evaluation = db.query(Evaluation).filter(
        Evaluation.company_id == company.id,
        Evaluation.staff_id == staff.id,
        Evaluation.evaluation_year == year,
        Evaluation.evaluation_month == month
    ).first()
    if evaluation is None:
        evaluation = Evaluation(
            company_id=company.id,
            staff_id=staff.id,
            evaluation_year=year,
            evaluation_month=month,
        )
        db.add(evaluation)

    response = next((r for r in evaluation.responses if r.evaluator_id == evaluator.id), None)
    if response is None:
        response = EvaluatorResponse(evaluator_id=evaluator.id)
        evaluation.responses.append(response)

    response.performance_score = scores.performance_score
    response.behavior_score = scores.behavior_score
    response.growth_score = scores.growth_score
    response.total_score = scores.total_score
    if payload.status != EvaluationStatus.DRAFT:
        response.submitted_at = datetime.now(timezone.utc)

    evaluation.status = payload.status
    _apply_averages(evaluation)

    db.commit()
    db.refresh(evaluation)
    logger.info(
        f"Evaluation saved for staff {staff.id} ({year}-{month:02d}) by admin {evaluator.id}: "
        f"{len(evaluation.responses)} response(s), average {evaluation.total_score} -> {evaluation.rank}",
        extra={"company_id": company.id, "staff_id": staff.id}
    )
    return evaluation


def list_evaluations(db: Session, company_id: int, staff_id: int) -> List[Evaluation]:
    return db.query(Evaluation).filter(
        Evaluation.company_id == company_id,
        Evaluation.staff_id == staff_id
    ).order_by(Evaluation.evaluation_year.desc(), Evaluation.evaluation_month.desc()).all()


def get_evaluation_or_404(db: Session, company_id: int, evaluation_id: int) -> Evaluation:
    evaluation = db.query(Evaluation).filter(
        Evaluation.id == evaluation_id,
        Evaluation.company_id == company_id
    ).first()
    if evaluation is None:
        raise NotFoundError(f"Evaluation {evaluation_id} not found")
    return evaluation
