"""
Admin comments attached to a staff member's monthly evaluations.
"""
import logging
from datetime import date
from typing import List, Optional

from sqlalchemy.orm import Session

from staff_eval.core.exceptions import NotFoundError
from staff_eval.models.comment import AdminComment
from staff_eval.models.evaluation import Evaluation
from staff_eval.models.user import User
from staff_eval.services.evaluation_service import get_evaluation_or_404
from staff_eval.services.period_calculator import enumerate_months

logger = logging.getLogger(__name__)


def add_comment(db: Session, staff: User, admin: User, evaluation_id: int, text: str) -> AdminComment:
    evaluation = get_evaluation_or_404(db, staff.company_id, evaluation_id)
    if evaluation.staff_id != staff.id:
        raise NotFoundError(f"Evaluation {evaluation_id} not found")

    comment = AdminComment(
        company_id=staff.company_id,
        evaluation_id=evaluation.id,
        admin_id=admin.id,
        comment=text,
    )
    db.add(comment)
    db.commit()
    db.refresh(comment)
    logger.info(f"Comment {comment.id} added to evaluation {evaluation.id} by admin {admin.id}")
    return comment


def list_comments(
    db: Session,
    staff: User,
    founding_date: Optional[date] = None,
    period_number: Optional[int] = None
) -> List[AdminComment]:
    """
    Comments on a staff member's evaluations, newest first.

    With ``period_number`` only comments on evaluations inside that fiscal
    period are returned; ``founding_date`` is then required.
    """
    rows = db.query(AdminComment).join(Evaluation, AdminComment.evaluation_id == Evaluation.id).filter(
        AdminComment.company_id == staff.company_id,
        Evaluation.staff_id == staff.id
    ).order_by(AdminComment.created_at.desc(), AdminComment.id.desc()).all()

    if period_number is None:
        return rows

    keys = {(m.year, m.month) for m in enumerate_months(founding_date, period_number)}
    return [c for c in rows if (c.evaluation.evaluation_year, c.evaluation.evaluation_month) in keys]
