"""
Personal goals that staff members track between evaluations.

Goals are owned by a single staff member and scoped by company.
"""
import logging
from typing import List

from sqlalchemy.orm import Session

from staff_eval.core.exceptions import NotFoundError
from staff_eval.models.goal import GoalStatus, StaffGoal
from staff_eval.models.user import User
from staff_eval.schemas.goal import GoalCreate, GoalUpdate

logger = logging.getLogger(__name__)


def list_goals(db: Session, staff: User) -> List[StaffGoal]:
    return db.query(StaffGoal).filter(
        StaffGoal.company_id == staff.company_id,
        StaffGoal.staff_id == staff.id
    ).order_by(StaffGoal.created_at.desc(), StaffGoal.id.desc()).all()


def create_goal(db: Session, staff: User, payload: GoalCreate) -> StaffGoal:
    goal = StaffGoal(
        company_id=staff.company_id,
        staff_id=staff.id,
        goal_title=payload.goal_title,
        goal_description=payload.goal_description,
        target_date=payload.target_date,
        achievement_rate=0,
        status=GoalStatus.ACTIVE,
    )
    db.add(goal)
    db.commit()
    db.refresh(goal)
    logger.info(f"Goal {goal.id} created for staff {staff.id}", extra={"company_id": staff.company_id})
    return goal


def get_goal_or_404(db: Session, staff: User, goal_id: int) -> StaffGoal:
    goal = db.query(StaffGoal).filter(
        StaffGoal.id == goal_id,
        StaffGoal.company_id == staff.company_id,
        StaffGoal.staff_id == staff.id
    ).first()
    if goal is None:
        raise NotFoundError(f"Goal {goal_id} not found")
    return goal


def update_goal(db: Session, goal: StaffGoal, payload: GoalUpdate) -> StaffGoal:
    for field, value in payload.model_dump(exclude_unset=True).items():
        if value is not None:
            setattr(goal, field, value)
    db.commit()
    db.refresh(goal)
    return goal


def delete_goal(db: Session, goal: StaffGoal) -> None:
    db.delete(goal)
    db.commit()
    logger.info(f"Goal {goal.id} deleted", extra={"company_id": goal.company_id})
