from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from staff_eval.database import get_db
from staff_eval.schemas.goal import GoalCreate, GoalResponse, GoalUpdate
from staff_eval.services import company_service, goal_service

router = APIRouter(
    prefix="/companies/{company_id}/staff/{staff_id}/goals",
    tags=["goals"]
)


@router.get("", response_model=List[GoalResponse])
def list_goals(company_id: int, staff_id: int, db: Session = Depends(get_db)):
    staff = company_service.get_staff_or_404(db, company_id, staff_id)
    return goal_service.list_goals(db, staff)


@router.post("", response_model=GoalResponse, status_code=201)
def create_goal(company_id: int, staff_id: int, payload: GoalCreate, db: Session = Depends(get_db)):
    staff = company_service.get_staff_or_404(db, company_id, staff_id)
    return goal_service.create_goal(db, staff, payload)


@router.put("/{goal_id}", response_model=GoalResponse)
def update_goal(company_id: int, staff_id: int, goal_id: int, payload: GoalUpdate, db: Session = Depends(get_db)):
    staff = company_service.get_staff_or_404(db, company_id, staff_id)
    goal = goal_service.get_goal_or_404(db, staff, goal_id)
    return goal_service.update_goal(db, goal, payload)


@router.delete("/{goal_id}")
def delete_goal(company_id: int, staff_id: int, goal_id: int, db: Session = Depends(get_db)):
    staff = company_service.get_staff_or_404(db, company_id, staff_id)
    goal = goal_service.get_goal_or_404(db, staff, goal_id)
    goal_service.delete_goal(db, goal)
    return {"success": True}
