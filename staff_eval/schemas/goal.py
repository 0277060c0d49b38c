from pydantic import BaseModel, ConfigDict, Field, model_validator
from datetime import date, datetime
from typing import Optional

from staff_eval.models.goal import GoalStatus
from staff_eval.services.formatting import format_date, format_percentage, goal_status_label


class GoalCreate(BaseModel):
    goal_title: str = Field(..., min_length=1, max_length=200)
    goal_description: str = ""
    target_date: date


class GoalUpdate(BaseModel):
    goal_title: Optional[str] = Field(None, min_length=1, max_length=200)
    goal_description: Optional[str] = None
    target_date: Optional[date] = None
    achievement_rate: Optional[int] = Field(None, ge=0, le=100)
    status: Optional[GoalStatus] = None


class GoalResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    company_id: int
    staff_id: int
    goal_title: str
    goal_description: str
    target_date: date
    target_date_display: Optional[str] = None
    achievement_rate: int
    achievement_display: Optional[str] = None
    status: GoalStatus
    status_label: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @model_validator(mode="after")
    def _fill_labels(self):
        self.target_date_display = format_date(self.target_date)
        self.achievement_display = format_percentage(self.achievement_rate, decimals=0)
        self.status_label = goal_status_label(self.status.value)
        return self
