from pydantic import BaseModel
from typing import List, Optional

from staff_eval.core.ranks import EvaluationRank
from staff_eval.schemas.period import MonthEntryResponse, PeriodBoundsResponse


class CategoryAverages(BaseModel):
    performance: float = 0
    behavior: float = 0
    growth: float = 0


class QuarterlyReport(BaseModel):
    quarter_number: int
    quarter_name: str
    months: List[MonthEntryResponse]
    evaluation_count: int
    average_score: float
    category_averages: CategoryAverages


class PeriodEvaluation(BaseModel):
    staff_id: Optional[int] = None
    period: PeriodBoundsResponse
    evaluation_count: int
    average_score: float
    average_score_display: str
    rank: Optional[EvaluationRank] = None
    reward: Optional[int] = None
    reward_display: Optional[str] = None
    quarters: List[QuarterlyReport]
