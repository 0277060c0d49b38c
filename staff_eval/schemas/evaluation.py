from pydantic import BaseModel, ConfigDict, Field, model_validator
from datetime import datetime
from typing import List, Optional

from staff_eval.core.ranks import EvaluationRank, RewardType
from staff_eval.models.evaluation import EvaluationStatus
from staff_eval.services.formatting import format_score, status_label


class PerformanceItems(BaseModel):
    """成果評価 (-15 to 48)."""
    achievement: int = 0
    attendance: int = 0
    compliance: int = 0
    client: int = 0


class BehaviorItems(BaseModel):
    """行動評価 (0 to 30)."""
    initiative: int = 0
    responsibility: int = 0
    cooperation: int = 0
    appearance: int = 0


class GrowthItems(BaseModel):
    """成長評価 (0 to 22)."""
    self_improvement: int = 0
    response: int = 0
    goal_achievement: int = 0


class EvaluationFormData(BaseModel):
    performance: PerformanceItems = Field(default_factory=PerformanceItems)
    behavior: BehaviorItems = Field(default_factory=BehaviorItems)
    growth: GrowthItems = Field(default_factory=GrowthItems)


class EvaluationScores(BaseModel):
    performance_score: int
    behavior_score: int
    growth_score: int
    total_score: int


class RankInfo(BaseModel):
    rank: EvaluationRank
    reward: int
    reward_type: RewardType
    reward_display: str
    description: str


class EvaluationPreview(BaseModel):
    is_valid: bool
    errors: List[str] = []
    scores: EvaluationScores
    rank: Optional[RankInfo] = None


class EvaluationUpsert(BaseModel):
    evaluator_id: int = Field(..., description="Admin submitting this response")
    form: EvaluationFormData
    status: EvaluationStatus = EvaluationStatus.DRAFT


class EvaluatorScoreResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    evaluator_id: int
    performance_score: int
    behavior_score: int
    growth_score: int
    total_score: int
    submitted_at: Optional[datetime] = None


class EvaluationResponse(BaseModel):
    """Monthly evaluation; scores are the average of every admin's response."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    company_id: int
    staff_id: int
    evaluation_year: int
    evaluation_month: int
    status: EvaluationStatus
    status_label: Optional[str] = None
    performance_score: float
    behavior_score: float
    growth_score: float
    total_score: float
    total_score_display: Optional[str] = None
    rank: EvaluationRank
    reward: int
    responses: List[EvaluatorScoreResponse] = []
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @model_validator(mode="after")
    def _fill_labels(self):
        self.status_label = status_label(self.status.value)
        self.total_score_display = format_score(self.total_score)
        return self
