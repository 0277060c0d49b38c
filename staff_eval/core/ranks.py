"""
Evaluation rank table.

Each rank covers an inclusive integer score band. Rewards above B are added to
the monthly pay ("addition"); B and below are flat adjustments ("fixed").
"""
import enum
from dataclasses import dataclass
from typing import Dict, List, Optional


class EvaluationRank(str, enum.Enum):
    SS = "SS"
    S = "S"
    A_PLUS = "A+"
    A = "A"
    A_MINUS = "A-"
    B = "B"
    C = "C"
    D = "D"


class RewardType(str, enum.Enum):
    ADDITION = "addition"
    FIXED = "fixed"


@dataclass(frozen=True)
class RankDefinition:
    rank: EvaluationRank
    min_score: int
    max_score: Optional[int]
    reward: int
    reward_type: RewardType
    description: str


RANK_DEFINITIONS: List[RankDefinition] = [
    RankDefinition(EvaluationRank.SS, 95, None, 15000, RewardType.ADDITION, "最優秀評価"),
    RankDefinition(EvaluationRank.S, 90, 94, 10000, RewardType.ADDITION, "優秀評価"),
    RankDefinition(EvaluationRank.A_PLUS, 85, 89, 4000, RewardType.ADDITION, "非常に良好"),
    RankDefinition(EvaluationRank.A, 80, 84, 3000, RewardType.ADDITION, "良好"),
    RankDefinition(EvaluationRank.A_MINUS, 75, 79, 2000, RewardType.ADDITION, "良好"),
    RankDefinition(EvaluationRank.B, 60, 74, 0, RewardType.FIXED, "標準"),
    RankDefinition(EvaluationRank.C, 55, 59, -5000, RewardType.FIXED, "改善が必要"),
    RankDefinition(EvaluationRank.D, 0, 54, -10000, RewardType.FIXED, "大幅な改善が必要"),
]

RANKS_BY_CODE: Dict[EvaluationRank, RankDefinition] = {d.rank: d for d in RANK_DEFINITIONS}
