"""
Monthly evaluation scoring.

A monthly evaluation is scored across three rubric categories whose item
points add up to a 100-point total:

- Performance (成果): achievement, attendance, compliance, client
- Behavior (行動): initiative, responsibility, cooperation, appearance
- Growth (成長): self_improvement, response, goal_achievement

The total maps onto the rank table in ``staff_eval.core.ranks``.
"""
from typing import Dict, Iterable, List, Tuple

from staff_eval.core.exceptions import InvalidArgumentError
from staff_eval.core.ranks import RANK_DEFINITIONS, RANKS_BY_CODE, EvaluationRank
from staff_eval.schemas.evaluation import EvaluationFormData, EvaluationScores, RankInfo
from staff_eval.services.formatting import format_reward

# (category, item) -> (min, max, label used in validation messages)
ITEM_RANGES: Dict[Tuple[str, str], Tuple[int, int, str]] = {
    ("performance", "achievement"): (0, 25, "実績評価"),
    ("performance", "attendance"): (-5, 5, "勤怠評価"),
    ("performance", "compliance"): (-10, 3, "コンプライアンス評価"),
    ("performance", "client"): (0, 15, "クライアント評価"),
    ("behavior", "initiative"): (0, 10, "主体性評価"),
    ("behavior", "responsibility"): (0, 7, "責任感"),
    ("behavior", "cooperation"): (0, 10, "協調性評価"),
    ("behavior", "appearance"): (0, 3, "アピアランス評価"),
    ("growth", "self_improvement"): (0, 7, "自己研鑽評価"),
    ("growth", "response"): (0, 5, "レスポンス評価"),
    ("growth", "goal_achievement"): (0, 10, "自己目標達成評価"),
}


def calculate_scores(form: EvaluationFormData) -> EvaluationScores:
    p, b, g = form.performance, form.behavior, form.growth

    performance_score = p.achievement + p.attendance + p.compliance + p.client
    behavior_score = b.initiative + b.responsibility + b.cooperation + b.appearance
    growth_score = g.self_improvement + g.response + g.goal_achievement

    return EvaluationScores(
        performance_score=performance_score,
        behavior_score=behavior_score,
        growth_score=growth_score,
        total_score=performance_score + behavior_score + growth_score,
    )


def calculate_average_score(scores: Iterable[float]) -> float:
    """Mean rounded to two decimals; 0 when there is nothing to average."""
    values = list(scores)
    if not values:
        return 0
    return round(sum(values) / len(values), 2)


def determine_rank(score: float) -> EvaluationRank:
    # Bands are integer-bounded; fractional averages fall to the lower band
    for definition in RANK_DEFINITIONS:
        if score >= definition.min_score:
            return definition.rank
    return EvaluationRank.D


def calculate_reward(rank: EvaluationRank) -> int:
    try:
        return RANKS_BY_CODE[EvaluationRank(rank)].reward
    except ValueError:
        raise InvalidArgumentError(f"Unknown rank: {rank!r}")


def get_rank_info(rank: EvaluationRank) -> RankInfo:
    try:
        definition = RANKS_BY_CODE[EvaluationRank(rank)]
    except ValueError:
        raise InvalidArgumentError(f"Unknown rank: {rank!r}")
    return RankInfo(
        rank=definition.rank,
        reward=definition.reward,
        reward_type=definition.reward_type,
        reward_display=format_reward(definition.reward),
        description=definition.description,
    )


def validate_evaluation_form(form: EvaluationFormData) -> Tuple[bool, List[str]]:
    errors: List[str] = []
    for (category, item), (minimum, maximum, label) in ITEM_RANGES.items():
        value = getattr(getattr(form, category), item)
        if not minimum <= value <= maximum:
            errors.append(f"{label}は{minimum}〜{maximum}点の範囲で入力してください")
    return len(errors) == 0, errors
