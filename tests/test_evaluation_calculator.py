import pytest

from staff_eval.core.exceptions import InvalidArgumentError
from staff_eval.core.ranks import EvaluationRank, RewardType
from staff_eval.schemas.evaluation import EvaluationFormData
from staff_eval.services import evaluation_calculator as calc


def test_calculate_scores(evaluation_form):
    scores = calc.calculate_scores(EvaluationFormData(**evaluation_form()))
    assert scores.performance_score == 40
    assert scores.behavior_score == 25
    assert scores.growth_score == 18
    assert scores.total_score == 83


def test_perfect_form_totals_one_hundred(evaluation_form):
    form = evaluation_form(
        achievement=25, client=15, initiative=10, responsibility=7, cooperation=10,
        self_improvement=7, response=5, goal_achievement=10,
    )
    assert calc.calculate_scores(EvaluationFormData(**form)).total_score == 100


def test_negative_items_reduce_performance(evaluation_form):
    form = evaluation_form(attendance=-5, compliance=-10)
    assert calc.calculate_scores(EvaluationFormData(**form)).performance_score == 17


@pytest.mark.parametrize("score,rank", [
    (100, EvaluationRank.SS),
    (95, EvaluationRank.SS),
    (94.99, EvaluationRank.S),
    (90, EvaluationRank.S),
    (85, EvaluationRank.A_PLUS),
    (80, EvaluationRank.A),
    (75, EvaluationRank.A_MINUS),
    (74, EvaluationRank.B),
    (60, EvaluationRank.B),
    (55, EvaluationRank.C),
    (54, EvaluationRank.D),
    (-15, EvaluationRank.D),
])
def test_determine_rank(score, rank):
    assert calc.determine_rank(score) == rank


def test_rewards_follow_rank_table():
    rewards = [calc.calculate_reward(r) for r in EvaluationRank]
    assert rewards == [15000, 10000, 4000, 3000, 2000, 0, -5000, -10000]
    assert calc.calculate_reward("A+") == 4000


def test_unknown_rank():
    with pytest.raises(InvalidArgumentError):
        calc.calculate_reward("Z")


def test_rank_info():
    info = calc.get_rank_info(EvaluationRank.C)
    assert info.reward == -5000
    assert info.reward_type == RewardType.FIXED
    assert info.reward_display == "-¥5,000"
    assert info.description == "改善が必要"
    assert calc.get_rank_info(EvaluationRank.S).reward_type == RewardType.ADDITION


def test_average_score():
    assert calc.calculate_average_score([]) == 0
    assert calc.calculate_average_score([80, 85, 90]) == 85
    assert calc.calculate_average_score([80, 81, 81]) == 80.67


def test_valid_form(evaluation_form):
    is_valid, errors = calc.validate_evaluation_form(EvaluationFormData(**evaluation_form()))
    assert is_valid
    assert errors == []


def test_out_of_range_items_are_reported(evaluation_form):
    form = EvaluationFormData(**evaluation_form(achievement=26, compliance=-11, response=6))
    is_valid, errors = calc.validate_evaluation_form(form)
    assert not is_valid
    assert errors == [
        "実績評価は0〜25点の範囲で入力してください",
        "コンプライアンス評価は-10〜3点の範囲で入力してください",
        "レスポンス評価は0〜5点の範囲で入力してください",
    ]
