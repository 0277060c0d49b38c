"""
Fiscal rollups of monthly evaluations.

Monthly evaluations are stored by calendar month and already carry the average
of every admin's response for that month. Reports bucket them by the
company's fiscal calendar: four quarterly reports per period, plus a period
(annual) evaluation whose average total score determines rank and reward.
Only completed evaluations count.
"""
from datetime import date
from typing import Iterable, List, Optional, Sequence

from sqlalchemy.orm import Session

from staff_eval.models.evaluation import Evaluation, EvaluationStatus
from staff_eval.schemas.period import MonthEntryResponse, PeriodBoundsResponse
from staff_eval.schemas.report import CategoryAverages, PeriodEvaluation, QuarterlyReport
from staff_eval.services.evaluation_calculator import (
    calculate_average_score,
    calculate_reward,
    determine_rank,
)
from staff_eval.services.formatting import format_reward, format_score
from staff_eval.services.period_calculator import (
    QuarterGroup,
    enumerate_months,
    group_by_quarter,
    resolve_period_bounds,
)


def _completed(evaluations: Iterable[Evaluation]) -> List[Evaluation]:
    return [e for e in evaluations if e.status == EvaluationStatus.COMPLETED]


def _quarterly_report(group: QuarterGroup, evaluations: Sequence[Evaluation]) -> QuarterlyReport:
    keys = {(m.year, m.month) for m in group.months}
    in_quarter = [e for e in evaluations if (e.evaluation_year, e.evaluation_month) in keys]

    return QuarterlyReport(
        quarter_number=group.quarter_number,
        quarter_name=group.quarter_name,
        months=[MonthEntryResponse.model_validate(m) for m in group.months],
        evaluation_count=len(in_quarter),
        average_score=calculate_average_score(e.total_score for e in in_quarter),
        category_averages=CategoryAverages(
            performance=calculate_average_score(e.performance_score for e in in_quarter),
            behavior=calculate_average_score(e.behavior_score for e in in_quarter),
            growth=calculate_average_score(e.growth_score for e in in_quarter),
        ),
    )


def build_quarterly_reports(
    founding_date: date,
    period_number: int,
    evaluations: Iterable[Evaluation]
) -> List[QuarterlyReport]:
    completed = _completed(evaluations)
    return [_quarterly_report(g, completed) for g in group_by_quarter(founding_date, period_number)]


def build_period_evaluation(
    founding_date: date,
    period_number: int,
    evaluations: Iterable[Evaluation],
    staff_id: Optional[int] = None
) -> PeriodEvaluation:
    bounds = resolve_period_bounds(founding_date, period_number)
    keys = {(m.year, m.month) for m in enumerate_months(founding_date, period_number)}
    in_period = [
        e for e in _completed(evaluations)
        if (e.evaluation_year, e.evaluation_month) in keys
    ]

    average = calculate_average_score(e.total_score for e in in_period)
    rank = reward = reward_display = None
    if in_period:
        rank = determine_rank(average)
        reward = calculate_reward(rank)
        reward_display = format_reward(reward)

    return PeriodEvaluation(
        staff_id=staff_id,
        period=PeriodBoundsResponse.model_validate(bounds),
        evaluation_count=len(in_period),
        average_score=average,
        average_score_display=format_score(average),
        rank=rank,
        reward=reward,
        reward_display=reward_display,
        quarters=build_quarterly_reports(founding_date, period_number, in_period),
    )


def list_period_evaluations(
    db: Session,
    company_id: int,
    staff_id: int,
    founding_date: date,
    period_number: int
) -> List[Evaluation]:
    """All of a staff member's evaluations that fall inside a fiscal period."""
    months = enumerate_months(founding_date, period_number)
    keys = {(m.year, m.month) for m in months}
    years = sorted({m.year for m in months})

    # A period spans at most two calendar years; fetch both in one query
    rows = db.query(Evaluation).filter(
        Evaluation.company_id == company_id,
        Evaluation.staff_id == staff_id,
        Evaluation.evaluation_year.in_(years)
    ).order_by(Evaluation.evaluation_year, Evaluation.evaluation_month).all()

    return [e for e in rows if (e.evaluation_year, e.evaluation_month) in keys]
