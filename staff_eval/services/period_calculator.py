"""
Fiscal Period Calculator

A company's fiscal clock starts in the month it was founded. Period 1 ("第1期")
runs for twelve calendar months from the founding month, period 2 for the next
twelve, and so on. Within a period, months are numbered 1-12 and grouped into
four quarters of three months each.

Only the year and month of the founding date matter; the day is ignored.

All functions here are pure: dates are immutable ``datetime.date`` values and
month stepping is done with integer arithmetic, never by mutating a working
date. Labels come from ``staff_eval.services.formatting``.
"""
import calendar
import logging
from dataclasses import dataclass
from datetime import MAXYEAR, date, datetime, time
from typing import List, Optional, Tuple, Union

from staff_eval.core.exceptions import InvalidArgumentError, PreFoundingDateError
from staff_eval.services.formatting import month_label, period_name, quarter_name

logger = logging.getLogger(__name__)

DateInput = Union[str, date, datetime]

MONTHS_PER_PERIOD = 12
MONTHS_PER_QUARTER = 3
QUARTERS_PER_PERIOD = 4

# Bounds are pinned to midday when a time component is needed so that shifting
# to any UTC offset in [-12h, +12h) keeps the same calendar day.
NOON = time(12, 0, 0)


@dataclass(frozen=True)
class PeriodBounds:
    period_number: int
    period_name: str
    start_date: date
    end_date: date

    @property
    def start_at(self) -> datetime:
        return datetime.combine(self.start_date, NOON)

    @property
    def end_at(self) -> datetime:
        return datetime.combine(self.end_date, NOON)

    def contains(self, value: date) -> bool:
        return self.start_date <= value <= self.end_date


@dataclass(frozen=True)
class PeriodInfo:
    period_number: int
    period_name: str
    start_date: date
    end_date: date
    current_month: int
    quarter_number: int
    quarter_name: str

    @property
    def bounds(self) -> PeriodBounds:
        return PeriodBounds(self.period_number, self.period_name, self.start_date, self.end_date)

    @property
    def start_at(self) -> datetime:
        return self.bounds.start_at

    @property
    def end_at(self) -> datetime:
        return self.bounds.end_at


@dataclass(frozen=True)
class MonthEntry:
    year: int
    month: int
    label: str
    quarter_number: int
    quarter_name: str


@dataclass(frozen=True)
class QuarterGroup:
    quarter_number: int
    quarter_name: str
    months: Tuple[MonthEntry, ...]


def parse_calendar_date(value: DateInput) -> date:
    """
    Normalize a date-like input to a calendar date.

    Accepts ``date``, ``datetime`` (its own calendar day, no timezone
    conversion), ``YYYY-MM-DD`` / ISO datetime strings and ``YYYY-MM`` month
    strings (day 1).
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            if len(text) == 7:
                return date.fromisoformat(f"{text}-01")
            if len(text) == 10:
                return date.fromisoformat(text)
            return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
        except ValueError:
            raise InvalidArgumentError(f"Invalid date: {value!r}")
    raise InvalidArgumentError(f"Invalid date: {value!r}")


def _require_positive_int(value, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{name} must be an integer, got {value!r}")
    if value < 1:
        raise InvalidArgumentError(f"{name} must be >= 1, got {value}")
    return value


def _shift_month(year: int, month: int, offset: int) -> Tuple[int, int]:
    index = year * 12 + (month - 1) + offset
    return index // 12, index % 12 + 1


def _months_elapsed(founding: date, year: int, month: int) -> int:
    return (year - founding.year) * 12 + (month - founding.month)


def quarter_for_month(current_month: int) -> int:
    """Quarter (1-4) of a 1-based month-in-period."""
    if isinstance(current_month, bool) or not isinstance(current_month, int) or not 1 <= current_month <= 12:
        raise InvalidArgumentError(f"Month in period must be 1-12, got {current_month!r}")
    return (current_month - 1) // MONTHS_PER_QUARTER + 1


def _bounds(founding: date, period_number: int) -> PeriodBounds:
    start_year = founding.year + (period_number - 1)
    if start_year > MAXYEAR:
        raise InvalidArgumentError(f"Period {period_number} is outside the supported calendar range")
    start = date(start_year, founding.month, 1)

    end_year, end_month = _shift_month(start_year, founding.month, MONTHS_PER_PERIOD - 1)
    if end_year > MAXYEAR:
        # The final period of the calendar is cut off at 9999-12-31
        end = date.max
    else:
        end = date(end_year, end_month, calendar.monthrange(end_year, end_month)[1])
    return PeriodBounds(
        period_number=period_number,
        period_name=period_name(period_number),
        start_date=start,
        end_date=end,
    )


def locate_month(founding_date: DateInput, year: int, month: int) -> PeriodInfo:
    """
    Resolve the period, month-in-period and quarter of a calendar month.

    Raises PreFoundingDateError when the month precedes the founding month.
    """
    founding = parse_calendar_date(founding_date)
    if not 1 <= month <= 12:
        raise InvalidArgumentError(f"Month must be 1-12, got {month}")

    elapsed = _months_elapsed(founding, year, month)
    if elapsed < 0:
        raise PreFoundingDateError(date(year, month, 1), founding)

    period_number = elapsed // MONTHS_PER_PERIOD + 1
    current_month = elapsed % MONTHS_PER_PERIOD + 1
    quarter_number = quarter_for_month(current_month)
    bounds = _bounds(founding, period_number)

    return PeriodInfo(
        period_number=period_number,
        period_name=bounds.period_name,
        start_date=bounds.start_date,
        end_date=bounds.end_date,
        current_month=current_month,
        quarter_number=quarter_number,
        quarter_name=quarter_name(quarter_number),
    )


def resolve_current_period(founding_date: DateInput, target_date: Optional[DateInput] = None) -> PeriodInfo:
    """
    Period information for ``target_date`` (default: today).

    Example: founded 2020-04-01, target 2020-07-15 -> period 1, month 4, Q2.
    """
    target = date.today() if target_date is None else parse_calendar_date(target_date)
    return locate_month(founding_date, target.year, target.month)


def resolve_period_bounds(founding_date: DateInput, period_number: int) -> PeriodBounds:
    """
    Start and end dates of a period; both inclusive, exactly 12 months apart.

    A period that starts in year 9999 but would end after it is cut off at
    ``date.max``. Periods starting after 9999 raise InvalidArgumentError.
    """
    founding = parse_calendar_date(founding_date)
    _require_positive_int(period_number, "period_number")
    return _bounds(founding, period_number)


def enumerate_months(founding_date: DateInput, period_number: int) -> List[MonthEntry]:
    bounds = resolve_period_bounds(founding_date, period_number)
    start = bounds.start_date

    months: List[MonthEntry] = []
    for offset in range(MONTHS_PER_PERIOD):
        year, month = _shift_month(start.year, start.month, offset)
        if year > bounds.end_date.year:
            break
        quarter_number = offset // MONTHS_PER_QUARTER + 1
        months.append(MonthEntry(
            year=year,
            month=month,
            label=month_label(year, month),
            quarter_number=quarter_number,
            quarter_name=quarter_name(quarter_number),
        ))
    return months


def group_by_quarter(founding_date: DateInput, period_number: int) -> List[QuarterGroup]:
    months = enumerate_months(founding_date, period_number)
    return [
        QuarterGroup(
            quarter_number=q,
            quarter_name=quarter_name(q),
            months=tuple(m for m in months if m.quarter_number == q),
        )
        for q in range(1, QUARTERS_PER_PERIOD + 1)
    ]


def enumerate_periods(founding_date: DateInput, max_periods: Optional[int] = None) -> List[PeriodBounds]:
    """
    Bounds of periods 1..max_periods.

    Defaults to every period up to and including the current one.
    """
    founding = parse_calendar_date(founding_date)
    if max_periods is None:
        max_periods = resolve_current_period(founding).period_number
    _require_positive_int(max_periods, "max_periods")
    logger.debug(f"Enumerating {max_periods} period(s) from {founding.isoformat()}")
    return [_bounds(founding, n) for n in range(1, max_periods + 1)]
