"""
Display formatting for the Japanese-locale frontend.

The fiscal calculator and the scoring services work with plain numbers; every
human-readable label (period and quarter names, month labels, yen amounts,
status labels) is built here and attached to API responses.
"""
from datetime import date, datetime
from typing import Union

DateLike = Union[str, date, datetime]

INVALID_DATE_TEXT = "無効な日付"

STATUS_LABELS = {
    "draft": "下書き",
    "submitted": "提出済み",
    "completed": "完了",
}

ROLE_LABELS = {
    "admin": "管理者",
    "staff": "スタッフ",
}

GOAL_STATUS_LABELS = {
    "active": "進行中",
    "completed": "達成",
    "abandoned": "中止",
}


def period_name(period_number: int) -> str:
    return f"第{period_number}期"


def quarter_name(quarter_number: int) -> str:
    return f"第{quarter_number}四半期"


def month_label(year: int, month: int) -> str:
    return f"{year}年{month}月"


def format_date(value: DateLike, fmt: str = "%Y年%m月%d日") -> str:
    try:
        if isinstance(value, str):
            value = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
        return value.strftime(fmt)
    except (AttributeError, ValueError):
        return INVALID_DATE_TEXT


def format_reward(amount: int) -> str:
    if amount > 0:
        return f"+¥{amount:,}"
    if amount < 0:
        return f"-¥{abs(amount):,}"
    return "±¥0"


def format_percentage(value: float, decimals: int = 1) -> str:
    return f"{value:.{decimals}f}%"


def format_score(score: float) -> str:
    return f"{score:.1f}点"


def status_label(status: str) -> str:
    return STATUS_LABELS.get(status, status)


def role_label(role: str) -> str:
    return ROLE_LABELS.get(role, role)


def goal_status_label(status: str) -> str:
    return GOAL_STATUS_LABELS.get(status, status)
