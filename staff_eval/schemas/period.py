from pydantic import BaseModel, ConfigDict
from datetime import date, datetime
from typing import List


class PeriodBoundsResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    period_number: int
    period_name: str
    start_date: date
    end_date: date
    start_at: datetime
    end_at: datetime


class PeriodInfoResponse(PeriodBoundsResponse):
    current_month: int
    quarter_number: int
    quarter_name: str


class MonthEntryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    year: int
    month: int
    label: str
    quarter_number: int
    quarter_name: str


class QuarterGroupResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    quarter_number: int
    quarter_name: str
    months: List[MonthEntryResponse]
