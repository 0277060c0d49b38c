from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime
from typing import Optional


class QuestionCreate(BaseModel):
    evaluation_id: int
    question: str = Field(..., min_length=1, max_length=2000)


class AnswerCreate(BaseModel):
    admin_id: int = Field(..., description="Admin answering the question")
    answer: str = Field(..., min_length=1, max_length=2000)


class QuestionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    company_id: int
    evaluation_id: int
    evaluation_label: str
    staff_id: int
    staff_name: str
    question: str
    answer: Optional[str] = None
    admin_id: Optional[int] = None
    admin_name: Optional[str] = None
    is_answered: bool
    created_at: Optional[datetime] = None
    answered_at: Optional[datetime] = None
