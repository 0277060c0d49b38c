from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime
from typing import Optional


class CommentCreate(BaseModel):
    evaluation_id: int
    admin_id: int = Field(..., description="Admin writing the comment")
    comment: str = Field(..., min_length=1, max_length=2000)


class CommentResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    company_id: int
    evaluation_id: int
    evaluation_label: str
    admin_id: int
    admin_name: str
    comment: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
