from pydantic import BaseModel, ConfigDict, Field, model_validator
from datetime import date, datetime
from typing import Optional

from staff_eval.models.user import UserRole
from staff_eval.services.formatting import role_label


class CompanyCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    establishment_date: Optional[date] = None


class CompanyResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    establishment_date: Optional[date] = None
    created_at: Optional[datetime] = None


class StaffCreate(BaseModel):
    email: str = Field(..., min_length=3, max_length=254)
    full_name: str = Field(..., min_length=1, max_length=100)
    role: UserRole = UserRole.STAFF
    department: Optional[str] = None
    position: Optional[str] = None


class StaffResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    company_id: int
    email: str
    full_name: str
    role: UserRole
    role_label: Optional[str] = None
    department: Optional[str] = None
    position: Optional[str] = None
    is_active: bool

    @model_validator(mode="after")
    def _fill_role_label(self):
        self.role_label = role_label(self.role.value)
        return self
