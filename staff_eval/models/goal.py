from sqlalchemy import Column, Integer, String, Text, Date, Enum, DateTime, ForeignKey
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
import enum
from staff_eval.database import Base


class GoalStatus(str, enum.Enum):
    ACTIVE = "active"
    COMPLETED = "completed"
    ABANDONED = "abandoned"


class StaffGoal(Base):
    """A personal goal a staff member tracks between evaluations."""
    __tablename__ = "staff_goals"

    id = Column(Integer, primary_key=True, index=True)
    company_id = Column(Integer, ForeignKey("companies.id"), nullable=False, index=True)
    staff_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    goal_title = Column(String, nullable=False)
    goal_description = Column(Text, nullable=False, default="")
    target_date = Column(Date, nullable=False)
    # 0-100
    achievement_rate = Column(Integer, nullable=False, default=0)
    status = Column(Enum(GoalStatus), default=GoalStatus.ACTIVE, nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    staff = relationship("User", back_populates="goals")
