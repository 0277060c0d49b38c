from sqlalchemy import Column, Integer, Float, String, Enum, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
import enum
from staff_eval.database import Base
from staff_eval.services.formatting import month_label


class EvaluationStatus(str, enum.Enum):
    DRAFT = "draft"
    SUBMITTED = "submitted"
    COMPLETED = "completed"


class Evaluation(Base):
    """
    One staff member's evaluation for a calendar month.

    Scores, rank and reward are the average over every admin's response for
    the month and are recomputed whenever a response is saved.
    """
    __tablename__ = "evaluations"
    __table_args__ = (
        UniqueConstraint("staff_id", "evaluation_year", "evaluation_month", name="uq_evaluation_staff_month"),
    )

    id = Column(Integer, primary_key=True, index=True)
    company_id = Column(Integer, ForeignKey("companies.id"), nullable=False, index=True)
    staff_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    evaluation_year = Column(Integer, nullable=False)
    evaluation_month = Column(Integer, nullable=False)
    status = Column(Enum(EvaluationStatus), default=EvaluationStatus.DRAFT, nullable=False)

    performance_score = Column(Float, nullable=False, default=0)
    behavior_score = Column(Float, nullable=False, default=0)
    growth_score = Column(Float, nullable=False, default=0)
    total_score = Column(Float, nullable=False, default=0)
    rank = Column(String, nullable=False)
    reward = Column(Integer, nullable=False, default=0)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    staff = relationship("User", back_populates="evaluations", foreign_keys=[staff_id])
    responses = relationship(
        "EvaluatorResponse",
        back_populates="evaluation",
        cascade="all, delete-orphan",
        order_by="EvaluatorResponse.evaluator_id",
    )
    comments = relationship("AdminComment", back_populates="evaluation", cascade="all, delete-orphan")
    questions = relationship("EvaluationQuestion", back_populates="evaluation", cascade="all, delete-orphan")

    @property
    def label(self) -> str:
        return month_label(self.evaluation_year, self.evaluation_month)


class EvaluatorResponse(Base):
    """A single admin's scores for a monthly evaluation."""
    __tablename__ = "evaluation_responses"
    __table_args__ = (
        UniqueConstraint("evaluation_id", "evaluator_id", name="uq_response_evaluator"),
    )

    id = Column(Integer, primary_key=True, index=True)
    evaluation_id = Column(Integer, ForeignKey("evaluations.id"), nullable=False, index=True)
    evaluator_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    performance_score = Column(Integer, nullable=False, default=0)
    behavior_score = Column(Integer, nullable=False, default=0)
    growth_score = Column(Integer, nullable=False, default=0)
    total_score = Column(Integer, nullable=False, default=0)
    submitted_at = Column(DateTime(timezone=True), nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    evaluation = relationship("Evaluation", back_populates="responses")
    evaluator = relationship("User")
