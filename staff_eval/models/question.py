from sqlalchemy import Column, Integer, Text, DateTime, ForeignKey
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from staff_eval.database import Base


class EvaluationQuestion(Base):
    """A staff member's question about one of their evaluations, answered by an admin."""
    __tablename__ = "evaluation_questions"

    id = Column(Integer, primary_key=True, index=True)
    company_id = Column(Integer, ForeignKey("companies.id"), nullable=False, index=True)
    evaluation_id = Column(Integer, ForeignKey("evaluations.id"), nullable=False, index=True)
    staff_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    question = Column(Text, nullable=False)

    answer = Column(Text, nullable=True)
    admin_id = Column(Integer, ForeignKey("users.id"), nullable=True)
    answered_at = Column(DateTime(timezone=True), nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    evaluation = relationship("Evaluation", back_populates="questions")
    staff = relationship("User", foreign_keys=[staff_id])
    admin = relationship("User", foreign_keys=[admin_id])

    @property
    def is_answered(self) -> bool:
        return self.answer is not None

    @property
    def evaluation_label(self) -> str:
        return self.evaluation.label

    @property
    def staff_name(self) -> str:
        return self.staff.full_name

    @property
    def admin_name(self):
        return self.admin.full_name if self.admin else None
