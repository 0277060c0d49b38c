# Models package
# Importing modules here ensures they are registered with SQLAlchemy Base
from . import company, user, evaluation, goal, question, comment

from .company import Company
from .user import User, UserRole
from .evaluation import Evaluation, EvaluationStatus, EvaluatorResponse
from .goal import StaffGoal, GoalStatus
from .question import EvaluationQuestion
from .comment import AdminComment

__all__ = [
    "Company",
    "User",
    "UserRole",
    "Evaluation",
    "EvaluationStatus",
    "EvaluatorResponse",
    "StaffGoal",
    "GoalStatus",
    "EvaluationQuestion",
    "AdminComment",
]
