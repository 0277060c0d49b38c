from typing import Any, Dict, List, Optional

class AppException(Exception):
    def __init__(
        self,
        message: str,
        status_code: int = 400,
        error_code: str = "BUSINESS_ERROR",
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.details = details
        super().__init__(self.message)

class InvalidArgumentError(AppException):
    """Non-positive period numbers, malformed dates and similar bad input."""
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            status_code=400,
            error_code="INVALID_ARGUMENT",
            details=details
        )

class PreFoundingDateError(AppException):
    """Raised when a target date falls in a month before the company was founded."""
    def __init__(self, target_date, founding_date):
        super().__init__(
            message=f"Date {target_date.isoformat()} precedes the founding month of {founding_date.isoformat()}",
            status_code=422,
            error_code="PRE_FOUNDING_DATE",
            details={
                "target_date": target_date.isoformat(),
                "founding_date": founding_date.isoformat(),
            }
        )

class NotFoundError(AppException):
    def __init__(self, message: str = "Resource not found"):
        super().__init__(
            message=message,
            status_code=404,
            error_code="NOT_FOUND"
        )

class EstablishmentDateMissingError(AppException):
    def __init__(self, company_id: int):
        super().__init__(
            message="Company has no establishment date; fiscal periods cannot be resolved.",
            status_code=409,
            error_code="ESTABLISHMENT_DATE_MISSING",
            details={"company_id": company_id}
        )

class EvaluationValidationError(AppException):
    def __init__(self, errors: List[str]):
        super().__init__(
            message="Evaluation scores are out of range",
            status_code=422,
            error_code="EVALUATION_INVALID",
            details={"errors": errors}
        )

class AccessDeniedError(AppException):
    """The acting user lacks the role an operation requires (e.g. answering as a non-admin)."""
    def __init__(self, message: str = "Insufficient permissions"):
        super().__init__(
            message=message,
            status_code=403,
            error_code="PERMISSION_DENIED"
        )

class NotStaffMemberError(AppException):
    """Evaluations, goals and questions belong to staff members only."""
    def __init__(self, user_id: int):
        super().__init__(
            message=f"User {user_id} is not a staff member",
            status_code=422,
            error_code="NOT_STAFF_MEMBER",
            details={"user_id": user_id}
        )
