from app.schemas.question import (
    GenerateQuestionsRequest,
    Question,
)
from app.schemas.config import (
    CustomConfigParts,
    CustomProviderStatus,
)
from app.schemas.error import (
    ErrorCategory,
    ClassifiedError,
    ErrorResponse,
)

__all__ = [
    "GenerateQuestionsRequest",
    "Question",
    "CustomConfigParts",
    "CustomProviderStatus",
    "ErrorCategory",
    "ClassifiedError",
    "ErrorResponse",
]
