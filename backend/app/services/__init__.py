from app.services.question_service import (
    QuestionGenerationRouter,
    build_router,
    resolve_provider_name,
)

__all__ = [
    "QuestionGenerationRouter",
    "build_router",
    "resolve_provider_name",
]
