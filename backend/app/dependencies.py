"""FastAPI dependencies shared by the API routers."""

from functools import lru_cache

from app.config import Settings, settings
from app.services.question_service import QuestionGenerationRouter, build_router


def get_settings() -> Settings:
    """Process-wide settings, loaded once at import."""
    return settings


@lru_cache(maxsize=1)
def get_question_router() -> QuestionGenerationRouter:
    """Router built once from the process-wide settings."""
    return build_router(get_settings())
