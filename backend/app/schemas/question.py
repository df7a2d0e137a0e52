"""
Pydantic schemas for question generation API operations.

These schemas provide type safety and automatic OpenAPI documentation.
Questions are transient: they are returned directly to the caller and never stored.
"""

import math
from typing import Any, List, Literal, Optional

from pydantic import BaseModel, Field, ConfigDict, field_validator


DEFAULT_QUESTION_COUNT = 5
DEFAULT_TEMPERATURE = 0.7

ProviderName = Literal["google", "custom"]


class GenerateQuestionsRequest(BaseModel):
    """
    Request schema for generating questions about a topic.

    Field coercion is deliberately lenient: a missing, non-numeric or zero
    question count falls back to the default, a non-numeric temperature falls
    back to the default, and any provider other than "custom" means "google".
    Emptiness of the topic is checked by the router, not here, so that the
    caller gets the plain 400 message instead of a schema error.
    """

    topic: Optional[str] = None
    question_count: int = Field(default=DEFAULT_QUESTION_COUNT, alias="questionCount")
    temperature: float = DEFAULT_TEMPERATURE
    provider: ProviderName = "google"

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "topic": "space exploration",
                "questionCount": 5,
                "temperature": 0.7,
                "provider": "google"
            }
        }
    )

    @field_validator('topic', mode='before')
    @classmethod
    def coerce_topic(cls, v: Any) -> Optional[str]:
        if v is None or isinstance(v, str):
            return v
        return str(v)

    @field_validator('question_count', mode='before')
    @classmethod
    def coerce_question_count(cls, v: Any) -> int:
        if v is None or isinstance(v, bool):
            return DEFAULT_QUESTION_COUNT
        try:
            number = float(v)
        except (TypeError, ValueError, OverflowError):
            return DEFAULT_QUESTION_COUNT
        if not math.isfinite(number) or number == 0:
            return DEFAULT_QUESTION_COUNT
        return int(number)

    @field_validator('temperature', mode='before')
    @classmethod
    def coerce_temperature(cls, v: Any) -> float:
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            try:
                number = float(v)
            except OverflowError:
                return DEFAULT_TEMPERATURE
            if math.isfinite(number):
                return number
        return DEFAULT_TEMPERATURE

    @field_validator('provider', mode='before')
    @classmethod
    def coerce_provider(cls, v: Any) -> str:
        return "custom" if v == "custom" else "google"


class Question(BaseModel):
    """
    A single multiple-choice question as returned by a provider.

    The generation endpoint returns provider output without validating it
    against this model; callers that need shape guarantees can validate here.
    """

    question: str
    answers: List[str] = Field(min_length=4, max_length=4)
    correct_answer_index: int = Field(alias="correctAnswerIndex", ge=0, le=3)

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "question": "Which planet is known as the Red Planet?",
                "answers": ["Venus", "Mars", "Jupiter", "Mercury"],
                "correctAnswerIndex": 1
            }
        }
    )
