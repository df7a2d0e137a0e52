import json
from typing import List, Optional, Tuple

import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.dependencies import get_question_router, get_settings
from app.main import app
from app.services.question_generation import QuestionGenerationProvider
from app.services.question_service import QuestionGenerationRouter


SAMPLE_QUESTIONS = [
    {
        "question": "Which planet is known as the Red Planet?",
        "answers": ["Venus", "Mars", "Jupiter", "Mercury"],
        "correctAnswerIndex": 1,
    },
    {
        "question": "What is the closest star to Earth?",
        "answers": ["Sirius", "Proxima Centauri", "The Sun", "Vega"],
        "correctAnswerIndex": 2,
    },
    {
        "question": "Who was the first person to walk on the Moon?",
        "answers": ["Buzz Aldrin", "Yuri Gagarin", "Neil Armstrong", "John Glenn"],
        "correctAnswerIndex": 2,
    },
]


class FakeProvider(QuestionGenerationProvider):
    """Provider double that records calls and returns canned output."""

    def __init__(self, name: str, response: str = "", configured: bool = True, error: Optional[Exception] = None):
        self.name = name
        self.response = response
        self.configured = configured
        self.error = error
        self.calls: List[Tuple[str, float]] = []
        self.closed = False

    def required_settings(self):
        return [(f"{self.name} API key", "key" if self.configured else "")]

    def close(self) -> None:
        self.closed = True

    def generate(self, prompt: str, temperature: float) -> str:
        self.calls.append((prompt, temperature))
        if self.error is not None:
            raise self.error
        return self.response


def make_settings(**overrides) -> Settings:
    values = {
        "gemini_api_key": "",
        "custom_api_key": "",
        "custom_model": "",
        "custom_base_url": "",
        "log_format": "text",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def google_provider():
    return FakeProvider("google", response=json.dumps(SAMPLE_QUESTIONS))


@pytest.fixture
def custom_provider():
    return FakeProvider("custom", response=json.dumps(SAMPLE_QUESTIONS[:1]))


@pytest.fixture
def question_router(google_provider, custom_provider):
    return QuestionGenerationRouter([google_provider, custom_provider])


@pytest.fixture
def client(question_router):
    app.dependency_overrides[get_question_router] = lambda: question_router
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def override_settings():
    def _override(**values) -> Settings:
        configured = make_settings(**values)
        app.dependency_overrides[get_settings] = lambda: configured
        return configured

    yield _override
    app.dependency_overrides.clear()
