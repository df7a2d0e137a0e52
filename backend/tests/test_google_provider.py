from types import SimpleNamespace

import pytest

from app.exceptions import ProviderConfigurationException
from app.services.question_generation import GoogleProvider


class FakeModels:
    def __init__(self, text):
        self.text = text
        self.calls = []

    def generate_content(self, model, contents):
        self.calls.append({"model": model, "contents": contents})
        return SimpleNamespace(text=self.text)


def make_client(text="[]"):
    return SimpleNamespace(models=FakeModels(text))


def test_sends_prompt_to_configured_model():
    client = make_client('[{"question": "Q"}]')
    provider = GoogleProvider(api_key="key", model="gemini-2.5-pro", client=client)

    assert provider.generate("the prompt", 0.7) == '[{"question": "Q"}]'
    assert client.models.calls == [{"model": "gemini-2.5-pro", "contents": "the prompt"}]


def test_missing_text_becomes_empty_string():
    provider = GoogleProvider(api_key="key", model="gemini-2.5-pro", client=make_client(None))

    assert provider.generate("p", 0.7) == ""


@pytest.mark.parametrize("api_key", ["", "   "])
def test_missing_key_never_calls_model(api_key):
    client = make_client()
    provider = GoogleProvider(api_key=api_key, model="gemini-2.5-pro", client=client)

    with pytest.raises(ProviderConfigurationException, match="Gemini API key is missing or empty"):
        provider.generate("p", 0.7)
    assert client.models.calls == []


def test_sdk_errors_propagate():
    class FailingModels:
        def generate_content(self, model, contents):
            raise RuntimeError("503 UNAVAILABLE. The model is overloaded.")

    provider = GoogleProvider(api_key="key", model="gemini-2.5-pro", client=SimpleNamespace(models=FailingModels()))

    with pytest.raises(RuntimeError, match="overloaded"):
        provider.generate("p", 0.7)
