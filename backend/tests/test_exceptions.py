import httpx
import pytest

from app.exceptions import (
    EmptyResponseError,
    MalformedResponseError,
    ProviderConfigurationException,
    UpstreamError,
    UpstreamParseError,
    classify_error,
)
from app.schemas import ErrorCategory


@pytest.mark.parametrize(
    "error,category,status",
    [
        (Exception("Request failed: 429 rate limit exceeded"), ErrorCategory.RATE_LIMITED, 429),
        (Exception("Unexpected token in JSON"), ErrorCategory.INVALID_UPSTREAM_DATA, 500),
        (Exception("boom"), ErrorCategory.UNKNOWN, 500),
        (Exception("403 Forbidden"), ErrorCategory.PROVIDER_OVERLOADED, 503),
        (Exception("The model is OVERLOADED"), ErrorCategory.PROVIDER_OVERLOADED, 503),
        (Exception("Resource has been exhausted (e.g. check quota)."), ErrorCategory.RATE_LIMITED, 429),
        (Exception("could not Parse output"), ErrorCategory.INVALID_UPSTREAM_DATA, 500),
    ],
)
def test_message_rules(error, category, status):
    classified = classify_error(error)

    assert classified.category == category
    assert classified.http_status == status


def test_first_matching_rule_wins():
    classified = classify_error(Exception("403 after 429 while parsing JSON"))

    assert classified.category == ErrorCategory.PROVIDER_OVERLOADED


def test_rate_limit_outranks_parse_failure():
    classified = classify_error(UpstreamError("Custom API error: quota exceeded, could not parse"))

    assert classified.category == ErrorCategory.RATE_LIMITED


def test_missing_configuration():
    classified = classify_error(ProviderConfigurationException("Custom base URL is missing or empty"))

    assert classified.category == ErrorCategory.SERVER_CONFIG_ERROR
    assert classified.http_status == 500
    assert classified.to_response_body() == {
        "error": "Server configuration error: Missing variable.",
        "details": "Please check server configuration",
    }


def test_message_rules_outrank_configuration_type():
    classified = classify_error(ProviderConfigurationException("quota settings missing"))

    assert classified.category == ErrorCategory.RATE_LIMITED


@pytest.mark.parametrize(
    "error",
    [
        MalformedResponseError("Failed to parse AI response as JSON."),
        UpstreamParseError("Failed to parse custom API event stream payload as JSON: Expecting value"),
    ],
)
def test_parse_failures_are_invalid_upstream_data(error):
    classified = classify_error(error)

    assert classified.category == ErrorCategory.INVALID_UPSTREAM_DATA
    assert classified.to_response_body() == {
        "error": "Failed to process AI response. The service returned invalid data.",
        "details": "Please try again",
    }


def test_unknown_carries_failure_message():
    classified = classify_error(EmptyResponseError("Custom API response was empty."))

    assert classified.category == ErrorCategory.UNKNOWN
    assert classified.to_response_body() == {
        "error": "An unexpected error occurred while generating questions.",
        "details": "Custom API response was empty.",
    }


def test_transport_timeout_is_unknown():
    classified = classify_error(httpx.ReadTimeout("timed out"))

    assert classified.category == ErrorCategory.UNKNOWN
    assert classified.detail == "timed out"


def test_exception_without_message_uses_type_name():
    assert classify_error(TimeoutError()).detail == "TimeoutError"
