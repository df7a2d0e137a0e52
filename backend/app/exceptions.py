from typing import Optional, Dict, Any

from fastapi import status

from app.schemas.error import ClassifiedError, ErrorCategory


class AppException(Exception):
    """Base class for all application exceptions."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or 'UNKNOWN_ERROR'
        self.details = details or {}


class ValidationException(AppException):
    """Exception raised when input validation fails."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, error_code='VALIDATION_ERROR', details=details)


class RequestParseError(AppException):
    """Exception raised when an inbound request body is not valid JSON."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, error_code='REQUEST_PARSE_ERROR', details=details)


class ProviderConfigurationException(AppException):
    """Exception raised when a required provider setting is missing or blank."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, error_code='PROVIDER_CONFIGURATION_ERROR', details=details)


class UpstreamError(AppException):
    """Exception raised when a provider answers with an error status or no choices."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, error_code='UPSTREAM_ERROR', details=details)


class UpstreamParseError(AppException):
    """Exception raised when a provider response body cannot be decoded."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, error_code='UPSTREAM_PARSE_ERROR', details=details)


class MalformedResponseError(AppException):
    """Exception raised when model output does not contain parseable JSON."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, error_code='MALFORMED_RESPONSE', details=details)


class EmptyResponseError(AppException):
    """Exception raised when a provider returns no usable content."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, error_code='EMPTY_RESPONSE', details=details)


# Ordered (category, status, substrings, message, detail); first match wins
_SUBSTRING_RULES = (
    (
        ErrorCategory.PROVIDER_OVERLOADED,
        status.HTTP_503_SERVICE_UNAVAILABLE,
        ("403", "forbidden", "overloaded"),
        "The AI provider is currently overloaded. Please try again in a moment.",
        "Service temporarily unavailable",
    ),
    (
        ErrorCategory.RATE_LIMITED,
        status.HTTP_429_TOO_MANY_REQUESTS,
        ("429", "rate limit", "quota"),
        "Rate limit exceeded. Please try again in a moment.",
        "Too many requests to the AI service",
    ),
    (
        ErrorCategory.INVALID_UPSTREAM_DATA,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        ("json", "parse"),
        "Failed to process AI response. The service returned invalid data.",
        "Please try again",
    ),
)


def _error_message(exc: BaseException) -> str:
    if isinstance(exc, AppException):
        return exc.message
    return str(exc) or type(exc).__name__


def classify_error(exc: BaseException) -> ClassifiedError:
    """
    Map any failure to a user-safe error category.

    Classification inspects the failure message case-insensitively, so provider
    errors of any shape end up in the same few buckets. Missing configuration
    is recognised by type once no message rule has matched.
    """
    message = _error_message(exc)
    lowered = message.lower()

    for category, http_status, needles, user_message, detail in _SUBSTRING_RULES:
        if any(needle in lowered for needle in needles):
            return ClassifiedError(
                category=category,
                http_status=http_status,
                message=user_message,
                detail=detail
            )

    if isinstance(exc, ProviderConfigurationException):
        return ClassifiedError(
            category=ErrorCategory.SERVER_CONFIG_ERROR,
            http_status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            message="Server configuration error: Missing variable.",
            detail="Please check server configuration"
        )

    return ClassifiedError(
        category=ErrorCategory.UNKNOWN,
        http_status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        message="An unexpected error occurred while generating questions.",
        detail=message
    )
