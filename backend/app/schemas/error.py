from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class ErrorCategory(str, Enum):
    """User-facing failure categories."""

    PROVIDER_OVERLOADED = "ProviderOverloaded"
    RATE_LIMITED = "RateLimited"
    INVALID_UPSTREAM_DATA = "InvalidUpstreamData"
    SERVER_CONFIG_ERROR = "ServerConfigError"
    UNKNOWN = "Unknown"


class ClassifiedError(BaseModel):
    """A failure re-expressed as a stable category, status and safe message."""

    category: ErrorCategory
    http_status: int
    message: str
    detail: str

    model_config = ConfigDict(frozen=True)

    def to_response_body(self) -> dict:
        return {"error": self.message, "details": self.detail}


class ErrorResponse(BaseModel):
    """Error body returned by the generation endpoint."""

    error: str
    details: Optional[str] = None
