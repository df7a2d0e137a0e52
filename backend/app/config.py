from pathlib import Path
from typing import List

from pydantic import Field, field_validator

from pydantic_settings import BaseSettings

from app.schemas.config import CustomConfigParts, CustomProviderStatus


def _is_present(value: str) -> bool:
    return isinstance(value, str) and value.strip() != ""


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Google (Gemini) provider configuration
    gemini_api_key: str = Field(default="")
    google_model: str = Field(default="gemini-2.5-pro")

    # Custom OpenAI-compatible provider configuration
    custom_api_key: str = Field(default="")
    custom_model: str = Field(default="")
    custom_base_url: str = Field(default="")
    custom_request_timeout: float = Field(default=120.0)

    # CORS configuration (comma-separated)
    cors_origins: str = Field(default="http://localhost:5173,http://localhost:3000")

    # Logging configuration
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="json")
    enable_log_rotation: bool = Field(default=False)
    log_file_path: str = Field(default="./logs/app.log")

    def get_cors_origins(self) -> List[str]:
        """Get parsed CORS origins as a list."""
        origins = [origin.strip() for origin in self.cors_origins.split(',') if origin.strip()]
        return origins or ["http://localhost:5173", "http://localhost:3000"]

    def custom_provider_status(self) -> CustomProviderStatus:
        """Report which parts of the custom provider configuration are set."""
        parts = CustomConfigParts(
            has_key=_is_present(self.custom_api_key),
            has_model=_is_present(self.custom_model),
            has_url=_is_present(self.custom_base_url),
        )
        return CustomProviderStatus(
            custom_configured=parts.has_key and parts.has_model and parts.has_url,
            custom_config_parts=parts,
        )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is one of the allowed values."""
        allowed_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        v_upper = v.upper()
        if v_upper not in allowed_levels:
            raise ValueError(f"log_level must be one of {allowed_levels}, got {v}")
        return v_upper

    @field_validator('log_format')
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Validate log format is either json or text."""
        v_lower = v.lower()
        if v_lower not in ('json', 'text'):
            raise ValueError(f"log_format must be 'json' or 'text', got {v}")
        return v_lower

    model_config = {
        "env_file": str(Path(__file__).resolve().parents[2] / ".env"),
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
        "frozen": True,
    }


# Singleton settings instance
settings = Settings()
