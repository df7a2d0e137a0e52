"""
Pydantic schemas describing provider configuration status.

Used by the UI to decide whether the custom provider toggle can be enabled.
"""

from pydantic import BaseModel, Field, ConfigDict


class CustomConfigParts(BaseModel):
    """Presence flags for each required custom provider setting."""

    has_key: bool = Field(alias="hasKey")
    has_model: bool = Field(alias="hasModel")
    has_url: bool = Field(alias="hasUrl")

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class CustomProviderStatus(BaseModel):
    """Whether the custom provider is fully configured."""

    custom_configured: bool = Field(alias="customConfigured")
    custom_config_parts: CustomConfigParts = Field(alias="customConfigParts")

    model_config = ConfigDict(
        populate_by_name=True,
        frozen=True,
        json_schema_extra={
            "example": {
                "customConfigured": False,
                "customConfigParts": {"hasKey": True, "hasModel": True, "hasUrl": False}
            }
        }
    )
