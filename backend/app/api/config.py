"""
Configuration status API router.

Lets the UI find out whether the custom provider can be offered, without
exposing any of the configured values.
"""

from fastapi import APIRouter, Depends

from app.config import Settings
from app.dependencies import get_settings
from app.schemas import CustomProviderStatus


router = APIRouter()


@router.get("", response_model=CustomProviderStatus)
def get_provider_config_status(settings: Settings = Depends(get_settings)):
    """Report which custom provider settings are present."""
    return settings.custom_provider_status()
