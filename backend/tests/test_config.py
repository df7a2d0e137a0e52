import pytest
from pydantic import ValidationError

from conftest import make_settings


def test_custom_provider_status_all_present():
    settings = make_settings(custom_api_key="k", custom_model="m", custom_base_url="http://x")

    status = settings.custom_provider_status()

    assert status.custom_configured is True
    assert status.custom_config_parts.has_key
    assert status.custom_config_parts.has_model
    assert status.custom_config_parts.has_url


def test_custom_provider_status_blank_values():
    settings = make_settings(custom_api_key="k", custom_model="   ", custom_base_url="")

    status = settings.custom_provider_status()

    assert status.custom_configured is False
    assert status.model_dump(by_alias=True) == {
        "customConfigured": False,
        "customConfigParts": {"hasKey": True, "hasModel": False, "hasUrl": False},
    }


def test_settings_are_immutable():
    settings = make_settings()

    with pytest.raises(ValidationError):
        settings.custom_api_key = "changed"


def test_log_level_validation():
    assert make_settings(log_level="debug").log_level == "DEBUG"
    with pytest.raises(ValidationError):
        make_settings(log_level="verbose")


def test_cors_origins_parsing():
    settings = make_settings(cors_origins="http://a.test, http://b.test ,")

    assert settings.get_cors_origins() == ["http://a.test", "http://b.test"]


def test_config_status_endpoint(client, override_settings):
    override_settings(custom_api_key="k", custom_model="m", custom_base_url="")

    response = client.get("/api/config")

    assert response.status_code == 200
    assert response.json() == {
        "customConfigured": False,
        "customConfigParts": {"hasKey": True, "hasModel": True, "hasUrl": False},
    }
