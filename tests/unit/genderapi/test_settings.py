"""
Tests for environment configuration
"""
import pytest
from pydantic import SecretStr, ValidationError

from genderapi.config import DEFAULT_BASE_URL, Settings, get_settings

pytestmark = pytest.mark.critical


class TestSettings:
    def test_default_settings(self):
        settings = Settings(_env_file=None)

        assert settings.environment == "development"
        assert settings.base_url == DEFAULT_BASE_URL == "https://api.genderapi.io"
        assert settings.api_key is None
        assert settings.request_timeout is None
        assert settings.log_level == "INFO"
        assert settings.log_format == "text"
        assert settings.get_api_key() is None

    def test_environment_variables(self, monkeypatch):
        monkeypatch.setenv("GENDERAPI_API_KEY", "from-env")
        monkeypatch.setenv("GENDERAPI_BASE_URL", "http://localhost:5010/")
        monkeypatch.setenv("GENDERAPI_REQUEST_TIMEOUT", "4.5")
        monkeypatch.setenv("GENDERAPI_LOG_LEVEL", "debug")

        settings = Settings(_env_file=None)

        assert settings.get_api_key() == "from-env"
        assert settings.base_url == "http://localhost:5010"
        assert settings.request_timeout == 4.5
        assert settings.log_level == "DEBUG"

    def test_invalid_environment(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, environment="qa")

    def test_invalid_base_url(self):
        with pytest.raises(ValidationError) as exc_info:
            Settings(_env_file=None, base_url="api.genderapi.io")

        assert "http://" in str(exc_info.value)

    def test_invalid_log_format(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_format="xml")

    def test_non_positive_timeout_rejected(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, request_timeout=0)

    def test_model_dump_masks_api_key(self):
        settings = Settings(_env_file=None, api_key=SecretStr("abcdefgh"))

        dumped = settings.model_dump()

        assert dumped["api_key"] == "abcd****"

    def test_model_dump_masks_short_api_key(self):
        settings = Settings(_env_file=None, api_key=SecretStr("abc"))

        assert settings.model_dump()["api_key"] == "***"

    def test_get_settings_cached(self):
        assert get_settings() is get_settings()

        get_settings.cache_clear()
        first = get_settings()
        get_settings.cache_clear()

        assert get_settings() is not first
