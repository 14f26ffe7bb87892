"""
Unit tests for settings.
"""

import pytest
from pydantic import ValidationError

from plan_engine.settings import Settings, get_settings

ENV_VARS = (
    "ENVIRONMENT",
    "SUPABASE_URL",
    "SUPABASE_SERVICE_ROLE_KEY",
    "SUPABASE_ANON_KEY",
    "SUGGESTION_PROXY_URL",
    "GEMINI_API_KEY",
    "REST_SECONDS",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def make_settings(**kwargs):
    return Settings(_env_file=None, **kwargs)


@pytest.mark.unit
class TestSettingsDefaults:
    def test_generation_defaults(self):
        settings = make_settings()

        assert settings.environment == "development"
        assert settings.rest_seconds == 30
        assert settings.min_suggested_exercises == 3
        assert settings.suggestion_overshoot_seconds == 60
        assert settings.tier_max_attempts == 1
        assert settings.proxy_timeout_seconds == 10.0
        assert settings.direct_timeout_seconds == 10.0

    def test_no_transports_by_default(self):
        settings = make_settings()

        assert settings.suggestion_proxy_url is None
        assert settings.gemini_api_key is None


@pytest.mark.unit
class TestSettingsValidation:
    def test_environment_is_normalized(self):
        assert make_settings(environment="TEST").is_test

    def test_invalid_environment(self):
        with pytest.raises(ValidationError):
            make_settings(environment="moon")

    @pytest.mark.parametrize("field", ["rest_seconds", "proxy_timeout_seconds", "catalog_timeout_seconds"])
    def test_positive_fields(self, field):
        with pytest.raises(ValidationError):
            make_settings(**{field: 0})

    def test_proxy_url_derived_from_supabase(self):
        settings = make_settings(supabase_url="https://abc.supabase.co/")
        assert settings.suggestion_proxy_url == "https://abc.supabase.co/functions/v1/generate-workout"

    def test_explicit_proxy_url_wins(self):
        settings = make_settings(
            supabase_url="https://abc.supabase.co",
            suggestion_proxy_url="https://proxy.test/generate-workout",
        )
        assert settings.suggestion_proxy_url == "https://proxy.test/generate-workout"

    def test_service_role_key_preferred(self):
        settings = make_settings(supabase_service_role_key="service", supabase_anon_key="anon")
        assert settings.supabase_key == "service"

    def test_anon_key_used_alone(self):
        assert make_settings(supabase_anon_key="anon").supabase_key == "anon"


@pytest.mark.unit
class TestGetSettings:
    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("REST_SECONDS", "45")
        monkeypatch.setenv("ENVIRONMENT", "production")

        settings = get_settings()

        assert settings.rest_seconds == 45
        assert settings.is_production

    def test_is_cached(self):
        assert get_settings() is get_settings()
