"""Testes para cielo.config.settings."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from cielo.config.settings import (
    PRODUCTION_API_BASE_URL,
    PRODUCTION_QUERY_BASE_URL,
    SANDBOX_API_BASE_URL,
    SANDBOX_QUERY_BASE_URL,
    CieloSettings,
    get_cielo_settings,
)


@pytest.fixture(autouse=True)
def _clear_settings_cache() -> Iterator[None]:
    get_cielo_settings.cache_clear()
    yield
    get_cielo_settings.cache_clear()


class TestCieloSettings:
    def test_defaults_point_to_sandbox(self) -> None:
        settings = CieloSettings()

        assert settings.environment == "sandbox"
        assert settings.transaction_url == SANDBOX_API_BASE_URL
        assert settings.query_url == SANDBOX_QUERY_BASE_URL

    def test_production_urls(self) -> None:
        settings = CieloSettings(environment="production")

        assert settings.is_production
        assert settings.transaction_url == PRODUCTION_API_BASE_URL
        assert settings.query_url == PRODUCTION_QUERY_BASE_URL

    def test_url_overrides_get_trailing_slash(self) -> None:
        settings = CieloSettings(
            api_base_url="http://localhost:8080/1",
            query_base_url="http://localhost:8081/1/",
        )

        assert settings.transaction_url == "http://localhost:8080/1/"
        assert settings.query_url == "http://localhost:8081/1/"

    def test_validate_reports_all_problems(self) -> None:
        errors = CieloSettings(request_timeout_seconds=0, max_retries=-1).validate()

        assert errors == [
            "CIELO_MERCHANT_ID não configurado",
            "CIELO_MERCHANT_KEY não configurado",
            "CIELO_REQUEST_TIMEOUT_SECONDS deve ser > 0",
            "CIELO_MAX_RETRIES deve ser >= 0",
        ]

    def test_validate_ok(self) -> None:
        assert CieloSettings(merchant_id="id", merchant_key="key").validate() == []


class TestLoadFromEnv:
    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CIELO_MERCHANT_ID", "env-id")
        monkeypatch.setenv("CIELO_MERCHANT_KEY", "env-key")
        monkeypatch.setenv("CIELO_ENVIRONMENT", "prod")
        monkeypatch.setenv("CIELO_REQUEST_TIMEOUT_SECONDS", "12.5")
        monkeypatch.setenv("CIELO_MAX_RETRIES", "0")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        settings = get_cielo_settings()

        assert settings.merchant_id == "env-id"
        assert settings.merchant_key == "env-key"
        assert settings.environment == "production"
        assert settings.request_timeout_seconds == 12.5
        assert settings.max_retries == 0
        assert settings.log_level == "DEBUG"

    def test_unknown_environment_falls_back_to_sandbox(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CIELO_ENVIRONMENT", "homologacao")

        assert get_cielo_settings().environment == "sandbox"

    def test_settings_are_cached(self) -> None:
        assert get_cielo_settings() is get_cielo_settings()
