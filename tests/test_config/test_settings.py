"""Testes das settings base e de YouTube."""

from __future__ import annotations

import pytest

from config.settings.base.core import BaseSettings, _load_base_from_env
from config.settings.youtube import YouTubeSettings, _load_from_env


def test_defaults_are_valid_except_missing_credentials() -> None:
    errors = YouTubeSettings().validate()

    assert len(errors) == 1
    assert "GOOGLE_SERVICE_ACCOUNT_BASE64" in errors[0]


def test_any_credential_source_satisfies_validation() -> None:
    assert YouTubeSettings(service_account_path="/secrets/sa.json").validate() == []
    assert YouTubeSettings(service_account_base64="e30=").has_credentials


@pytest.mark.parametrize(
    ("target", "expected"),
    [(1, 0.1), (1000, 0.1), (1001, 0.2), (10000, 0.2)],
)
def test_page_delay_tiers(target: int, expected: float) -> None:
    assert YouTubeSettings().page_delay_for(target) == expected


def test_invalid_values_are_reported() -> None:
    settings = YouTubeSettings(
        service_account_json="{}",
        page_delay_seconds=-1,
        request_timeout_seconds=0,
        max_retries=-1,
        default_max_results=20000,
    )

    errors = settings.validate()

    assert len(errors) == 4


def test_load_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GOOGLE_SERVICE_ACCOUNT_PATH", "sa.json")
    monkeypatch.setenv("YOUTUBE_PAGE_DELAY_SECONDS", "0.3")
    monkeypatch.setenv("YOUTUBE_MAX_RETRIES", "5")
    monkeypatch.setenv("YOUTUBE_MAX_RESULTS_LIMIT", "500")
    monkeypatch.setenv("EXPORT_TIMEZONE", "America/Sao_Paulo")

    settings = _load_from_env()

    assert settings.service_account_path == "sa.json"
    assert settings.page_delay_seconds == 0.3
    assert settings.max_retries == 5
    assert settings.max_results_limit == 500
    assert settings.export_timezone == "America/Sao_Paulo"


def test_export_zone_resolves_configured_timezone() -> None:
    settings = YouTubeSettings(service_account_json="{}", export_timezone="America/Sao_Paulo")

    assert settings.export_zone.key == "America/Sao_Paulo"
    assert settings.validate() == []


def test_unknown_export_timezone_is_reported() -> None:
    errors = YouTubeSettings(service_account_json="{}", export_timezone="Mars/Olympus").validate()

    assert errors == ["EXPORT_TIMEZONE inválido: Mars/Olympus"]


def test_base_settings_parse_server_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVIRONMENT", "prod")
    monkeypatch.setenv("PORT", "9090")
    monkeypatch.setenv("CORS_ALLOW_ORIGINS", "https://a.example, https://b.example,")

    settings = _load_base_from_env()

    assert settings.environment == "production"
    assert settings.port == 9090
    assert settings.cors_allow_origins == ("https://a.example", "https://b.example")
    assert settings.validate() == []


def test_base_settings_reject_wildcard_cors_in_production() -> None:
    errors = BaseSettings(environment="production").validate()

    assert errors == ["CORS_ALLOW_ORIGINS não pode ser '*' em produção"]
