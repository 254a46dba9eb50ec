"""Testes dos endpoints de health e readiness."""

from __future__ import annotations

import json
from collections.abc import Iterator

import pytest

from api.routes.health import router as health_module
from api.routes.health.router import health_check, readiness_check
from app.bootstrap import clients
from app.infra.youtube import ServiceAccountCredential
from config.settings import youtube as youtube_settings
from utils.errors import MalformedCredentialError

BROKEN_KEY_ACCOUNT = {
    "type": "service_account",
    "project_id": "demo-project",
    "private_key": "not-a-key",
    "client_email": "harvester@demo-project.iam.gserviceaccount.com",
    "token_uri": "https://oauth2.googleapis.com/token",
}


@pytest.fixture
def _fresh_clients() -> Iterator[None]:
    caches = (
        youtube_settings.get_youtube_settings,
        clients.get_service_account_credential,
        clients.get_youtube_service,
    )
    for cached in caches:
        cached.cache_clear()
    yield
    for cached in caches:
        cached.cache_clear()


@pytest.mark.asyncio
async def test_health_reports_service_name() -> None:
    response = await health_check()

    assert response.status == "healthy"
    assert response.service == "yt-comment-harvester"


@pytest.mark.asyncio
async def test_readiness_not_ready_when_credential_fails(monkeypatch: pytest.MonkeyPatch) -> None:
    def _fail() -> object:
        raise MalformedCredentialError("Invalid GOOGLE_SERVICE_ACCOUNT_JSON format")

    monkeypatch.setattr(health_module, "get_youtube_service", _fail)

    response = await readiness_check()
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 503
    assert payload["status"] == "not_ready"
    assert payload["checks"]["service_account"] == {
        "status": "failed",
        "detail": "MalformedCredentialError",
    }


@pytest.mark.asyncio
async def test_readiness_ready_when_client_builds(monkeypatch: pytest.MonkeyPatch) -> None:
    credential = ServiceAccountCredential(source="base64", info={"project_id": "demo"})
    monkeypatch.setattr(health_module, "get_youtube_service", lambda: object())
    monkeypatch.setattr(health_module, "get_service_account_credential", lambda: credential)

    response = await readiness_check()
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 200
    assert payload["status"] == "ready"
    assert payload["checks"]["service_account"] == {"status": "ok", "detail": "base64"}


@pytest.mark.asyncio
@pytest.mark.usefixtures("_fresh_clients")
async def test_readiness_fails_when_google_auth_rejects_key(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    for name in ("GOOGLE_SERVICE_ACCOUNT_BASE64", "GOOGLE_SERVICE_ACCOUNT_PATH"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("GOOGLE_SERVICE_ACCOUNT_JSON", json.dumps(BROKEN_KEY_ACCOUNT))

    response = await readiness_check()
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 503
    assert payload["checks"]["service_account"]["detail"] == "MalformedCredentialError"
