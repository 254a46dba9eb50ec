"""Endpoints de health check para Cloud Run."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any, Literal

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from app.bootstrap.clients import get_service_account_credential, get_youtube_service
from utils.errors import CredentialError

logger = logging.getLogger(__name__)

router = APIRouter()

SERVICE_LABEL = "yt-comment-harvester"


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    timestamp: str
    version: str = "1.0.0"


@dataclass(frozen=True, slots=True)
class DependencyCheck:
    """Resultado de checagem de dependência."""

    status: Literal["ok", "failed"]
    detail: str | None = None

    def as_dict(self) -> dict[str, Any]:
        return {"status": self.status, "detail": self.detail}


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness probe: verifica se o serviço está rodando."""
    return HealthResponse(
        status="healthy",
        service=SERVICE_LABEL,
        timestamp=datetime.now(UTC).isoformat(),
    )


@router.get("/ready")
async def readiness_check() -> JSONResponse:
    """Readiness probe: a credencial precisa resolver e virar um client.

    Constrói o resource (carrega a chave privada), mas não chama a API do
    YouTube para não consumir quota em cada checagem.
    """
    credential_check = _check_credentials()
    ready = credential_check.status == "ok"
    payload = {
        "status": "ready" if ready else "not_ready",
        "checks": {"service_account": credential_check.as_dict()},
        "timestamp": datetime.now(UTC).isoformat(),
    }
    return JSONResponse(content=payload, status_code=200 if ready else 503)


def _check_credentials() -> DependencyCheck:
    try:
        get_youtube_service()
        credential = get_service_account_credential()
    except CredentialError as exc:
        logger.warning("readiness_credentials_failed", extra={"error_type": type(exc).__name__})
        return DependencyCheck(status="failed", detail=type(exc).__name__)
    return DependencyCheck(status="ok", detail=credential.source)
