"""Composition root do coletor.

Configura o logging, valida as settings no startup e liga o client
concreto da YouTube Data API ao agregador. A credencial só é resolvida
quando o primeiro request precisa dela.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import TYPE_CHECKING

from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import get_base_settings, get_youtube_settings

if TYPE_CHECKING:
    from app.services.comment_aggregator import CommentAggregator
    from app.use_cases.youtube import FetchVideoCommentsUseCase

SERVICE_NAME = "yt_comment_harvester"

STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Logging JSON no nível de LOG_LEVEL, com correlation_id do ContextVar."""
    configure_logging(
        level=get_base_settings().log_level,
        service_name=SERVICE_NAME,
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings() -> None:
    """Checa base + YouTube settings no lifespan.

    staging/production: levanta RuntimeError e o container não sobe.
    development: só loga `settings_validation_failed`.
    """
    base = get_base_settings()
    strict_mode = base.environment in STRICT_VALIDATION_ENVS
    errors: list[str] = []

    errors.extend(f"base: {error}" for error in base.validate())
    errors.extend(f"youtube: {error}" for error in get_youtube_settings().validate())

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": base.environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if strict_mode:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")


# ──────────────────────────────────────────────────────────────────────────────
# Getters (lazy initialization com cache)
# ──────────────────────────────────────────────────────────────────────────────


@lru_cache(maxsize=1)
def get_comment_aggregator() -> CommentAggregator:
    """Obtém agregador ligado ao client real da Data API (singleton).

    Raises:
        CredentialError: Credencial ausente ou inválida.
    """
    from app.bootstrap.clients import get_youtube_service
    from app.infra.youtube import YouTubeCommentsClient
    from app.services.comment_aggregator import CommentAggregator

    settings = get_youtube_settings()
    source = YouTubeCommentsClient(
        get_youtube_service(),
        timeout_seconds=settings.request_timeout_seconds,
    )
    return CommentAggregator(source, settings)


def get_fetch_comments_use_case() -> FetchVideoCommentsUseCase:
    """Obtém use case de coleta de comentários.

    O agregador (e a credencial) só é resolvido na primeira execução.
    """
    from app.use_cases.youtube import FetchVideoCommentsUseCase

    return FetchVideoCommentsUseCase(get_comment_aggregator)
