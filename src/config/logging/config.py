"""Instalação do logging JSON do processo.

Um único StreamHandler no root logger, com formatter JSON e os filters
de contexto e de segredos. Loggers ruidosos das libs Google sobem para
WARNING: o discovery loga a URL de cada request em INFO.

Nunca registrar texto de comentário nem material de credencial.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.logging.filters import CorrelationIdFilter, SecretRedactionFilter
from config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "yt_comment_harvester"

NOISY_LOGGERS: tuple[str, ...] = (
    "googleapiclient.discovery",
    "googleapiclient.discovery_cache",
    "google.auth.transport.requests",
    "urllib3.connectionpool",
)


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
    quiet_loggers: Iterable[str] = NOISY_LOGGERS,
) -> None:
    """Substitui os handlers do root por um handler JSON.

    Idempotente: chamar de novo (ex: testes) não duplica linhas.

    Raises:
        ValueError: Nível de log desconhecido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))
    handler.addFilter(SecretRedactionFilter())

    root = logging.getLogger()
    root.setLevel(level_upper)
    root.handlers = [handler]

    for name in quiet_loggers:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def log_backoff(
    logger: logging.Logger,
    component: str,
    attempt: int,
    backoff_seconds: float,
    reason: str | None = None,
) -> None:
    """Emite `retry_backoff` antes de cada nova tentativa.

    Args:
        logger: Logger do componente que vai retentar.
        component: Nome do componente (ex: "comment_aggregator").
        attempt: Tentativa que falhou, a partir de 0.
        backoff_seconds: Pausa aplicada antes da próxima tentativa.
        reason: Tipo do erro que motivou a retentativa.
    """
    extra: dict[str, object] = {
        "retry": True,
        "component": component,
        "attempt": attempt,
        "backoff_seconds": backoff_seconds,
    }
    if reason:
        extra["reason"] = reason
    logger.info("retry_backoff", extra=extra)
