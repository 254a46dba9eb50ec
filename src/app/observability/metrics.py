"""Métricas da coleta, emitidas como linhas de log `metric_*`.

Sem backend próprio: a agregação fica com o Cloud Logging (log-based
metrics). Nenhuma métrica carrega texto de comentário.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
    correlation_id: str | None = None,
) -> None:
    """Duração de uma operação em milissegundos (ex: agregação completa)."""
    logger.info(
        "metric_latency",
        extra={
            "metric_type": "latency",
            "component": component,
            "operation": operation,
            "latency_ms": round(latency_ms, 2),
            "correlation_id": correlation_id,
        },
    )


def record_comment_volume(
    video_id: str,
    pages: int,
    top_level_count: int,
    reply_count: int,
    correlation_id: str | None = None,
) -> None:
    """Volume de uma agregação bem-sucedida.

    `pages` conta páginas concluídas (retentativas não entram);
    `reply_count` soma as respostas pré-carregadas dos comentários de topo.
    """
    logger.info(
        "metric_comment_volume",
        extra={
            "metric_type": "comment_volume",
            "component": "comment_aggregator",
            "video_id": video_id,
            "pages": pages,
            "top_level_count": top_level_count,
            "reply_count": reply_count,
            "correlation_id": correlation_id,
        },
    )
