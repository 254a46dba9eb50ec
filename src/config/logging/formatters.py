"""Formatter JSON dos logs do coletor.

Cada linha sai com timestamp, level, logger, message, service,
correlation_id e component, nessa ordem, seguidos dos campos de `extra`.
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Campos obrigatórios em todo log estruturado (ordem de saída)
REQUIRED_LOG_FIELDS: tuple[str, ...] = (
    "asctime",
    "levelname",
    "name",
    "message",
    "service",
    "correlation_id",
    "component",
)

# Nomes de saída dos atributos padrão do LogRecord
FIELD_RENAME_MAP = {
    "asctime": "timestamp",
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria o formatter JSON.

    Exemplo de output:
        {
            "timestamp": "2026-10-19 10:30:00,120",
            "level": "INFO",
            "logger": "app.services.comment_aggregator",
            "message": "youtube_aggregation_completed",
            "service": "yt_comment_harvester",
            "correlation_id": "abc-123",
            "component": "comment_aggregator",
            "total_count": 250
        }

    Títulos de vídeo podem ter acentos ou emoji, por isso `ensure_ascii=False`.
    """
    return JsonFormatter(
        " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS),
        rename_fields=FIELD_RENAME_MAP,
        json_ensure_ascii=False,
    )
