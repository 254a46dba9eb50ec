"""Logging estruturado do coletor.

    from config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="yt_comment_harvester")
    logger = get_logger(__name__)
    logger.info("youtube_aggregation_completed", extra={"component": "comment_aggregator"})

Toda linha carrega timestamp, level, logger, message, service,
correlation_id e component.
"""

from config.logging.config import (
    NOISY_LOGGERS,
    configure_logging,
    get_logger,
    log_backoff,
)
from config.logging.filters import CorrelationIdFilter, SecretRedactionFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "NOISY_LOGGERS",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "SecretRedactionFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
    "log_backoff",
]
