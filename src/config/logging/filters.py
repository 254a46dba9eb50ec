"""Filters de logging: contexto da requisição e higiene de segredos.

CorrelationIdFilter injeta em cada record:
- correlation_id: ID de rastreamento da requisição HTTP
- service: nome do serviço (ex: yt_comment_harvester)
- component: componente emissor ("" quando o chamador não informa)

SecretRedactionFilter mascara campos de credencial que cheguem via
`extra` (a private_key da service account nunca deve sair no log).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

REDACTED = "[redacted]"

SENSITIVE_FIELDS = frozenset(
    {
        "private_key",
        "private_key_id",
        "service_account_json",
        "service_account_base64",
        "authorization",
    }
)


class CorrelationIdFilter(logging.Filter):
    """Injeta correlation_id, service e component em cada record.

    Args:
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função que retorna o correlation_id atual.
            Se não fornecida, usa string vazia.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        # correlation_id explícito via `extra` tem precedência sobre o ContextVar
        if not getattr(record, "correlation_id", None):
            record.correlation_id = self._get_correlation_id()
        record.service = self._service_name
        if not hasattr(record, "component"):
            record.component = ""
        return True


class SecretRedactionFilter(logging.Filter):
    """Substitui por REDACTED qualquer atributo sensível do record."""

    def __init__(self, fields: frozenset[str] = SENSITIVE_FIELDS) -> None:
        super().__init__()
        self._fields = fields

    def filter(self, record: logging.LogRecord) -> bool:
        for name in self._fields.intersection(record.__dict__):
            setattr(record, name, REDACTED)
        return True
