"""Correlation id por requisição, propagado para os logs.

Usa ContextVar: cada requisição HTTP (ou task asyncio) enxerga o próprio valor.
O header recebido do cliente só é aceito se for curto e sem caracteres
de controle; caso contrário um UUID novo é gerado.
"""

from __future__ import annotations

import re
import uuid
from contextvars import ContextVar, Token

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")

_ACCEPTED_ID = re.compile(r"[A-Za-z0-9._:-]{1,128}")


def get_correlation_id() -> str:
    """Retorna o correlation_id do contexto atual ("" se não definido)."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Define o correlation_id do contexto atual.

    Valores ausentes ou fora do formato aceito são trocados por um UUID.
    Retorna o token para `reset_correlation_id`.
    """
    candidate = (correlation_id or "").strip()
    if not _ACCEPTED_ID.fullmatch(candidate):
        candidate = generate_correlation_id()
    return _correlation_id.set(candidate)


def reset_correlation_id(token: Token[str]) -> None:
    _correlation_id.reset(token)


def generate_correlation_id() -> str:
    return uuid.uuid4().hex
