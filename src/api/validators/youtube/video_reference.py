"""Resolução de referências de vídeo (URL ou ID) para o ID canônico.

Função pura: sem IO, determinística e idempotente.
"""

from __future__ import annotations

import re

from utils.errors import EmptyVideoReferenceError, InvalidVideoReferenceError

VIDEO_ID_LENGTH = 11

_VIDEO_ID_PATTERN = re.compile(rf"[A-Za-z0-9_-]{{{VIDEO_ID_LENGTH}}}")

# Ordem fixa: o primeiro padrão que casar decide, mesmo que o ID capturado seja inválido.
_URL_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(
        r"(?:youtube\.com/watch\?v=|youtu\.be/|youtube\.com/embed/|youtube\.com/v/)"
        r"([^&\n?#/]+)"
    ),
    re.compile(r"youtube\.com/watch\?.*v=([^&\n?#]+)"),
)


def is_video_id(value: str) -> bool:
    """Retorna True se o valor já for um ID canônico de 11 caracteres."""
    return _VIDEO_ID_PATTERN.fullmatch(value) is not None


def resolve_video_reference(raw: str | None) -> str:
    """Extrai o ID canônico de uma URL do YouTube ou de um ID puro.

    Formatos aceitos: ``watch?v=``, ``youtu.be/<id>``, ``/embed/<id>``,
    ``/v/<id>`` e ``watch?...&v=<id>``.

    Args:
        raw: Texto informado pelo usuário.

    Returns:
        ID de 11 caracteres ``[A-Za-z0-9_-]``.

    Raises:
        EmptyVideoReferenceError: Entrada ausente ou só com espaços.
        InvalidVideoReferenceError: Nenhum formato reconhecido.
    """
    if raw is None or not raw.strip():
        raise EmptyVideoReferenceError

    candidate = raw.strip()
    if is_video_id(candidate):
        return candidate

    for pattern in _URL_PATTERNS:
        match = pattern.search(candidate)
        if match is None:
            continue
        video_id = match.group(1)
        if not is_video_id(video_id):
            raise InvalidVideoReferenceError
        return video_id

    raise InvalidVideoReferenceError


__all__ = ["VIDEO_ID_LENGTH", "is_video_id", "resolve_video_reference"]
