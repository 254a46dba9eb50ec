"""Achatamento de comentários para exportação tabular.

Gera uma linha por comentário de topo seguida das linhas das suas
respostas. A serialização (CSV) fica com quem consome as linhas.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import UTC, datetime, tzinfo
from typing import TYPE_CHECKING, Literal

from config.settings.youtube import get_youtube_settings

if TYPE_CHECKING:
    from collections.abc import Iterable

    from app.domain.comment import Comment

RowType = Literal["Comment", "Reply"]

EXPORT_COLUMNS: tuple[str, ...] = (
    "Type",
    "Author",
    "Text",
    "Published At",
    "Like Count",
    "Reply To",
)

_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
_FILENAME_UNSAFE = re.compile(r"[^a-z0-9]")


@dataclass(frozen=True, slots=True)
class ExportRow:
    """Linha plana de exportação."""

    type: RowType
    author: str
    text: str
    published_at: str
    like_count: int
    reply_to: str = ""

    def as_dict(self) -> dict[str, str | int]:
        values = (
            self.type,
            self.author,
            self.text,
            self.published_at,
            self.like_count,
            self.reply_to,
        )
        return dict(zip(EXPORT_COLUMNS, values, strict=True))


def flatten_comments(
    comments: Iterable[Comment],
    *,
    zone: tzinfo | None = None,
) -> list[ExportRow]:
    """Achata comentários e respostas preservando a ordem relativa.

    N comentários com r_k respostas geram exatamente N + sum(r_k) linhas;
    as respostas de k vêm logo após k e antes de k+1. Sem ``zone``, usa o
    fuso configurado em EXPORT_TIMEZONE.
    """
    if zone is None:
        zone = get_youtube_settings().export_zone
    rows: list[ExportRow] = []
    for comment in comments:
        rows.append(_to_row(comment, "Comment", "", zone))
        rows.extend(_to_row(reply, "Reply", comment.author, zone) for reply in comment.replies)
    return rows


def export_filename(video_title: str) -> str:
    """Nome de arquivo seguro derivado do título (ex: ``my_video_comments.csv``)."""
    return f"{_FILENAME_UNSAFE.sub('_', video_title.lower())}_comments.csv"


def clean_text(text: str) -> str:
    return text.replace("\n", " ").replace("\r", "")


def localize_timestamp(value: str, zone: tzinfo = UTC) -> str:
    """Converte ISO 8601 para o fuso informado; valores inválidos passam intactos."""
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return value
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed.astimezone(zone).strftime(_TIMESTAMP_FORMAT)


def _to_row(comment: Comment, row_type: RowType, reply_to: str, zone: tzinfo) -> ExportRow:
    return ExportRow(
        type=row_type,
        author=comment.author,
        text=clean_text(comment.text),
        published_at=localize_timestamp(comment.published_at, zone),
        like_count=comment.like_count,
        reply_to=reply_to,
    )


__all__ = [
    "EXPORT_COLUMNS",
    "ExportRow",
    "clean_text",
    "export_filename",
    "flatten_comments",
    "localize_timestamp",
]
