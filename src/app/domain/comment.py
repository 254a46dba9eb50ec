"""Modelos de domínio para comentários de vídeo.

Um comentário de topo pode ter respostas; uma resposta nunca tem
respostas próprias (um único nível de aninhamento, como na plataforma).
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Comment(BaseModel):
    """Comentário de topo ou resposta, no formato exposto ao chamador."""

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    id: str = Field(default="", description="Identificador do comentário na plataforma.")
    author: str = Field(default="Unknown", description="Nome de exibição do autor.")
    text: str = Field(default="", description="Texto do comentário em texto puro.")
    published_at: str = Field(
        default="",
        alias="publishedAt",
        description="Timestamp ISO 8601 de publicação.",
    )
    like_count: int = Field(default=0, ge=0, alias="likeCount", description="Total de likes.")
    replies: tuple[Comment, ...] = Field(
        default=(),
        description="Respostas na ordem recebida (vazio para respostas).",
    )


class CommentPage(BaseModel):
    """Uma página de commentThreads.list já mapeada."""

    model_config = ConfigDict(frozen=True)

    comments: tuple[Comment, ...] = ()
    next_page_token: str | None = None


class VideoMetadata(BaseModel):
    """Metadados mínimos do vídeo usados na agregação."""

    model_config = ConfigDict(frozen=True)

    video_id: str
    title: str = "Unknown Title"
    comment_count: int = Field(default=0, ge=0)


class CommentsResult(BaseModel):
    """Resultado final de uma agregação bem-sucedida."""

    model_config = ConfigDict(frozen=True)

    comments: tuple[Comment, ...]
    video_title: str
    total_count: int


__all__ = ["Comment", "CommentPage", "CommentsResult", "VideoMetadata"]
