"""Modelos de domínio compartilhados entre serviços e infra."""

from app.domain.comment import Comment, CommentPage, CommentsResult, VideoMetadata

__all__ = ["Comment", "CommentPage", "CommentsResult", "VideoMetadata"]
