"""Normalizer YouTube: converte payloads da Data API para o domínio."""

from __future__ import annotations

from typing import Any

from api.normalizers.youtube.extractor import (
    extract_first_video,
    extract_next_page_token,
    extract_reply_items,
    extract_thread_items,
    extract_top_level_snippet,
)
from app.domain.comment import Comment, CommentPage, VideoMetadata


def normalize_comment_page(payload: dict[str, Any]) -> CommentPage:
    """Mapeia commentThreads.list para CommentPage preservando a ordem."""
    comments = tuple(_map_thread(item) for item in extract_thread_items(payload))
    return CommentPage(comments=comments, next_page_token=extract_next_page_token(payload))


def normalize_video(payload: dict[str, Any], video_id: str) -> VideoMetadata | None:
    """Mapeia videos.list para VideoMetadata (None se não houver item)."""
    item = extract_first_video(payload)
    if item is None:
        return None
    snippet = item.get("snippet") if isinstance(item.get("snippet"), dict) else {}
    statistics = item.get("statistics") if isinstance(item.get("statistics"), dict) else {}
    return VideoMetadata(
        video_id=str(item.get("id") or video_id),
        title=str(snippet.get("title") or "Unknown Title"),
        comment_count=_as_count(statistics.get("commentCount")),
    )


def _map_thread(item: dict[str, Any]) -> Comment:
    comment = _map_snippet(str(item.get("id") or ""), extract_top_level_snippet(item))
    replies = tuple(
        _map_snippet(
            str(reply.get("id") or ""),
            reply.get("snippet") if isinstance(reply.get("snippet"), dict) else {},
        )
        for reply in extract_reply_items(item)
    )
    return comment.model_copy(update={"replies": replies})


def _map_snippet(comment_id: str, snippet: dict[str, Any]) -> Comment:
    return Comment(
        id=comment_id,
        author=str(snippet.get("authorDisplayName") or "Unknown"),
        text=str(snippet.get("textDisplay") or ""),
        published_at=str(snippet.get("publishedAt") or ""),
        like_count=_as_count(snippet.get("likeCount")),
    )


def _as_count(value: Any) -> int:
    # A API devolve estatísticas como string ("1234") e likeCount como int
    try:
        return max(int(value), 0)
    except (TypeError, ValueError):
        return 0
