"""Extrator de payloads YouTube Data API.

Estruturas tratadas:
- commentThreads.list(part="snippet,replies"): cada item traz
  snippet.topLevelComment e, opcionalmente, replies.comments
- videos.list(part="snippet,statistics")
"""

from __future__ import annotations

from typing import Any


def extract_thread_items(payload: dict[str, Any]) -> list[dict[str, Any]]:
    """Retorna os itens de commentThreads.list, ignorando entradas malformadas."""
    items = payload.get("items") if isinstance(payload, dict) else None
    if not isinstance(items, list):
        return []
    return [item for item in items if isinstance(item, dict)]


def extract_top_level_snippet(item: dict[str, Any]) -> dict[str, Any]:
    snippet = item.get("snippet")
    top_level = snippet.get("topLevelComment") if isinstance(snippet, dict) else None
    inner = top_level.get("snippet") if isinstance(top_level, dict) else None
    return inner if isinstance(inner, dict) else {}


def extract_reply_items(item: dict[str, Any]) -> list[dict[str, Any]]:
    """Respostas pré-carregadas pela API, na ordem recebida."""
    replies = item.get("replies")
    comments = replies.get("comments") if isinstance(replies, dict) else None
    if not isinstance(comments, list):
        return []
    return [reply for reply in comments if isinstance(reply, dict)]


def extract_next_page_token(payload: dict[str, Any]) -> str | None:
    token = payload.get("nextPageToken") if isinstance(payload, dict) else None
    return token if isinstance(token, str) and token else None


def extract_first_video(payload: dict[str, Any]) -> dict[str, Any] | None:
    """Primeiro item de videos.list, ou None se o vídeo não existe ou está privado."""
    items = payload.get("items") if isinstance(payload, dict) else None
    if not isinstance(items, list) or not items or not isinstance(items[0], dict):
        return None
    return items[0]
