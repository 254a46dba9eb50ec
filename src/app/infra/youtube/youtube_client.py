"""Client concreto da YouTube Data API v3 para páginas de comentários."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any

from api.normalizers.youtube import normalize_comment_page, normalize_video
from app.infra.youtube.youtube_errors import classify_fetch_error
from app.observability import get_correlation_id
from app.protocols.comment_source import CommentSourceProtocol
from config.settings.youtube import YOUTUBE_MAX_PAGE_SIZE

if TYPE_CHECKING:
    from app.domain.comment import CommentPage, VideoMetadata

logger = logging.getLogger(__name__)

_COMPONENT = "youtube_comments_client"


def clamp_page_size(page_size: int) -> int:
    """Limita o tamanho pedido ao teto da API (1..100)."""
    return max(1, min(page_size, YOUTUBE_MAX_PAGE_SIZE))


class YouTubeCommentsClient(CommentSourceProtocol):
    """Implementação do protocolo de comentários sobre googleapiclient.

    Cada chamada é única e sem retry; a política de retentativa pertence
    ao agregador. O `execute()` bloqueante roda em thread e é limitado
    por timeout explícito.
    """

    __slots__ = ("_service", "_timeout_seconds")

    def __init__(self, service: Any, *, timeout_seconds: float = 30.0) -> None:
        self._service = service
        self._timeout_seconds = timeout_seconds

    async def get_video(self, video_id: str) -> VideoMetadata | None:
        request = self._service.videos().list(part="snippet,statistics", id=video_id)
        payload = await self._execute(request, action="get_video", video_id=video_id)
        return normalize_video(payload, video_id)

    async def fetch_page(
        self,
        video_id: str,
        page_size: int,
        page_token: str | None = None,
    ) -> CommentPage:
        params: dict[str, Any] = {
            "part": "snippet,replies",
            "videoId": video_id,
            "maxResults": clamp_page_size(page_size),
            "order": "relevance",
            "textFormat": "plainText",
        }
        if page_token:
            params["pageToken"] = page_token
        request = self._service.commentThreads().list(**params)
        payload = await self._execute(request, action="fetch_page", video_id=video_id)
        return normalize_comment_page(payload)

    async def _execute(self, request: Any, *, action: str, video_id: str) -> dict[str, Any]:
        try:
            return await asyncio.wait_for(
                asyncio.to_thread(request.execute),
                timeout=self._timeout_seconds,
            )
        except asyncio.CancelledError:
            raise
        except Exception as exc:
            error = classify_fetch_error(exc)
            logger.warning(
                "youtube_http_error",
                extra={
                    "component": _COMPONENT,
                    "action": action,
                    "result": "error",
                    "video_id": video_id,
                    "status_code": error.status_code,
                    "error_type": type(error).__name__,
                    "correlation_id": get_correlation_id(),
                },
            )
            raise error from exc

