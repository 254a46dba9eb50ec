"""Agregação paginada de comentários de um vídeo.

Máquina de estados de caminho único:
1. Lookup do vídeo (uma vez); inexistente/privado ou zero comentários encerra.
2. Loop de páginas até o orçamento, página vazia ou ausência de nextPageToken.
3. Pausa fixa entre páginas (nunca antes da primeira).
4. Conclusão com comentários na ordem recebida, título e contagem real.

Páginas são estritamente sequenciais: cada token depende da resposta anterior.
"""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from app.domain.comment import Comment, CommentsResult
from app.observability import get_correlation_id, record_comment_volume, record_latency
from config.logging import log_backoff
from config.settings.youtube import YOUTUBE_MAX_PAGE_SIZE, YouTubeSettings
from utils.errors import (
    CommentsDisabledError,
    CommentsNotFoundError,
    FetchError,
    PartialAggregationError,
    TransientFetchError,
    VideoNotFoundError,
)

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from app.domain.comment import CommentPage, VideoMetadata
    from app.protocols.comment_source import CommentSourceProtocol

_COMPONENT = "comment_aggregator"


@dataclass
class FetchSession:
    """Estado efêmero de uma chamada de agregação (nunca persistido)."""

    video_id: str
    target_count: int
    accumulated: list[Comment] = field(default_factory=list)
    next_page_token: str | None = None
    fetched_count: int = 0

    @property
    def remaining(self) -> int:
        return self.target_count - len(self.accumulated)

    @property
    def reply_count(self) -> int:
        return sum(len(comment.replies) for comment in self.accumulated)


class CommentAggregator:
    """Conduz a fonte de comentários página a página até o orçamento.

    Args:
        source: Fonte de páginas e metadados (client da Data API).
        settings: Ritmo de paginação e política de retry.
        logger: Logger estruturado injetado; padrão é o logger do módulo.
        sleep: Corrotina de espera, substituível em testes.
    """

    def __init__(
        self,
        source: CommentSourceProtocol,
        settings: YouTubeSettings | None = None,
        *,
        logger: logging.Logger | None = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        self._source = source
        self._settings = settings or YouTubeSettings()
        self._logger = logger or logging.getLogger(__name__)
        self._sleep = sleep

    async def aggregate(self, video_id: str, target_count: int) -> CommentsResult:
        """Busca até `target_count` comentários de topo com suas respostas.

        Raises:
            ValueError: Orçamento menor que 1.
            VideoNotFoundError: Vídeo inexistente, privado ou inacessível.
            CommentsDisabledError: Estatística de comentários igual a zero.
            PartialAggregationError: Falha após ao menos uma página com sucesso.
            FetchError: Falha classificada no lookup ou na primeira página.
        """
        if target_count < 1:
            raise ValueError(f"target_count deve ser >= 1, recebido {target_count}")

        started_at = time.perf_counter()
        video = await self._lookup(video_id)
        session = FetchSession(video_id=video_id, target_count=target_count)
        delay = self._settings.page_delay_for(target_count)

        try:
            while session.remaining > 0:
                if session.fetched_count:
                    await self._sleep(delay)
                page = await self._fetch_page(session)
                session.fetched_count += 1
                session.accumulated.extend(page.comments[: session.remaining])
                self._logger.debug(
                    "youtube_page_fetched",
                    extra={
                        "component": _COMPONENT,
                        "video_id": video_id,
                        "page": session.fetched_count,
                        "page_items": len(page.comments),
                        "accumulated": len(session.accumulated),
                        "has_next_page": page.next_page_token is not None,
                    },
                )
                if not page.comments or page.next_page_token is None:
                    break
                session.next_page_token = page.next_page_token
        except FetchError as exc:
            self._log_failure(session, exc)
            if session.fetched_count:
                raise PartialAggregationError(
                    exc,
                    partial_comments=list(session.accumulated),
                    video_title=video.title,
                ) from exc
            raise

        self._log_completion(session, started_at)
        return CommentsResult(
            comments=tuple(session.accumulated),
            video_title=video.title,
            total_count=len(session.accumulated),
        )

    async def _lookup(self, video_id: str) -> VideoMetadata:
        try:
            video = await self._source.get_video(video_id)
        except CommentsNotFoundError as exc:
            raise VideoNotFoundError from exc
        if video is None:
            self._logger.info(
                "youtube_video_not_found",
                extra={"component": _COMPONENT, "video_id": video_id, "result": "not_found"},
            )
            raise VideoNotFoundError
        if video.comment_count == 0:
            self._logger.info(
                "youtube_comments_disabled",
                extra={"component": _COMPONENT, "video_id": video_id, "result": "empty"},
            )
            raise CommentsDisabledError
        return video

    async def _fetch_page(self, session: FetchSession) -> CommentPage:
        page_size = min(YOUTUBE_MAX_PAGE_SIZE, session.remaining)
        attempt = 0
        while True:
            try:
                return await self._source.fetch_page(
                    session.video_id,
                    page_size,
                    session.next_page_token,
                )
            except TransientFetchError as exc:
                if attempt >= self._settings.max_retries:
                    raise
                backoff = min(
                    (2**attempt) * self._settings.backoff_base_seconds,
                    self._settings.backoff_max_seconds,
                )
                log_backoff(self._logger, _COMPONENT, attempt, backoff, type(exc).__name__)
                await self._sleep(backoff)
                attempt += 1

    def _log_completion(self, session: FetchSession, started_at: float) -> None:
        correlation_id = get_correlation_id()
        self._logger.info(
            "youtube_aggregation_completed",
            extra={
                "component": _COMPONENT,
                "result": "ok",
                "video_id": session.video_id,
                "target_count": session.target_count,
                "total_count": len(session.accumulated),
                "pages": session.fetched_count,
            },
        )
        record_latency(
            _COMPONENT,
            "aggregate",
            (time.perf_counter() - started_at) * 1000,
            correlation_id,
        )
        record_comment_volume(
            session.video_id,
            session.fetched_count,
            len(session.accumulated),
            session.reply_count,
            correlation_id,
        )

    def _log_failure(self, session: FetchSession, exc: FetchError) -> None:
        self._logger.warning(
            "youtube_aggregation_failed",
            extra={
                "component": _COMPONENT,
                "result": "partial" if session.fetched_count else "error",
                "video_id": session.video_id,
                "pages": session.fetched_count,
                "accumulated": len(session.accumulated),
                "error_type": type(exc).__name__,
                "status_code": exc.status_code,
            },
        )


__all__ = ["CommentAggregator", "FetchSession"]
