"""Use case de coleta de comentários de um vídeo do YouTube."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.validators.youtube import resolve_video_reference

if TYPE_CHECKING:
    from collections.abc import Callable

    from app.domain.comment import CommentsResult
    from app.services.comment_aggregator import CommentAggregator

logger = logging.getLogger(__name__)


class FetchVideoCommentsUseCase:
    """Orquestra resolução da referência e agregação paginada.

    O agregador é obtido só depois da validação da referência, então uma
    URL inválida é reportada mesmo com a credencial mal configurada.
    Erros do domínio propagam sem tradução; a borda HTTP decide a mensagem.
    """

    def __init__(self, aggregator_provider: Callable[[], CommentAggregator]) -> None:
        self._aggregator_provider = aggregator_provider

    async def execute(self, raw_reference: str | None, max_results: int) -> CommentsResult:
        video_id = resolve_video_reference(raw_reference)
        aggregator = self._aggregator_provider()
        logger.info(
            "youtube_comments_requested",
            extra={
                "component": "fetch_video_comments",
                "video_id": video_id,
                "max_results": max_results,
            },
        )
        return await aggregator.aggregate(video_id, max_results)
