"""Contrato da fonte de comentários usada pela agregação.

Mantemos apenas o protocolo aqui para que o agregador dependa da
capacidade (página + metadados), não do client Google concreto.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from app.domain.comment import CommentPage, VideoMetadata


@runtime_checkable
class CommentSourceProtocol(Protocol):
    """Operações consumidas da plataforma de comentários."""

    async def get_video(self, video_id: str) -> VideoMetadata | None:
        """Retorna metadados do vídeo ou None se não existir/estiver privado."""
        ...

    async def fetch_page(
        self,
        video_id: str,
        page_size: int,
        page_token: str | None = None,
    ) -> CommentPage:
        """Busca uma página de comentários de topo com respostas pré-carregadas."""
        ...
