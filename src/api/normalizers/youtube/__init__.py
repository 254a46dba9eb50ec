"""Normalizer YouTube: comentários e metadados da YouTube Data API.

Responsabilidades:
- Extrair threads, respostas pré-carregadas e token de página
- Normalizar para Comment/CommentPage/VideoMetadata do domínio
"""

from api.normalizers.youtube.normalizer import normalize_comment_page, normalize_video

__all__ = ["normalize_comment_page", "normalize_video"]
