"""Normalizers: conversão de payloads externos para modelos internos.

Estrutura:
- youtube/: commentThreads.list e videos.list da YouTube Data API v3

Cada fonte tem seu próprio extractor e normalizer, mantendo SRP.
"""

from .youtube import normalize_comment_page, normalize_video

__all__ = [
    "normalize_comment_page",
    "normalize_video",
]
