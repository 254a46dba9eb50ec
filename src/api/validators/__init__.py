"""Validators de entrada do usuário.

Estrutura:
- youtube/: resolução de URL/ID de vídeo
"""

from .youtube import resolve_video_reference

__all__ = ["resolve_video_reference"]
