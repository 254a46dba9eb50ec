"""Rotas HTTP: adapters de entrada.

- health/: liveness e readiness (credencial resolvível)
- youtube/: POST /api/youtube-comments

Rotas só validam a entrada, delegam ao use case e traduzem erros do
domínio em status HTTP.
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
