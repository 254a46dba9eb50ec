"""Rotas HTTP do canal YouTube."""

from api.routes.youtube.router import router

__all__ = ["router"]
