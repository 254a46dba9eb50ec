"""Composição dos routers expostos pelo app."""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.health.router import router as health_router
from api.routes.youtube.router import router as youtube_router

API_PREFIX = "/api"


def create_api_router() -> APIRouter:
    """Router raiz: health checks sem prefixo, coleta sob `/api`."""
    api_router = APIRouter()
    api_router.include_router(health_router, tags=["health"])
    api_router.include_router(youtube_router, prefix=API_PREFIX, tags=["youtube"])
    return api_router
