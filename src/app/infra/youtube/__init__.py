"""Infra YouTube: credencial de service account e client da Data API."""

from __future__ import annotations

from app.infra.youtube.credentials import (
    ServiceAccountCredential,
    resolve_service_account,
)
from app.infra.youtube.youtube_client import YouTubeCommentsClient, clamp_page_size
from app.infra.youtube.youtube_errors import classify_fetch_error

__all__ = [
    "ServiceAccountCredential",
    "YouTubeCommentsClient",
    "clamp_page_size",
    "classify_fetch_error",
    "resolve_service_account",
]
