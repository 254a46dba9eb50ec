"""Endpoint de coleta de comentários do YouTube.

Valida a referência, encaminha ID e orçamento ao use case e devolve JSON.
Exceções do domínio são traduzidas em status HTTP apenas aqui.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from app.bootstrap import get_fetch_comments_use_case
from config.settings import get_youtube_settings
from utils.errors import (
    AggregationError,
    CredentialError,
    FetchError,
    PartialAggregationError,
    VideoReferenceError,
)

logger = logging.getLogger(__name__)

router = APIRouter()


class YouTubeCommentsRequest(BaseModel):
    """Corpo do POST de coleta."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    url: str | None = Field(default=None, description="URL ou ID do vídeo.")
    max_results: int | None = Field(
        default=None,
        alias="maxResults",
        description="Orçamento de comentários de topo.",
    )


@router.post("/youtube-comments")
async def fetch_youtube_comments(body: YouTubeCommentsRequest) -> JSONResponse:
    """Coleta até `maxResults` comentários de topo com respostas."""
    settings = get_youtube_settings()
    max_results = (
        settings.default_max_results if body.max_results is None else body.max_results
    )
    if not 1 <= max_results <= settings.max_results_limit:
        return _error(f"maxResults must be between 1 and {settings.max_results_limit}", 400)

    try:
        result = await get_fetch_comments_use_case().execute(body.url, max_results)
    except VideoReferenceError as exc:
        return _error(exc.message, 400)
    except CredentialError as exc:
        logger.error(
            "youtube_credentials_misconfigured",
            extra={"component": "youtube_comments_route", "error_type": type(exc).__name__},
        )
        return _error(exc.message, 500)
    except PartialAggregationError as exc:
        payload = {
            "error": exc.message,
            "partial": _result_payload(exc.partial_comments, exc.video_title),
        }
        return JSONResponse(content=payload, status_code=502)
    except (AggregationError, FetchError) as exc:
        return _error(exc.message, 400)

    return JSONResponse(
        content={"success": True, **_result_payload(result.comments, result.video_title)},
        status_code=200,
    )


def _result_payload(comments: Any, video_title: str) -> dict[str, Any]:
    return {
        "comments": [comment.model_dump(by_alias=True) for comment in comments],
        "videoTitle": video_title,
        "totalComments": len(comments),
    }


def _error(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(content={"error": message}, status_code=status_code)
