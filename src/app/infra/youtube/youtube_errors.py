"""Classificação de falhas da YouTube Data API na taxonomia do domínio."""

from __future__ import annotations

from googleapiclient.errors import HttpError

from utils.errors import (
    CommentsNotFoundError,
    FetchError,
    QuotaOrAuthError,
    TransientFetchError,
)


def http_status(exc: HttpError) -> int | None:
    response = getattr(exc, "resp", None)
    status = getattr(response, "status", None)
    try:
        return int(status) if status is not None else None
    except (TypeError, ValueError):
        return None


def classify_fetch_error(exc: BaseException) -> FetchError:
    """403 -> quota/auth, 404 -> not found, qualquer outra falha -> transitória."""
    if isinstance(exc, FetchError):
        return exc
    if isinstance(exc, HttpError):
        status = http_status(exc)
        if status == 403:
            return QuotaOrAuthError(status_code=status)
        if status == 404:
            return CommentsNotFoundError(status_code=status)
        return TransientFetchError(status_code=status)
    if isinstance(exc, TimeoutError):
        return TransientFetchError("YouTube API request timed out")
    return TransientFetchError()
