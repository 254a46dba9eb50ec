"""Testes do use case de coleta de comentários."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from app.domain.comment import CommentsResult
from app.use_cases.youtube import FetchVideoCommentsUseCase
from utils.errors import (
    EmptyVideoReferenceError,
    InvalidVideoReferenceError,
    NoCredentialConfiguredError,
)


def _provider(result: CommentsResult | None = None) -> tuple[MagicMock, AsyncMock]:
    aggregator = MagicMock()
    aggregator.aggregate = AsyncMock(
        return_value=result or CommentsResult(comments=(), video_title="Demo", total_count=0)
    )
    return MagicMock(return_value=aggregator), aggregator.aggregate


@pytest.mark.asyncio
async def test_resolves_reference_before_aggregating() -> None:
    provider, aggregate = _provider()
    use_case = FetchVideoCommentsUseCase(provider)

    result = await use_case.execute("https://youtu.be/dQw4w9WgXcQ?t=42", 150)

    aggregate.assert_awaited_once_with("dQw4w9WgXcQ", 150)
    assert result.video_title == "Demo"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("reference", "error"),
    [("   ", EmptyVideoReferenceError), ("https://example.com", InvalidVideoReferenceError)],
)
async def test_invalid_reference_never_builds_aggregator(
    reference: str,
    error: type[Exception],
) -> None:
    provider, aggregate = _provider()
    use_case = FetchVideoCommentsUseCase(provider)

    with pytest.raises(error):
        await use_case.execute(reference, 100)

    provider.assert_not_called()
    aggregate.assert_not_awaited()


@pytest.mark.asyncio
async def test_provider_errors_propagate_after_validation() -> None:
    provider = MagicMock(side_effect=NoCredentialConfiguredError())
    use_case = FetchVideoCommentsUseCase(provider)

    with pytest.raises(NoCredentialConfiguredError):
        await use_case.execute("dQw4w9WgXcQ", 100)
