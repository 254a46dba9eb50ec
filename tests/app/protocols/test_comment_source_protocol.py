"""Testes do contrato de fonte de comentários."""

from __future__ import annotations

from unittest.mock import MagicMock

from app.infra.youtube import YouTubeCommentsClient
from app.protocols.comment_source import CommentSourceProtocol


def test_youtube_client_satisfies_protocol() -> None:
    assert isinstance(YouTubeCommentsClient(MagicMock()), CommentSourceProtocol)


def test_object_without_methods_does_not_satisfy_protocol() -> None:
    assert not isinstance(object(), CommentSourceProtocol)

