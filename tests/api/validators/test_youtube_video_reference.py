"""Testes da resolução de referências de vídeo do YouTube."""

from __future__ import annotations

import pytest

from api.validators.youtube import is_video_id, resolve_video_reference
from utils.errors import (
    EmptyVideoReferenceError,
    InvalidVideoReferenceError,
    VideoReferenceError,
)

VIDEO_ID = "dQw4w9WgXcQ"


@pytest.mark.parametrize(
    "raw",
    [
        VIDEO_ID,
        f"  {VIDEO_ID}  ",
        f"https://www.youtube.com/watch?v={VIDEO_ID}",
        f"https://www.youtube.com/watch?v={VIDEO_ID}&t=42s",
        f"https://m.youtube.com/watch?v={VIDEO_ID}#comments",
        f"https://youtu.be/{VIDEO_ID}",
        f"https://youtu.be/{VIDEO_ID}?si=share-token",
        f"https://www.youtube.com/embed/{VIDEO_ID}",
        f"https://www.youtube.com/embed/{VIDEO_ID}?autoplay=1",
        f"https://www.youtube.com/v/{VIDEO_ID}",
        f"https://www.youtube.com/watch?feature=share&v={VIDEO_ID}",
    ],
)
def test_all_url_forms_resolve_to_same_id(raw: str) -> None:
    assert resolve_video_reference(raw) == VIDEO_ID


def test_id_with_dash_and_underscore_is_kept_verbatim() -> None:
    assert resolve_video_reference("a-b_c-d_e-f") == "a-b_c-d_e-f"


@pytest.mark.parametrize("raw", ["", "   ", "\t\n", None])
def test_empty_input_raises_empty_error(raw: str | None) -> None:
    with pytest.raises(EmptyVideoReferenceError):
        resolve_video_reference(raw)


@pytest.mark.parametrize(
    "raw",
    [
        "not a url",
        "https://vimeo.com/123456",
        "dQw4w9WgXc",  # 10 caracteres
        "https://www.youtube.com/channel/UC1234567890",
    ],
)
def test_unrecognized_input_raises_invalid_error(raw: str) -> None:
    with pytest.raises(InvalidVideoReferenceError):
        resolve_video_reference(raw)


def test_first_matching_pattern_wins_even_when_its_capture_is_invalid() -> None:
    # watch?v= casa com o primeiro padrão; o v= válido depois não é considerado
    raw = f"https://www.youtube.com/watch?v=short&v={VIDEO_ID}"

    with pytest.raises(InvalidVideoReferenceError):
        resolve_video_reference(raw)


def test_resolution_is_idempotent() -> None:
    first = resolve_video_reference(f"https://youtu.be/{VIDEO_ID}")
    assert resolve_video_reference(first) == first


def test_errors_share_validation_base_and_messages() -> None:
    with pytest.raises(VideoReferenceError) as empty:
        resolve_video_reference("")
    with pytest.raises(VideoReferenceError) as invalid:
        resolve_video_reference("not a url")

    assert empty.value.message == "YouTube URL cannot be empty"
    assert "Invalid YouTube URL" in invalid.value.message


def test_is_video_id() -> None:
    assert is_video_id(VIDEO_ID)
    assert not is_video_id(VIDEO_ID + "x")
    assert not is_video_id("abc def ghi")
