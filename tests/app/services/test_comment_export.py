"""Testes do achatamento de comentários para exportação."""

from __future__ import annotations

from collections.abc import Iterator
from zoneinfo import ZoneInfo

import pytest

from app.domain.comment import Comment
from app.services import export_filename, flatten_comments
from app.services.comment_export import EXPORT_COLUMNS, clean_text, localize_timestamp
from config.settings import youtube as youtube_settings


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.delenv("EXPORT_TIMEZONE", raising=False)
    youtube_settings.get_youtube_settings.cache_clear()
    yield
    youtube_settings.get_youtube_settings.cache_clear()


def _comment(cid: str, author: str, replies: tuple[Comment, ...] = ()) -> Comment:
    return Comment(
        id=cid,
        author=author,
        text=f"text {cid}",
        published_at="2024-05-01T12:00:00Z",
        like_count=2,
        replies=replies,
    )


def test_rows_follow_parent_then_replies_order() -> None:
    comments = [
        _comment("a", "alice", (_comment("a1", "bob"), _comment("a2", "carol"))),
        _comment("b", "dave"),
        _comment("c", "erin", (_comment("c1", "frank"),)),
    ]

    rows = flatten_comments(comments)

    assert len(rows) == 3 + 2 + 1
    assert [(r.type, r.author, r.reply_to) for r in rows] == [
        ("Comment", "alice", ""),
        ("Reply", "bob", "alice"),
        ("Reply", "carol", "alice"),
        ("Comment", "dave", ""),
        ("Comment", "erin", ""),
        ("Reply", "frank", "erin"),
    ]


def test_empty_input_yields_no_rows() -> None:
    assert flatten_comments([]) == []


def test_row_as_dict_uses_export_columns() -> None:
    row = flatten_comments([_comment("a", "alice")])[0]

    assert row.as_dict() == {
        "Type": "Comment",
        "Author": "alice",
        "Text": "text a",
        "Published At": "2024-05-01 12:00:00",
        "Like Count": 2,
        "Reply To": "",
    }
    assert tuple(row.as_dict()) == EXPORT_COLUMNS


def test_text_newlines_are_flattened() -> None:
    assert clean_text("line one\r\nline two\nend") == "line one line two end"


def test_timestamps_are_localized() -> None:
    comment = _comment("a", "alice")

    rows = flatten_comments([comment], zone=ZoneInfo("America/Sao_Paulo"))

    assert rows[0].published_at == "2024-05-01 09:00:00"


def test_default_zone_comes_from_export_timezone(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXPORT_TIMEZONE", "America/Sao_Paulo")
    youtube_settings.get_youtube_settings.cache_clear()

    rows = flatten_comments([_comment("a", "alice")])

    assert rows[0].published_at == "2024-05-01 09:00:00"


def test_default_zone_is_utc_without_configuration() -> None:
    rows = flatten_comments([_comment("a", "alice")])

    assert rows[0].published_at == "2024-05-01 12:00:00"


def test_invalid_timestamp_passes_through() -> None:
    assert localize_timestamp("not-a-date") == "not-a-date"
    assert localize_timestamp("") == ""


def test_naive_timestamp_is_treated_as_utc() -> None:
    assert localize_timestamp("2024-01-02T03:04:05") == "2024-01-02 03:04:05"


def test_export_filename_is_sanitized() -> None:
    assert export_filename("My Video: Part 2!") == "my_video__part_2__comments.csv"
    assert export_filename("Unknown Title") == "unknown_title_comments.csv"
