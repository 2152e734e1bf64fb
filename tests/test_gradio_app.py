"""Unit tests for the markdown renderers behind the Gradio page."""

from __future__ import annotations

from roadmap.grouping import group_by_category
from roadmap.parsers.types import BookRecommendation, BookRecord, ChallengeRecord, RoadmapEntry
from roadmap.pipeline import PageState
from roadmap.timeline import build_timeline
from ui.gradio_app import render_body, render_item, render_status, render_timeline_markdown


def _items():
    return build_timeline(
        [
            ChallengeRecord(
                id="c1", title="英語", category="学習", difficulty=3, priority="高",
                status="進行中", start_date="2024-01-15", timeframe="1年", tags="英語, 会話",
            )
        ],
        [BookRecord(id="b1", title="本", author="著者", category="健康", pages=260, status="読了")],
    )


def test_render_item_shows_dates_and_type_specific_fields() -> None:
    challenge, book = _items()

    text = render_item(challenge)
    assert "課題" in text
    assert "開始: 2024/01/15" in text
    assert "期間: 1年" in text
    assert "#英語 #会話" in text
    assert "難易度: 3/5" in text

    text = render_item(book)
    assert "書籍" in text
    assert "著者: 著者" in text
    assert "ページ数: 260ページ" in text


def test_empty_timeline_message() -> None:
    assert "(0件)" in render_timeline_markdown([])
    assert "見つかりませんでした" in render_timeline_markdown([])


def test_render_body_applies_filters() -> None:
    state = PageState(status="ready", items=_items())

    assert "(2件)" in render_body(state)
    assert "(1件)" in render_body(state, category="健康")
    assert "(0件)" in render_body(state, category="健康", status="進行中")


def test_render_body_grouped() -> None:
    groups = group_by_category(
        [RoadmapEntry(id="r1", title="転職", category="キャリア", start_date="2024-04-01")],
        [BookRecommendation(id="b1", title="転職の思考法", url="https://example.com", category="キャリア")],
    )
    state = PageState(status="ready", groups=groups)

    text = render_body(state, grouped=True)

    assert "## キャリア" in text
    assert "[転職の思考法](https://example.com)" in text


def test_render_status_terminal_states() -> None:
    assert "読み込み中" in render_status(PageState(status="loading"))
    assert "boom" in render_status(PageState(status="error", message="boom"))
    assert "roadmap_csv_url" in render_status(
        PageState(status="empty", banner=True, message="CSV source is not configured: roadmap_csv_url")
    )
    assert render_status(PageState(status="ready")) == ""
    assert render_body(PageState(status="error", message="boom")) == ""
