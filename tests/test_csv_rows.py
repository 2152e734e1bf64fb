"""Unit tests for CSV row parsing and parse policies."""

from __future__ import annotations

import pytest

from roadmap.errors import ParseError
from roadmap.parsers.csv_rows import ParsePolicy, parse_csv_rows, read_csv_rows


def test_header_names_are_stripped() -> None:
    rows = parse_csv_rows(" id , title \n1,a\n")

    assert rows == [{"id": "1", "title": "a"}]


def test_empty_lines_are_skipped() -> None:
    rows = parse_csv_rows("id,title\n\n1,a\n\n2,b\n\n")

    assert [r["id"] for r in rows] == ["1", "2"]


def test_values_stay_strings() -> None:
    rows = parse_csv_rows("id,pages,difficulty\n007,260,3\n")

    assert rows[0] == {"id": "007", "pages": "260", "difficulty": "3"}


def test_quoted_commas_stay_in_one_field() -> None:
    rows = parse_csv_rows('id,title,tags\n1,a,"x, y"\n')

    assert rows[0]["tags"] == "x, y"


def test_short_rows_are_padded_with_none() -> None:
    rows = parse_csv_rows("id,title,tags\n1,a\n")

    assert rows[0]["id"] == "1"
    assert rows[0]["tags"] is None


def test_blank_input_yields_no_rows() -> None:
    assert parse_csv_rows("") == []
    assert parse_csv_rows("   \n") == []
    assert parse_csv_rows(None) == []


def test_header_only_yields_no_rows() -> None:
    assert parse_csv_rows("id,title\n") == []


def test_byte_order_mark_is_ignored() -> None:
    rows = parse_csv_rows("\ufeffid,title\n1,a\n")

    assert "id" in rows[0]


def test_warn_policy_keeps_best_effort_rows() -> None:
    text = "id,title\n1,a,extra\n2,b\n"

    rows = parse_csv_rows(text, ParsePolicy.WARN)

    assert rows == [{"id": "1", "title": "a"}, {"id": "2", "title": "b"}]


def test_issues_are_reported() -> None:
    result = read_csv_rows("id,title\n1,a,extra\n")

    assert len(result.issues) == 1
    assert "expected 2 fields" in result.issues[0]


def test_strict_policy_fails_with_first_issue() -> None:
    text = "id,title\n1,a,extra\n2,b,c,d\n"

    with pytest.raises(ParseError) as excinfo:
        parse_csv_rows(text, ParsePolicy.STRICT)

    assert "parsed 3" in str(excinfo.value)
    assert len(excinfo.value.issues) == 2


def test_policy_accepts_plain_strings() -> None:
    with pytest.raises(ParseError):
        parse_csv_rows("id,title\n1,a,extra\n", "strict")


def test_duplicate_header_keeps_first_column_and_reports_issue() -> None:
    result = read_csv_rows("id,id,title\n1,2,a\n")

    assert result.rows == [{"id": "1", "title": "a"}]
    assert result.issues == ["Duplicate header: 'id' (column 2 ignored)"]


def test_duplicate_header_fails_under_strict_policy() -> None:
    with pytest.raises(ParseError) as excinfo:
        parse_csv_rows("id,title,title\n1,a,b\n", ParsePolicy.STRICT)

    assert "Duplicate header" in str(excinfo.value)
