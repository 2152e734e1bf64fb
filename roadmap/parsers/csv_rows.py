from __future__ import annotations
import io
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

import pandas as pd

from ..errors import ParseError

log = logging.getLogger("csv_rows")


class ParsePolicy(str, Enum):
    WARN = "warn"      # log structural problems, keep best-effort rows
    STRICT = "strict"  # first structural problem fails the whole dataset


@dataclass
class CsvParseResult:
    rows: List[Dict[str, Any]]
    issues: List[str] = field(default_factory=list)


def _read_options() -> dict:
    # Everything stays a string; the normalizer owns type coercion.
    # The header row is read as data so pandas never guesses an index column.
    return dict(
        header=None,
        dtype=str,
        keep_default_na=False,
        skip_blank_lines=True,
        engine="python",
    )


def read_csv_rows(text: Optional[str]) -> CsvParseResult:
    """
    Parse CSV text with a mandatory header row into dict rows keyed by the
    stripped header names. Rows wider than the header are truncated and
    reported in `issues`, as are repeated header names. Raises ParseError
    only when the text cannot be tokenized at all.
    """
    if not text or not text.strip():
        return CsvParseResult(rows=[])
    text = text.lstrip("\ufeff")

    try:
        width = pd.read_csv(io.StringIO(text), nrows=1, **_read_options()).shape[1]
    except pd.errors.EmptyDataError:
        return CsvParseResult(rows=[])
    except pd.errors.ParserError as e:
        raise ParseError(f"Failed to parse CSV data: {e}") from e

    issues: List[str] = []

    def on_bad_line(bad_line: List[str]) -> List[str]:
        issues.append(f"Too many fields: expected {width} fields but parsed {len(bad_line)}")
        return bad_line[:width]

    try:
        df = pd.read_csv(io.StringIO(text), on_bad_lines=on_bad_line, **_read_options())
    except pd.errors.EmptyDataError:
        return CsvParseResult(rows=[], issues=issues)
    except pd.errors.ParserError as e:
        raise ParseError(f"Failed to parse CSV data: {e}", issues=issues + [str(e)]) from e

    header = [str(c).strip() for c in df.iloc[0]]
    # first occurrence of a repeated header name wins
    keep: List[int] = []
    header_issues: List[str] = []
    for i, name in enumerate(header):
        if name in header[:i]:
            header_issues.append(f"Duplicate header: {name!r} (column {i + 1} ignored)")
        else:
            keep.append(i)
    issues[:0] = header_issues

    data = df.iloc[1:, keep].set_axis([header[i] for i in keep], axis=1)
    # short rows come back padded with NaN
    data = data.astype(object).where(data.notna(), None)
    return CsvParseResult(rows=data.to_dict(orient="records"), issues=issues)


def parse_csv_rows(text: Optional[str], policy: ParsePolicy = ParsePolicy.WARN) -> List[Dict[str, Any]]:
    result = read_csv_rows(text)
    if result.issues:
        if ParsePolicy(policy) is ParsePolicy.STRICT:
            raise ParseError(result.issues[0], issues=result.issues)
        log.warning(f"CSV parsing warnings ({len(result.issues)}): {result.issues[:5]}")
    return result.rows
