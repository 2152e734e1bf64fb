"""Display helpers shared by the timeline and grouped views: dates, tags, sort weights."""
import re
from datetime import date, datetime
from typing import List, Optional

DATE_FORMATS = ("%Y-%m-%d", "%Y/%m/%d", "%Y.%m.%d")
_ISO_DATETIME = re.compile(r"^(\d{4}-\d{2}-\d{2})[T ]\d{1,2}:\d{2}")

PRIORITY_WEIGHTS = {
    "高": 1, "high": 1,
    "中": 2, "medium": 2,
    "低": 3, "low": 3,
}

STATUS_WEIGHTS = {
    "進行中": 1, "in-progress": 1, "in progress": 1,
    "読書中": 1, "reading": 1,
    "計画中": 2, "planned": 2,
    "完了": 3, "completed": 3,
    "読了": 3, "done": 3,
}

UNKNOWN_WEIGHT = 4


def parse_date(text: Optional[str]) -> Optional[date]:
    """Calendar date or None; never a half-valid value."""
    if not text:
        return None
    s = str(text).strip()
    m = _ISO_DATETIME.match(s)
    if m:
        s = m.group(1)
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(s, fmt).date()
        except ValueError:
            continue
    return None


def parse_tags_string(text: Optional[str]) -> List[str]:
    if not text:
        return []
    return [t.strip() for t in text.split(",") if t.strip()]


def _label_key(label: Optional[str]) -> str:
    return (label or "").strip().lower()


def priority_weight(label: Optional[str]) -> int:
    return PRIORITY_WEIGHTS.get(_label_key(label), UNKNOWN_WEIGHT)


def status_weight(label: Optional[str]) -> int:
    return STATUS_WEIGHTS.get(_label_key(label), UNKNOWN_WEIGHT)


def format_date(d: Optional[date]) -> str:
    return d.strftime("%Y/%m/%d") if d else ""
