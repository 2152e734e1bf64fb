import logging
import math
import re
import typing
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional

from pydantic import BaseModel

from .profiles import SchemaProfile

log = logging.getLogger("normalizer")

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


# ---------------------
# Per-field coercions (total: never raise)
# ---------------------
def _is_missing(value: Any) -> bool:
    return value is None or (isinstance(value, float) and math.isnan(value))


def coerce_str(value: Any) -> str:
    if _is_missing(value):
        return ""
    return str(value).strip()


def coerce_optional_str(value: Any) -> Optional[str]:
    return coerce_str(value) or None


def coerce_tags(value: Any) -> str:
    # non-string tag cells (numbers, NaN) are dropped rather than stringified
    if not isinstance(value, str):
        return ""
    return value.strip()


def coerce_int(value: Any, default: int = 0) -> int:
    """Base-10 integer from the leading digits of value; default on anything else."""
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return default
        return int(value)
    if not isinstance(value, str):
        return default
    m = _INT_PREFIX.match(value)
    if not m:
        return default
    try:
        return int(m.group(1))
    except ValueError:
        return default


def _coercer_for(field_name: str, annotation: Any) -> Callable[[Any], Any]:
    if field_name == "tags":
        return coerce_tags
    if annotation is int:
        return coerce_int
    if type(None) in typing.get_args(annotation):
        return coerce_optional_str
    return coerce_str


_COERCERS: Dict[SchemaProfile, Dict[str, Callable[[Any], Any]]] = {
    profile: {
        name: _coercer_for(name, f.annotation)
        for name, f in profile.model.model_fields.items()
    }
    for profile in SchemaProfile
}


# ---------------------
# Row normalization
# ---------------------
def normalize_row(row: Mapping[str, Any], profile: SchemaProfile) -> Optional[BaseModel]:
    """
    Shape one loosely-typed CSV row into the profile's record.
    Returns None when id or title is empty; such rows are dropped, not errors.
    Accepts either CSV header keys or record field names, so normalizing a
    dumped record gives the same record back.
    """
    coercers = _COERCERS[profile]
    values: Dict[str, Any] = {}
    for header, field_name in profile.columns.items():
        if header in row:
            raw = row[header]
        else:
            raw = row.get(field_name)
        values[field_name] = coercers[field_name](raw)

    if not values["id"] or not values["title"]:
        return None
    return profile.model(**values)


def normalize_rows(rows: Iterable[Mapping[str, Any]], profile: SchemaProfile) -> List[BaseModel]:
    records: List[BaseModel] = []
    dropped = 0
    for i, row in enumerate(rows):
        rec = normalize_row(row, profile)
        if rec is None:
            dropped += 1
            log.debug(f"Dropping row {i} ({profile.value}): missing id or title")
            continue
        records.append(rec)
    if dropped:
        log.info(f"Dropped {dropped} row(s) without id/title from {profile.value}")
    return records
