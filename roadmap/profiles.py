from enum import Enum
from typing import Dict, Type

from pydantic import BaseModel

from .parsers.types import BookRecommendation, BookRecord, ChallengeRecord, RoadmapEntry


class SchemaProfile(str, Enum):
    """Known CSV layouts. The two roadmap (and two books) layouts are incompatible."""

    ROADMAP_TIMELINE = "roadmap_timeline"
    ROADMAP_GROUPED = "roadmap_grouped"
    BOOKS_TIMELINE = "books_timeline"
    BOOKS_GROUPED = "books_grouped"

    @property
    def model(self) -> Type[BaseModel]:
        return _MODELS[self]

    @property
    def columns(self) -> Dict[str, str]:
        """CSV header -> record field."""
        return _COLUMNS[self]


def _same(*names: str) -> Dict[str, str]:
    return {n: n for n in names}


_MODELS = {
    SchemaProfile.ROADMAP_TIMELINE: ChallengeRecord,
    SchemaProfile.ROADMAP_GROUPED: RoadmapEntry,
    SchemaProfile.BOOKS_TIMELINE: BookRecord,
    SchemaProfile.BOOKS_GROUPED: BookRecommendation,
}

_COLUMNS = {
    SchemaProfile.ROADMAP_TIMELINE: _same(
        "id", "title", "category", "difficulty", "timeframe", "priority",
        "description", "start_date", "end_date", "status", "tags",
    ),
    SchemaProfile.ROADMAP_GROUPED: {
        "id": "id",
        "title": "title",
        "description": "description",
        "startDate": "start_date",
        "endDate": "end_date",
        "category": "category",
    },
    SchemaProfile.BOOKS_TIMELINE: _same(
        "id", "title", "author", "category", "difficulty", "pages",
        "estimated_reading_time", "priority", "description", "status",
        "start_date", "end_date", "tags", "url",
    ),
    SchemaProfile.BOOKS_GROUPED: _same("id", "title", "author", "url", "category"),
}
