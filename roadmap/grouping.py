from typing import Dict, List, Sequence

from pydantic import BaseModel, Field

from .parsers.types import BookRecommendation, RoadmapEntry

UNCATEGORIZED = "未分類"


class CategoryGroup(BaseModel):
    category: str
    entries: List[RoadmapEntry] = Field(default_factory=list)
    books: List[BookRecommendation] = Field(default_factory=list)


def group_by_category(
    entries: Sequence[RoadmapEntry], books: Sequence[BookRecommendation]
) -> List[CategoryGroup]:
    """
    One group per category, in order of first appearance: roadmap categories
    first, then categories that only have book recommendations.
    """
    groups: Dict[str, CategoryGroup] = {}

    def _group(category: str) -> CategoryGroup:
        key = category or UNCATEGORIZED
        if key not in groups:
            groups[key] = CategoryGroup(category=key)
        return groups[key]

    for e in entries:
        _group(e.category).entries.append(e)
    for b in books:
        _group(b.category).books.append(b)
    return list(groups.values())
