from datetime import date
from typing import List, Sequence, Tuple

from .ordering import parse_date, parse_tags_string, priority_weight, status_weight
from .parsers.types import BookRecord, ChallengeRecord, TimelineItem

ALL = "all"


def challenge_to_item(c: ChallengeRecord) -> TimelineItem:
    return TimelineItem(
        id=c.id,
        title=c.title,
        category=c.category,
        difficulty=c.difficulty,
        priority=c.priority,
        description=c.description,
        status=c.status,
        start_date=parse_date(c.start_date),
        end_date=parse_date(c.end_date),
        tags=parse_tags_string(c.tags),
        type="challenge",
        timeframe=c.timeframe,
    )


def book_to_item(b: BookRecord) -> TimelineItem:
    return TimelineItem(
        id=b.id,
        title=b.title,
        category=b.category,
        difficulty=b.difficulty,
        priority=b.priority,
        description=b.description,
        status=b.status,
        start_date=parse_date(b.start_date),
        end_date=parse_date(b.end_date),
        tags=parse_tags_string(b.tags),
        type="book",
        author=b.author,
        pages=b.pages,
        url=b.url,
    )


def _sort_key(indexed: Tuple[int, TimelineItem]):
    i, item = indexed
    # dated items first; undated ones tie and fall back to input position
    return (
        status_weight(item.status),
        priority_weight(item.priority),
        item.start_date is None,
        item.start_date or date.min,
        i,
    )


def sort_timeline(items: Sequence[TimelineItem]) -> List[TimelineItem]:
    """Status weight, then priority weight, then start date; ties keep input order."""
    return [item for _, item in sorted(enumerate(items), key=_sort_key)]


def build_timeline(
    challenges: Sequence[ChallengeRecord], books: Sequence[BookRecord]
) -> List[TimelineItem]:
    # ids are only unique per dataset; a challenge and a book may share one
    items = [challenge_to_item(c) for c in challenges] + [book_to_item(b) for b in books]
    return sort_timeline(items)


# ----- client-side filtering -----
def filter_items(
    items: Sequence[TimelineItem], category: str = ALL, status: str = ALL
) -> List[TimelineItem]:
    out = []
    for item in items:
        if category and category != ALL and item.category != category:
            continue
        if status and status != ALL and item.status != status:
            continue
        out.append(item)
    return out


def _distinct(values) -> List[str]:
    return list(dict.fromkeys(values))


def category_options(items: Sequence[TimelineItem]) -> List[str]:
    return [ALL] + _distinct(item.category for item in items)


def status_options(items: Sequence[TimelineItem]) -> List[str]:
    return [ALL] + _distinct(item.status for item in items)
