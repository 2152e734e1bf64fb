import asyncio
import logging
from typing import List, Literal, Optional

import httpx
from pydantic import BaseModel, Field

from .config import AppConfig
from .errors import ConfigurationError, TimelineError
from .fetcher import fetch_csv_text
from .grouping import CategoryGroup, group_by_category
from .normalizer import normalize_rows
from .parsers.csv_rows import ParsePolicy, parse_csv_rows
from .parsers.types import BookRecommendation, RoadmapEntry, TimelineItem
from .profiles import SchemaProfile
from .timeline import build_timeline

log = logging.getLogger("pipeline")

GENERIC_ERROR = "データの取得に失敗しました"


class GroupedData(BaseModel):
    entries: List[RoadmapEntry] = Field(default_factory=list)
    books: List[BookRecommendation] = Field(default_factory=list)
    banner: bool = False
    missing: List[str] = Field(default_factory=list)


class PageState(BaseModel):
    """Terminal (or loading) state of one page render."""

    status: Literal["loading", "ready", "empty", "error"]
    message: Optional[str] = None
    banner: bool = False
    items: List[TimelineItem] = Field(default_factory=list)
    groups: List[CategoryGroup] = Field(default_factory=list)


class TimelinePipeline:
    """Fetch -> parse -> normalize for the roadmap and books datasets."""

    def __init__(self, cfg: AppConfig, client: Optional[httpx.AsyncClient] = None):
        self.cfg = cfg
        self.client = client
        self.policy = ParsePolicy(cfg.effective_parse_policy)
        try:
            self.roadmap_profile = SchemaProfile(cfg.effective_roadmap_profile)
            self.books_profile = SchemaProfile(cfg.effective_books_profile)
        except ValueError as e:
            raise ConfigurationError(f"Unknown schema profile: {e}") from e
        # validated once; each load decides how to react
        self.missing_sources = cfg.missing_sources()
        if self.missing_sources:
            log.warning(f"Missing CSV sources: {', '.join(self.missing_sources)}")

    # ----- single dataset -----
    async def load_dataset(self, url: Optional[str], profile: SchemaProfile) -> list:
        try:
            text = await fetch_csv_text(url, self.client, timeout=self.cfg.request_timeout)
            rows = parse_csv_rows(text, self.policy)
            records = normalize_rows(rows, profile)
        except TimelineError as e:
            log.error(f"Failed to load {profile.value} data: {e}")
            raise
        log.info(f"Loaded {len(records)} {profile.value} records ({len(rows)} rows).")
        return records

    # ----- merged timeline (variant A) -----
    async def load_timeline(self) -> List[TimelineItem]:
        """Both sources are required; a missing one fails before any request."""
        if self.missing_sources:
            self.cfg.require_sources()
        self._expect_profiles(SchemaProfile.ROADMAP_TIMELINE, SchemaProfile.BOOKS_TIMELINE)

        challenges, books = await asyncio.gather(
            self.load_dataset(self.cfg.roadmap_csv_url, self.roadmap_profile),
            self.load_dataset(self.cfg.books_csv_url, self.books_profile),
        )
        return build_timeline(challenges, books)

    async def timeline_state(self) -> PageState:
        try:
            items = await self.load_timeline()
        except TimelineError as e:
            return PageState(status="error", message=str(e) or GENERIC_ERROR)
        return PageState(status="ready" if items else "empty", items=items)

    # ----- grouped by category (variant B) -----
    async def load_grouped(self) -> GroupedData:
        """Missing sources degrade to empty lists plus a banner flag."""
        self._expect_profiles(SchemaProfile.ROADMAP_GROUPED, SchemaProfile.BOOKS_GROUPED)

        async def _maybe(url: Optional[str], profile: SchemaProfile) -> list:
            if not url:
                return []
            return await self.load_dataset(url, profile)

        entries, books = await asyncio.gather(
            _maybe(self.cfg.roadmap_csv_url, self.roadmap_profile),
            _maybe(self.cfg.books_csv_url, self.books_profile),
        )
        return GroupedData(
            entries=entries,
            books=books,
            banner=bool(self.missing_sources),
            missing=list(self.missing_sources),
        )

    async def grouped_state(self) -> PageState:
        try:
            data = await self.load_grouped()
        except TimelineError as e:
            return PageState(status="error", message=str(e) or GENERIC_ERROR)

        message = None
        if data.banner:
            message = f"CSV source is not configured: {', '.join(data.missing)}"
        groups = group_by_category(data.entries, data.books)
        return PageState(
            status="ready" if groups else "empty",
            message=message,
            banner=data.banner,
            groups=groups,
        )

    async def page_state(self) -> PageState:
        if self.cfg.view == "grouped":
            return await self.grouped_state()
        return await self.timeline_state()

    # ----- helpers -----
    def _expect_profiles(self, *expected: SchemaProfile) -> None:
        actual = (self.roadmap_profile, self.books_profile)
        if actual != tuple(expected):
            raise ConfigurationError(
                f"Profiles {[p.value for p in actual]} do not match this view; "
                f"expected {[p.value for p in expected]}"
            )
