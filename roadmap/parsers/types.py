from datetime import date
from typing import List, Literal, Optional
from pydantic import BaseModel, ConfigDict


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True)


# ---- timeline profiles ----
class ChallengeRecord(_Record):
    id: str
    title: str
    category: str = ""
    difficulty: int = 0          # 1-5 when filled in
    timeframe: str = ""
    priority: str = ""           # 高 / 中 / 低
    description: str = ""
    start_date: str = ""         # raw, parsed only for display/sorting
    end_date: str = ""
    status: str = ""             # 進行中 / 計画中 / 完了
    tags: str = ""               # comma-delimited


class BookRecord(_Record):
    id: str
    title: str
    author: str = ""
    category: str = ""
    difficulty: int = 0
    pages: int = 0
    estimated_reading_time: str = ""
    priority: str = ""
    description: str = ""
    status: str = ""             # 読書中 / 計画中 / 読了
    start_date: str = ""
    end_date: str = ""
    tags: str = ""
    url: Optional[str] = None


# ---- grouped profiles ----
class RoadmapEntry(_Record):
    id: str
    title: str
    description: str = ""
    start_date: str = ""
    end_date: str = ""
    category: str = ""


class BookRecommendation(_Record):
    id: str
    title: str
    author: str = ""
    url: Optional[str] = None
    category: str = ""


class TimelineItem(_Record):
    id: str
    title: str
    category: str
    difficulty: int
    priority: str
    description: str
    status: str
    start_date: Optional[date]
    end_date: Optional[date]
    tags: List[str]
    type: Literal["challenge", "book"]
    author: Optional[str] = None     # books only
    pages: Optional[int] = None      # books only
    url: Optional[str] = None        # books only
    timeframe: Optional[str] = None  # challenges only
