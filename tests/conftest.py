"""Pytest configuration for repository test runs."""

from __future__ import annotations

import sys
from pathlib import Path

import httpx
import pytest


def pytest_sessionstart() -> None:
    """Add the project root to sys.path for test imports."""
    project_root = Path(__file__).resolve().parent.parent
    if str(project_root) not in sys.path:
        sys.path.insert(0, str(project_root))


ROADMAP_CSV = """id,title,category,difficulty,timeframe,priority,description,start_date,end_date,status,tags
c1,英語を話せるようになる,学習,3,1年,高,毎日30分,2024-01-15,2024-12-31,進行中,"英語, 会話"
c2,マラソン完走,健康,4,半年,中,,2024-03-01,,計画中,運動
,タイトルだけ,健康,1,1ヶ月,低,,,,計画中,
"""

BOOKS_CSV = """id,title,author,category,difficulty,pages,estimated_reading_time,priority,description,status,start_date,end_date,tags
b1,リーダブルコード,Dustin Boswell,学習,2,260,5時間,高,読みやすいコード,読書中,2024-02-01,,"プログラミング,設計"
b2,走ることについて語るときに僕の語ること,村上春樹,健康,1,abc,3時間,低,,読了,2023-05-01,2023-05-10,
"""


class CsvServer:
    """Serves fixed CSV bodies by path through an httpx.MockTransport."""

    def __init__(self) -> None:
        self.bodies = {"/roadmap.csv": ROADMAP_CSV, "/books.csv": BOOKS_CSV}
        self.requests: list[httpx.Request] = []
        self.transport = httpx.MockTransport(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        body = self.bodies.get(request.url.path)
        if body is None:
            return httpx.Response(404, text="not found")
        return httpx.Response(200, text=body, headers={"Content-Type": "text/csv"})

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=self.transport)


@pytest.fixture
def csv_server() -> CsvServer:
    return CsvServer()
