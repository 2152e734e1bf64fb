# scripts/check_csv_source.py
# Sanity check: fetch one CSV source and show what survives normalization.
import asyncio
import sys

from roadmap.fetcher import fetch_csv_text
from roadmap.normalizer import normalize_rows
from roadmap.parsers.csv_rows import read_csv_rows
from roadmap.profiles import SchemaProfile

url = sys.argv[1] if len(sys.argv) > 1 else ""
profile = SchemaProfile(sys.argv[2] if len(sys.argv) > 2 else "roadmap_timeline")

text = asyncio.run(fetch_csv_text(url))
result = read_csv_rows(text)
print(f"[SANITY] rows: {len(result.rows)} | issues: {len(result.issues)}")
for issue in result.issues[:8]:
    print("[ISSUE]", issue)
print("-" * 60)

records = normalize_rows(result.rows, profile)
print(f"\nKept {len(records)} of {len(result.rows)} rows as {profile.value}")
for r in records:
    print(r.model_dump())
