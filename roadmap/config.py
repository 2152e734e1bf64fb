import os
import logging
from typing import Dict, List, Literal, Optional

import yaml
from pydantic import BaseModel, Field, field_validator

from .errors import ConfigurationError

log = logging.getLogger("config")

# env var -> config key; later entries win over earlier ones
ENV_OVERRIDES = (
    ("NEXT_PUBLIC_ROADMAP_CSV_URL", "roadmap_csv_url"),
    ("NEXT_PUBLIC_BOOKS_CSV_URL", "books_csv_url"),
    ("ROADMAP_CSV_URL", "roadmap_csv_url"),
    ("BOOKS_CSV_URL", "books_csv_url"),
    ("TIMELINE_VIEW", "view"),
    ("CSV_PARSE_POLICY", "parse_policy"),
)

DEFAULT_PROFILES = {
    "timeline": ("roadmap_timeline", "books_timeline"),
    "grouped": ("roadmap_grouped", "books_grouped"),
}

# the merged timeline keeps best-effort rows, the grouped page fails hard
DEFAULT_POLICIES = {"timeline": "warn", "grouped": "strict"}


class LoggingConfig(BaseModel):
    level: str = "INFO"


class AppConfig(BaseModel):
    """Everything the ingestion pipeline needs, passed in at construction."""

    roadmap_csv_url: Optional[str] = None
    books_csv_url: Optional[str] = None
    view: Literal["timeline", "grouped"] = "timeline"
    roadmap_profile: Optional[str] = None
    books_profile: Optional[str] = None
    parse_policy: Optional[Literal["warn", "strict"]] = None
    request_timeout: float = 10.0
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @field_validator("roadmap_csv_url", "books_csv_url", mode="before")
    @classmethod
    def _blank_is_missing(cls, v):
        if v is None:
            return None
        v = str(v).strip()
        return v or None

    @field_validator("parse_policy", mode="before")
    @classmethod
    def _lower_policy(cls, v):
        if isinstance(v, str):
            v = v.strip().lower()
            return v or None
        return v

    # ----- derived settings -----
    @property
    def effective_parse_policy(self) -> str:
        return self.parse_policy or DEFAULT_POLICIES[self.view]

    @property
    def effective_roadmap_profile(self) -> str:
        return self.roadmap_profile or DEFAULT_PROFILES[self.view][0]

    @property
    def effective_books_profile(self) -> str:
        return self.books_profile or DEFAULT_PROFILES[self.view][1]

    def missing_sources(self) -> List[str]:
        missing = []
        if not self.roadmap_csv_url:
            missing.append("roadmap_csv_url")
        if not self.books_csv_url:
            missing.append("books_csv_url")
        return missing

    def require_sources(self) -> None:
        missing = self.missing_sources()
        if missing:
            raise ConfigurationError(
                f"CSV source is not configured: {', '.join(missing)}", missing=missing
            )


def _env_overrides(environ: Dict[str, str]) -> Dict[str, str]:
    out: Dict[str, str] = {}
    for env_key, cfg_key in ENV_OVERRIDES:
        value = environ.get(env_key)
        if value:
            out[cfg_key] = value
    return out


def load_config(path: str = "config.yaml", environ: Optional[Dict[str, str]] = None) -> AppConfig:
    """Read config.yaml (if present) and apply environment overrides."""
    raw: Dict = {}
    if os.path.exists(path):
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
    else:
        log.info(f"No config file at {path}; using defaults and environment.")

    environ = os.environ if environ is None else environ
    raw.update(_env_overrides(environ))
    return AppConfig(**raw)
