"""Data models for ingest_articles pipeline stage."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Source:
    """An RSS/Atom feed the pipeline reads from. Owned by the source registry."""
    id: str
    name: str
    feed_url: str
    enabled: bool = True
    country: str = "international"
    category: str = "news"
    language: str = "en"


@dataclass
class RawFeedPayload:
    """One successfully fetched feed. Items are feedparser entries."""
    source_id: str
    source_name: str
    feed_title: str
    fetched_at: int
    items: list[Any] = field(default_factory=list)
    language: str = "en"
