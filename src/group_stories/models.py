"""Data models for story grouping."""

from dataclasses import dataclass, field
from typing import Optional

from common.models import ArticleRecord


@dataclass(frozen=True)
class SourceRef:
    """One member article as it appears in a group's source list."""

    source_id: str
    source_name: str
    article_id: str
    title: str
    link: str
    summary: str
    content: str
    published_at: int
    read_time_min: float
    emotional_score: float
    arousal_score: float


@dataclass(frozen=True)
class PublishedRange:
    earliest: int
    latest: int


@dataclass(frozen=True)
class StoryGroup:
    """Two or more articles from the same underlying story."""

    group_id: str
    headline: str
    domain: Optional[str]
    register: str
    country_code: Optional[str]
    sources: tuple[SourceRef, ...]
    article_count: int
    representative: ArticleRecord
    published_range: PublishedRange
    read_time_min: float
    emotional_score: float
    arousal_score: float
    shared_terms: tuple[tuple[str, int], ...] = ()
    shared_entities: tuple[tuple[str, int], ...] = ()


@dataclass
class GroupingResult:
    groups: list[StoryGroup] = field(default_factory=list)
    ungrouped: list[ArticleRecord] = field(default_factory=list)
