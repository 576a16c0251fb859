"""Shared article model flowing through every pipeline stage."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ArticleRecord:
    """Canonical article record.

    Created by the feed parser; each later stage returns a copy with its own
    fields attached (``dataclasses.replace``), so earlier outputs stay intact.
    ``id`` is computed once at parse time and never recomputed.
    """
    id: str
    source_id: str
    source_name: str
    title: str
    summary: str
    content: str
    link: str
    published_at: int
    fetched_at: int
    categories: tuple[str, ...] = ()
    language: str = "en"
    seen: bool = False
    # Set by filter
    content_flags: tuple[str, ...] = ()
    # Set by normalizer
    tokens: tuple[str, ...] = ()
    read_time_min: float = 0.0
    # Set by classifier
    domain: Optional[str] = None
    register: str = "awareness"
    country_code: Optional[str] = None
    domain_confidence: int = 0
    register_confidence: int = 0
    # Set by scorer
    emotional_score: float = 0.0
    arousal_score: float = 0.0
