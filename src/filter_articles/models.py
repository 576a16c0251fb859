"""Data models for filter_articles pipeline stage."""

from dataclasses import dataclass, field

from common.models import ArticleRecord

REJECT = "reject"
FLAG = "flag"


@dataclass(frozen=True)
class FilterIssue:
    reason: str
    severity: str


@dataclass
class RejectedArticle:
    """An article dropped by the filter, with every reject reason."""
    id: str
    title: str
    source_id: str
    reasons: list[str]


@dataclass
class FlaggedArticle:
    """An article kept by the filter but carrying flag reasons."""
    id: str
    title: str
    reasons: list[str]


@dataclass
class FilterResult:
    kept: list[ArticleRecord] = field(default_factory=list)
    rejected: list[RejectedArticle] = field(default_factory=list)
    flagged: list[FlaggedArticle] = field(default_factory=list)
