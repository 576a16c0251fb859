"""End-to-end pipeline: feeds in, daily brief and story groups out.

Stage order: fetch -> parse -> filter -> normalize -> classify ->
deduplicate -> score -> select brief -> group. Grouping runs over the
selected brief articles only.
"""

import dataclasses
import logging
from dataclasses import dataclass, field
from typing import AbstractSet, Iterable, Optional

from classify_articles.classify_articles import classify_articles
from common.models import ArticleRecord
from deduplicate_articles.deduplicate_articles import deduplicate_articles
from filter_articles.filter_articles import filter_articles
from filter_articles.models import FlaggedArticle, RejectedArticle
from group_stories.group_stories import group_stories
from group_stories.models import StoryGroup
from ingest_articles.fetch_feeds import fetch_feeds
from ingest_articles.models import RawFeedPayload, Source
from ingest_articles.parse_feeds import parse_payloads
from normalize_articles.normalize_articles import normalize_articles
from run_pipeline.config_loader import PipelineConfig
from score_articles.score_articles import score_articles
from select_brief.models import DailyBrief
from select_brief.select_brief import select_brief

logger = logging.getLogger(__name__)


@dataclass
class PipelineOutput:
    brief: DailyBrief
    groups: list[StoryGroup] = field(default_factory=list)
    ungrouped: list[ArticleRecord] = field(default_factory=list)
    rejected: list[RejectedArticle] = field(default_factory=list)
    flagged: list[FlaggedArticle] = field(default_factory=list)


def mark_seen(articles: Iterable[ArticleRecord], seen_ids: AbstractSet[str]) -> list[ArticleRecord]:
    """Set seen=True on articles whose id is in seen_ids."""
    return [
        dataclasses.replace(a, seen=True) if a.id in seen_ids else a
        for a in articles
    ]


def process_payloads(
    payloads: Iterable[RawFeedPayload],
    config: PipelineConfig,
    seen_ids: Iterable[str] = (),
    generated_at: Optional[int] = None,
) -> PipelineOutput:
    """Run every stage after fetching on already fetched payloads."""
    articles = parse_payloads(payloads)
    articles = mark_seen(articles, frozenset(seen_ids))

    filtered = filter_articles(articles)
    normalized = normalize_articles(filtered.kept, config.words_per_minute)
    classified = classify_articles(normalized)
    deduped = deduplicate_articles(classified, config.dedup_threshold)
    scored = score_articles(deduped)

    brief = select_brief(scored, config.brief, generated_at=generated_at)
    grouping = group_stories(brief.articles, config.group_threshold)

    return PipelineOutput(
        brief=brief,
        groups=grouping.groups,
        ungrouped=grouping.ungrouped,
        rejected=filtered.rejected,
        flagged=filtered.flagged,
    )


def run_pipeline(
    sources: Iterable[Source],
    config: PipelineConfig,
    seen_ids: Iterable[str] = (),
) -> PipelineOutput:
    """Fetch all enabled sources and build the day's brief.

    Unreachable or malformed feeds are skipped; with no feeds at all the
    brief is simply empty.
    """
    payloads = fetch_feeds(
        sources,
        timeout=config.fetch.timeout,
        max_workers=config.fetch.max_workers,
    )
    if not payloads:
        logger.warning("No feeds fetched, brief will be empty")

    output = process_payloads(payloads, config, seen_ids)
    logger.info(
        "Brief %s: %d articles, %d groups, %d standalone",
        output.brief.id,
        output.brief.article_count,
        len(output.groups),
        len(output.ungrouped),
    )
    return output
