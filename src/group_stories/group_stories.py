"""Group distinct articles that cover the same underlying story.

Unlike deduplication, grouping keeps every article and clusters them.
Single-pass greedy: each article joins the best-matching existing bucket
or starts a new one, so results depend on input order. Buckets with two
or more members become StoryGroups.
"""

import logging
import re
from collections import Counter
from typing import Iterable, Optional, Sequence

from classify_articles.taxonomy import DEFAULT_REGISTER, REGISTER_COST
from common.hashing import generate_group_id
from common.models import ArticleRecord
from common.similarity import jaccard_similarity
from group_stories.models import GroupingResult, PublishedRange, SourceRef, StoryGroup

logger = logging.getLogger(__name__)

BASE_THRESHOLD = 0.20
DOMAIN_BOOST = 0.08
COUNTRY_BOOST = 0.10
TIME_WINDOW_MS = 24 * 60 * 60 * 1000
TIME_BOOST = 0.05
MIN_SHARED = 2

# Capitalised multi-word sequences ("Volodymyr Zelensky", "White House")
_ENTITY_PATTERN = re.compile(r"\b([A-Z][a-z]+(?:\s+[A-Z][a-z]+)+)\b")


def article_similarity(a: ArticleRecord, b: ArticleRecord) -> float:
    """Token Jaccard similarity plus metadata boosts.

    Boosts only apply across different sources; same-source articles
    share metadata trivially.
    """
    score = jaccard_similarity(a.tokens, b.tokens)

    different_sources = bool(a.source_id and b.source_id and a.source_id != b.source_id)
    if not different_sources:
        return score

    if a.domain and a.domain == b.domain:
        score += DOMAIN_BOOST
    if a.country_code and a.country_code == b.country_code:
        score += COUNTRY_BOOST
    if abs(a.published_at - b.published_at) < TIME_WINDOW_MS:
        score += TIME_BOOST
    return score


def _bucket_score(article: ArticleRecord, bucket: Sequence[ArticleRecord]) -> float:
    return max(article_similarity(article, member) for member in bucket)


def pick_representative(articles: Sequence[ArticleRecord]) -> ArticleRecord:
    """Most neutral article: lowest arousal, then shortest title."""
    best = articles[0]
    for article in articles[1:]:
        if article.arousal_score < best.arousal_score:
            best = article
        elif article.arousal_score == best.arousal_score and len(article.title) < len(best.title):
            best = article
    return best


def pick_headline(articles: Sequence[ArticleRecord]) -> str:
    # min() keeps the first of equally short titles
    return min(articles, key=lambda a: len(a.title)).title


def _consensus(values: Iterable[Optional[str]]) -> Optional[str]:
    best, best_count = None, 0
    for value, count in Counter(v for v in values if v).items():
        if count > best_count:
            best, best_count = value, count
    return best


def worst_register(articles: Iterable[ArticleRecord]) -> str:
    """Highest cognitive-cost register in the group."""
    worst, worst_cost = DEFAULT_REGISTER, 0
    for article in articles:
        cost = REGISTER_COST.get(article.register, 0)
        if cost > worst_cost:
            worst, worst_cost = article.register, cost
    return worst


def _count_shared(per_article: Iterable[Iterable[str]]) -> tuple[tuple[str, int], ...]:
    counts: Counter[str] = Counter()
    for items in per_article:
        counts.update(dict.fromkeys(items, 1))
    shared = [(item, count) for item, count in counts.items() if count >= MIN_SHARED]
    shared.sort(key=lambda pair: pair[1], reverse=True)
    return tuple(shared)


def extract_shared_terms(articles: Iterable[ArticleRecord]) -> tuple[tuple[str, int], ...]:
    """Tokens appearing in at least two articles, most frequent first."""
    return _count_shared(a.tokens for a in articles)


def extract_shared_entities(articles: Iterable[ArticleRecord]) -> tuple[tuple[str, int], ...]:
    """Capitalised name sequences appearing in at least two articles."""
    return _count_shared(
        _ENTITY_PATTERN.findall(f"{a.title} {a.summary}") for a in articles
    )


def _source_ref(article: ArticleRecord) -> SourceRef:
    return SourceRef(
        source_id=article.source_id,
        source_name=article.source_name,
        article_id=article.id,
        title=article.title,
        link=article.link,
        summary=article.summary,
        content=article.content,
        published_at=article.published_at,
        read_time_min=article.read_time_min,
        emotional_score=article.emotional_score,
        arousal_score=article.arousal_score,
    )


def build_group(articles: Sequence[ArticleRecord]) -> StoryGroup:
    representative = pick_representative(articles)
    published = [a.published_at for a in articles]

    return StoryGroup(
        group_id=generate_group_id(a.id for a in articles),
        headline=pick_headline(articles),
        domain=_consensus(a.domain for a in articles),
        register=worst_register(articles),
        country_code=_consensus(a.country_code for a in articles),
        sources=tuple(_source_ref(a) for a in articles),
        article_count=len(articles),
        representative=representative,
        published_range=PublishedRange(earliest=min(published), latest=max(published)),
        read_time_min=representative.read_time_min,
        emotional_score=representative.emotional_score,
        arousal_score=representative.arousal_score,
        shared_terms=extract_shared_terms(articles),
        shared_entities=extract_shared_entities(articles),
    )


def group_stories(
    articles: Iterable[ArticleRecord],
    threshold: float = BASE_THRESHOLD,
) -> GroupingResult:
    """Cluster articles into story groups.

    Args:
        articles: Classified, scored articles, in the order to process them.
        threshold: Minimum boosted similarity for an article to join a bucket.

    Returns:
        GroupingResult with multi-article groups and the remaining singletons.
    """
    buckets: list[list[ArticleRecord]] = []

    for article in articles:
        best_idx, best_score = None, 0.0
        for idx, bucket in enumerate(buckets):
            score = _bucket_score(article, bucket)
            if score > best_score and score >= threshold:
                best_idx, best_score = idx, score

        if best_idx is None:
            buckets.append([article])
        else:
            buckets[best_idx].append(article)

    result = GroupingResult()
    for bucket in buckets:
        if len(bucket) >= 2:
            result.groups.append(build_group(bucket))
        else:
            result.ungrouped.append(bucket[0])

    logger.info(
        "Grouped into %d stories, %d ungrouped", len(result.groups), len(result.ungrouped)
    )
    return result
