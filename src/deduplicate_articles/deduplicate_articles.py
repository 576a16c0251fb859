"""Remove duplicate copies of the same article.

Two articles are duplicates if their normalized titles are identical or
their token sets overlap (Jaccard) above the threshold. The earliest
published copy is kept and absorbs the categories of later copies.
"""

import dataclasses
import logging
import re
from typing import Iterable

from common.models import ArticleRecord
from common.similarity import jaccard_similarity

logger = logging.getLogger(__name__)

DEFAULT_THRESHOLD = 0.7

_NON_ALNUM = re.compile(r"[^a-z0-9]")


def normalize_title(title: str) -> str:
    """Lowercase title with everything but ASCII letters and digits removed."""
    return _NON_ALNUM.sub("", title.lower())


def _merge_categories(existing: ArticleRecord, duplicate: ArticleRecord) -> ArticleRecord:
    merged = tuple(dict.fromkeys(existing.categories + duplicate.categories))
    return dataclasses.replace(existing, categories=merged)


def deduplicate_articles(
    articles: Iterable[ArticleRecord],
    threshold: float = DEFAULT_THRESHOLD,
) -> list[ArticleRecord]:
    """Deduplicate articles, retaining the earliest of each duplicate set.

    Args:
        articles: Normalized articles (tokens populated).
        threshold: Token Jaccard similarity above which two articles are
            considered the same.

    Returns:
        Kept articles in ascending published_at order.
    """
    ordered = sorted(articles, key=lambda a: a.published_at)
    kept: list[ArticleRecord] = []
    title_index: dict[str, int] = {}

    for article in ordered:
        title_key = normalize_title(article.title)

        if title_key in title_index:
            idx = title_index[title_key]
            kept[idx] = _merge_categories(kept[idx], article)
            continue

        duplicate_of = None
        for idx, existing in enumerate(kept):
            if jaccard_similarity(article.tokens, existing.tokens) > threshold:
                duplicate_of = idx
                break

        if duplicate_of is not None:
            kept[duplicate_of] = _merge_categories(kept[duplicate_of], article)
            continue

        title_index[title_key] = len(kept)
        kept.append(article)

    removed = len(ordered) - len(kept)
    logger.info("Deduplicated %d articles, removed %d duplicates", len(kept), removed)
    return kept
