"""Tokenize articles and estimate reading time."""

import dataclasses
import logging
import re
from typing import Iterable

from common.models import ArticleRecord
from normalize_articles.stopwords import STOPWORDS

logger = logging.getLogger(__name__)

WORDS_PER_MINUTE = 225

_NON_ALPHA = re.compile(r"[^a-z'-]+")


def split_words(text: str) -> list[str]:
    """Lowercase and split on non-alphabetic characters, keeping tokens longer than 1."""
    if not text:
        return []
    return [t for t in _NON_ALPHA.split(text.lower()) if len(t) > 1]


def tokenize(text: str) -> list[str]:
    """Split words and drop stopwords."""
    return [t for t in split_words(text) if t not in STOPWORDS]


def estimate_read_time(text: str, words_per_minute: int = WORDS_PER_MINUTE) -> float:
    """Minutes to read ``text`` at ``words_per_minute``, rounded to 2 decimals."""
    if not text:
        return 0.0
    return round(len(text.split()) / words_per_minute, 2)


def normalize_article(
    article: ArticleRecord,
    words_per_minute: int = WORDS_PER_MINUTE,
) -> ArticleRecord:
    tokens = tokenize(f"{article.title} {article.summary} {article.content}")
    read_time_min = estimate_read_time(
        article.content or article.summary or article.title, words_per_minute
    )
    return dataclasses.replace(article, tokens=tuple(tokens), read_time_min=read_time_min)


def normalize_articles(
    articles: Iterable[ArticleRecord],
    words_per_minute: int = WORDS_PER_MINUTE,
) -> list[ArticleRecord]:
    normalized = [normalize_article(a, words_per_minute) for a in articles]
    logger.info("Normalized %d articles", len(normalized))
    return normalized
