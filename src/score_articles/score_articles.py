"""Emotional and arousal scoring from per-language lexicons.

emotional_score is in [-1, 1], arousal_score in [0, 1].
"""

import dataclasses
import logging
from typing import Iterable, Sequence

from common.models import ArticleRecord
from score_articles.lexicons.en import EN_LEXICON
from score_articles.registry import get_lexicon, register_lexicon

logger = logging.getLogger(__name__)

MAX_SENTIMENT = 5
AROUSAL_SCALE = 10

register_lexicon("en", EN_LEXICON)


def score_tokens(tokens: Sequence[str], lang: str = "en") -> tuple[float, float]:
    """Return (emotional_score, arousal_score) for a token list.

    Unknown languages and empty token lists score (0.0, 0.0).
    """
    lexicon = get_lexicon(lang)
    if lexicon is None or not tokens:
        return 0.0, 0.0

    sentiment_sum = 0
    sentiment_count = 0
    arousal_count = 0
    for token in tokens:
        weight = lexicon.sentiment_of(token)
        if weight is not None:
            sentiment_sum += weight
            sentiment_count += 1
        if lexicon.is_arousal(token):
            arousal_count += 1

    emotional = 0.0
    if sentiment_count:
        emotional = max(-1.0, min(1.0, sentiment_sum / (sentiment_count * MAX_SENTIMENT)))

    arousal = min(1.0, arousal_count / max(1, len(tokens)) * AROUSAL_SCALE)
    return emotional, arousal


def score_article(article: ArticleRecord) -> ArticleRecord:
    emotional, arousal = score_tokens(article.tokens, article.language)
    return dataclasses.replace(article, emotional_score=emotional, arousal_score=arousal)


def score_articles(articles: Iterable[ArticleRecord]) -> list[ArticleRecord]:
    """Score every article using the lexicon for its language."""
    results = [score_article(a) for a in articles]
    if results:
        mean_arousal = sum(a.arousal_score for a in results) / len(results)
        logger.info("Scored %d articles (mean arousal %.2f)", len(results), mean_arousal)
    return results
