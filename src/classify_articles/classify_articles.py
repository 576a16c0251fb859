"""Core article classification logic.

Layered keyword scoring, no external models:
  1. Feed category mapping -> domain hint
  2. Source bias -> domain hint
  3. Keyword scoring against the domain table
  4. Keyword scoring against the register table
  5. Country detection (independent axis)
"""

import dataclasses
import logging
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Sequence

from classify_articles.country_detector import detect_country
from classify_articles.lexicons.categories import CATEGORY_TO_DOMAIN
from classify_articles.lexicons.domain import DOMAIN_KEYWORDS
from classify_articles.lexicons.register import REGISTER_KEYWORDS
from classify_articles.models import Classification
from classify_articles.taxonomy import DEFAULT_REGISTER
from common.models import ArticleRecord
from normalize_articles.normalize_articles import split_words

logger = logging.getLogger(__name__)

CATEGORY_CONFIDENCE = 2
TITLE_WEIGHT = 2
PHRASE_WEIGHT = 2
MIN_STEM_LENGTH = 4

# Sources that lean heavily toward one domain: source_id -> (domain, weight)
SOURCE_BIAS = MappingProxyType({
    "bbc-science": ("science", 3),
    "nature": ("science", 3),
    "sciencedaily": ("science", 3),
    "ars-technica": ("tech", 2),
    "hacker-news": ("tech", 2),
    "the-verge": ("tech", 2),
})


def map_categories_to_domains(categories: Iterable[str]) -> dict[str, int]:
    """Domain hints from feed categories, strongest first.

    Each matched category adds CATEGORY_CONFIDENCE to its domain.
    """
    scores: dict[str, int] = {}
    for category in categories:
        domain = CATEGORY_TO_DOMAIN.get(category.lower().strip())
        if domain:
            scores[domain] = scores.get(domain, 0) + CATEGORY_CONFIDENCE
    return dict(sorted(scores.items(), key=lambda item: item[1], reverse=True))


def score_keywords(tokens: Sequence[str], raw_text: str, keywords: Mapping[str, int]) -> int:
    """Score tokens and raw text against a keyword -> weight table.

    Phrases match the raw lowercase text at PHRASE_WEIGHT. Single keywords
    of MIN_STEM_LENGTH or more match any token they prefix; shorter ones
    need an exact token. Each keyword counts at most once.
    """
    score = 0
    for keyword, weight in keywords.items():
        if " " in keyword:
            if keyword in raw_text:
                score += weight * PHRASE_WEIGHT
            continue

        stem = len(keyword) >= MIN_STEM_LENGTH
        for token in tokens:
            if token == keyword or (stem and token.startswith(keyword)):
                score += weight
                break
    return score


def _score_table(
    tables: Mapping[str, Mapping[str, int]],
    title_tokens: Sequence[str],
    title_text: str,
    all_tokens: Sequence[str],
    full_text: str,
) -> dict[str, int]:
    scores = {}
    for name, keywords in tables.items():
        combined = (
            score_keywords(title_tokens, title_text, keywords) * TITLE_WEIGHT
            + score_keywords(all_tokens, full_text, keywords)
        )
        if combined > 0:
            scores[name] = combined
    return scores


def _pick_top(scores: Mapping[str, int], fallback: Optional[str]) -> tuple[Optional[str], int]:
    # Ties keep the first highest found
    best_key, best_score = fallback, 0
    for key, score in scores.items():
        if score > best_score:
            best_key, best_score = key, score
    return best_key, best_score


def classify(article: ArticleRecord) -> Classification:
    """Classify a single article along domain, register and country."""
    title_text = article.title.lower()
    body_text = f"{article.summary} {article.content}".lower()
    full_text = f"{title_text} {body_text}"

    title_tokens = split_words(title_text)
    all_tokens = article.tokens or split_words(full_text)

    # Domain: category hints, then source bias, then keywords
    domain_scores = map_categories_to_domains(article.categories)

    bias = SOURCE_BIAS.get(article.source_id)
    if bias:
        domain, weight = bias
        domain_scores[domain] = domain_scores.get(domain, 0) + weight

    keyword_scores = _score_table(DOMAIN_KEYWORDS, title_tokens, title_text, all_tokens, full_text)
    for domain, score in keyword_scores.items():
        domain_scores[domain] = domain_scores.get(domain, 0) + score

    register_scores = _score_table(REGISTER_KEYWORDS, title_tokens, title_text, all_tokens, full_text)

    domain, domain_confidence = _pick_top(domain_scores, None)
    register, register_confidence = _pick_top(register_scores, DEFAULT_REGISTER)

    return Classification(
        domain=domain,
        register=register,
        domain_confidence=domain_confidence,
        register_confidence=register_confidence,
        country_code=detect_country(article),
    )


def classify_articles(articles: Iterable[ArticleRecord]) -> list[ArticleRecord]:
    """Attach classification fields to each article."""
    results = []
    for article in articles:
        c = classify(article)
        results.append(
            dataclasses.replace(
                article,
                domain=c.domain,
                register=c.register,
                country_code=c.country_code,
                domain_confidence=c.domain_confidence,
                register_confidence=c.register_confidence,
            )
        )

    classified = sum(1 for a in results if a.domain)
    logger.info("Classified %d articles (%d with a domain)", len(results), classified)
    return results
