"""Detect the country an article is about from weighted term matches."""

from typing import Optional

import pycountry

from classify_articles.lexicons.country import COUNTRY_TERMS
from common.models import ArticleRecord

MIN_COUNTRY_SCORE = 2


def score_countries(title: str, summary: str) -> dict[str, int]:
    """Sum matched term weights per country; title matches count double."""
    title_text = title.lower()
    full_text = f"{title_text} {summary.lower()}"

    scores = {}
    for code, terms in COUNTRY_TERMS:
        score = 0
        for term, weight in terms:
            if term in title_text:
                score += weight * 2
            elif term in full_text:
                score += weight
        if score > 0:
            scores[code] = score
    return scores


def detect_country(article: ArticleRecord) -> Optional[str]:
    """Return the best-scoring ISO alpha-2 code, or None below the noise threshold."""
    best_code = None
    best_score = MIN_COUNTRY_SCORE
    for code, score in score_countries(article.title, article.summary).items():
        if score > best_score:
            best_code = code
            best_score = score
    return best_code


def country_name(code: Optional[str]) -> Optional[str]:
    """Display name for an alpha-2 code, or None if unknown."""
    if not code:
        return None
    country = pycountry.countries.get(alpha_2=code)
    if country is None:
        return None
    return getattr(country, "common_name", None) or country.name
