"""Spam, clickbait, quality and URL pattern families.

Each match carries a severity: ``reject`` drops the article, ``flag`` keeps it
with the reason attached.
"""

import re
from typing import Callable, Optional

from common.models import ArticleRecord
from filter_articles.models import FLAG, REJECT, FilterIssue


def _pattern(regex: str, reason: str, severity: str) -> tuple[re.Pattern, FilterIssue]:
    return re.compile(regex, re.IGNORECASE), FilterIssue(reason, severity)


# Matched against the title
CLICKBAIT_PATTERNS = (
    _pattern(r"you won'?t believe", "clickbait: manufactured shock", REJECT),
    _pattern(r"shocking\s*(truth|reason|fact|secret)", "clickbait: shock bait", REJECT),
    _pattern(r"\d+\s*(reason|thing|way|secret|trick|hack)s?\s*(you|that|why|to)", "clickbait: listicle bait", FLAG),
    _pattern(r"this\s*(one\s*)?(weird|simple|strange)\s*(trick|hack)", "clickbait: trick bait", REJECT),
    _pattern(r"what happens next", "clickbait: manufactured suspense", FLAG),
    _pattern(r"doctors?\s*(hate|don'?t want)", "clickbait: authority bait", REJECT),
    _pattern(r"is\s*dead", "clickbait: death bait", FLAG),
)

# Matched against title + summary
SPAM_PATTERNS = (
    _pattern(r"\b(buy now|order now|limited time|act now|don'?t miss)\b", "spam: promotional", REJECT),
    _pattern(r"\b(free shipping|discount code|promo code|coupon)\b", "spam: commercial", REJECT),
    _pattern(r"\b(affiliate|sponsored content|paid partnership)\b", "spam: affiliate", FLAG),
    _pattern(r"\b(subscribe now|sign up free|join now)\b", "spam: acquisition", FLAG),
    _pattern(r"\$\d+[,.]?\d*\s*(off|savings?|deal)", "spam: deal promotion", REJECT),
)

# Matched against the link
URL_PATTERNS = (
    _pattern(r"bit\.ly|tinyurl|t\.co|goo\.gl|ow\.ly", "url: link shortener", FLAG),
    _pattern(r"\.(xyz|top|click|work|loan|racing|date|download|stream|gdn|accountant)/",
             "url: suspicious TLD", REJECT),
    _pattern(r"[?&](utm_|ref=|aff=|partner=)", "url: tracking parameters", FLAG),
)


def _excessive_caps(article: ArticleRecord) -> Optional[FilterIssue]:
    # More than half of the title's letters uppercase, at least 10 letters
    letters = re.sub(r"[^a-zA-Z]", "", article.title)
    if len(letters) < 10:
        return None
    upper = sum(1 for c in letters if c.isupper())
    if upper / len(letters) > 0.5:
        return FilterIssue("quality: excessive caps", FLAG)
    return None


def _title_too_short(article: ArticleRecord) -> Optional[FilterIssue]:
    if len(article.title.strip()) < 8:
        return FilterIssue("quality: title too short", REJECT)
    return None


def _stub_article(article: ArticleRecord) -> Optional[FilterIssue]:
    if len((article.summary + article.content).strip()) < 20:
        return FilterIssue("quality: stub article", FLAG)
    return None


def _keyword_stuffing(article: ArticleRecord) -> Optional[FilterIssue]:
    # Same word longer than 3 letters more than 4 times in the title
    counts: dict[str, int] = {}
    for word in article.title.lower().split():
        if len(word) > 3:
            counts[word] = counts.get(word, 0) + 1
            if counts[word] > 4:
                return FilterIssue("quality: keyword stuffing", REJECT)
    return None


QUALITY_CHECKS: tuple[Callable[[ArticleRecord], Optional[FilterIssue]], ...] = (
    _excessive_caps,
    _title_too_short,
    _stub_article,
    _keyword_stuffing,
)
