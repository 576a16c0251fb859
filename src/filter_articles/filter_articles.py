"""Reject spam/clickbait articles and flag borderline ones."""

import dataclasses
import logging
from typing import Iterable

from common.models import ArticleRecord
from filter_articles.models import (
    FLAG,
    REJECT,
    FilterIssue,
    FilterResult,
    FlaggedArticle,
    RejectedArticle,
)
from filter_articles.patterns import (
    CLICKBAIT_PATTERNS,
    QUALITY_CHECKS,
    SPAM_PATTERNS,
    URL_PATTERNS,
)

logger = logging.getLogger(__name__)


def check_article(article: ArticleRecord) -> list[FilterIssue]:
    """Evaluate an article against all four pattern families."""
    issues = []
    text = f"{article.title} {article.summary}"

    for regex, issue in CLICKBAIT_PATTERNS:
        if regex.search(article.title):
            issues.append(issue)

    for regex, issue in SPAM_PATTERNS:
        if regex.search(text):
            issues.append(issue)

    for check in QUALITY_CHECKS:
        issue = check(article)
        if issue is not None:
            issues.append(issue)

    for regex, issue in URL_PATTERNS:
        if regex.search(article.link):
            issues.append(issue)

    return issues


def filter_articles(articles: Iterable[ArticleRecord]) -> FilterResult:
    """Split articles into kept, rejected and flagged.

    Articles with any ``reject`` issue are dropped and recorded with their
    reasons. Articles with only ``flag`` issues are kept with
    ``content_flags`` attached, and also recorded in ``flagged``.
    """
    result = FilterResult()

    for article in articles:
        issues = check_article(article)
        rejects = [i.reason for i in issues if i.severity == REJECT]
        flags = [i.reason for i in issues if i.severity == FLAG]

        if rejects:
            result.rejected.append(
                RejectedArticle(
                    id=article.id,
                    title=article.title,
                    source_id=article.source_id,
                    reasons=rejects,
                )
            )
            logger.info("Rejected '%s': %s", article.title[:60], ", ".join(rejects))
            continue

        if flags:
            article = dataclasses.replace(article, content_flags=tuple(flags))
            result.flagged.append(
                FlaggedArticle(id=article.id, title=article.title, reasons=flags)
            )
        result.kept.append(article)

    logger.info(
        "Filtered %d articles: %d kept, %d rejected, %d flagged",
        len(result.kept) + len(result.rejected),
        len(result.kept),
        len(result.rejected),
        len(result.flagged),
    )
    return result
