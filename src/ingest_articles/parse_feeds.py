"""Convert raw feed payloads into partial ArticleRecords."""

import html
import logging
import re
from typing import Any, Iterable, Mapping

from common.datetime import parse_epoch_ms
from common.hashing import generate_article_id
from common.models import ArticleRecord
from ingest_articles.models import RawFeedPayload

logger = logging.getLogger(__name__)

_SCRIPT_STYLE = re.compile(r"<(script|style)[^>]*>.*?</\1>", re.IGNORECASE | re.DOTALL)
_TAG = re.compile(r"<[^>]+>")
_WHITESPACE = re.compile(r"\s+")


def strip_html(text: str | None) -> str:
    """Strip markup, decode entities and collapse whitespace."""
    if not text:
        return ""
    text = _SCRIPT_STYLE.sub("", text)
    text = _TAG.sub(" ", text)
    text = html.unescape(text)
    return _WHITESPACE.sub(" ", text).strip()


def _entry_content(entry: Mapping[str, Any]) -> str:
    """Full body (content:encoded), if the feed carries one."""
    content = entry.get("content")
    if isinstance(content, list):
        return " ".join(c.get("value") or "" for c in content)
    return content or ""


def _entry_categories(entry: Mapping[str, Any]) -> tuple[str, ...]:
    categories = []
    for tag in entry.get("tags") or []:
        term = tag if isinstance(tag, str) else tag.get("term")
        if term:
            categories.append(str(term))
    return tuple(categories)


def parse_entry(entry: Mapping[str, Any], payload: RawFeedPayload) -> ArticleRecord | None:
    """Parse a single feed entry. Returns None when the title is empty."""
    title = strip_html(entry.get("title"))
    if not title:
        return None

    content = strip_html(_entry_content(entry))
    summary = strip_html(entry.get("summary")) or content
    link = (entry.get("link") or "").strip()
    published = entry.get("published") or entry.get("updated")

    return ArticleRecord(
        id=generate_article_id(payload.source_id, link, title),
        source_id=payload.source_id,
        source_name=payload.source_name,
        title=title,
        summary=summary,
        content=content or summary,
        link=link,
        published_at=parse_epoch_ms(published, payload.fetched_at),
        fetched_at=payload.fetched_at,
        categories=_entry_categories(entry),
        language=payload.language,
    )


def parse_payload(payload: RawFeedPayload) -> list[ArticleRecord]:
    """Parse all items of one payload, dropping untitled items."""
    articles = []
    for entry in payload.items:
        article = parse_entry(entry, payload)
        if article is not None:
            articles.append(article)
    return articles


def parse_payloads(payloads: Iterable[RawFeedPayload]) -> list[ArticleRecord]:
    """Parse multiple payloads into a flat article list."""
    articles = []
    for payload in payloads:
        articles.extend(parse_payload(payload))
    logger.info("Parsed %d articles", len(articles))
    return articles
