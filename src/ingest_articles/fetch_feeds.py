"""Concurrent RSS/Atom feed fetching."""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Iterable, Optional

import feedparser
import requests

from common.datetime import now_ms
from ingest_articles.models import RawFeedPayload, Source
from ingest_articles.sources import enabled_sources

logger = logging.getLogger(__name__)

USER_AGENT = "newsy-pipeline/1.0 (RSS reader)"
ACCEPT = "application/rss+xml, application/atom+xml, application/xml, text/xml"


class FeedFetchError(Exception):
    """A feed could not be retrieved or did not parse into any items."""


def fetch_feed(source: Source, timeout: float = 10.0) -> RawFeedPayload:
    """Fetch and parse a single source's feed.

    Raises:
        FeedFetchError: On network/HTTP failure or a malformed feed.
    """
    try:
        response = requests.get(
            source.feed_url,
            timeout=timeout,
            headers={"User-Agent": USER_AGENT, "Accept": ACCEPT},
        )
        response.raise_for_status()
    except requests.RequestException as e:
        raise FeedFetchError(f"{source.id}: {e}") from e

    feed = feedparser.parse(response.content)
    if feed.bozo and not feed.entries:
        raise FeedFetchError(f"{source.id}: malformed feed ({feed.get('bozo_exception')})")

    return RawFeedPayload(
        source_id=source.id,
        source_name=source.name,
        feed_title=feed.feed.get("title") or source.name,
        fetched_at=now_ms(),
        items=list(feed.entries),
        language=source.language,
    )


def _fetch_source(source: Source, timeout: float) -> Optional[RawFeedPayload]:
    try:
        return fetch_feed(source, timeout)
    except Exception as e:
        logger.warning("Failed to fetch %s: %s", source.id, e)
        return None


def fetch_feeds(
    sources: Iterable[Source],
    timeout: float = 10.0,
    max_workers: int = 16,
) -> list[RawFeedPayload]:
    """Fetch all enabled sources in parallel.

    A failing source is logged and omitted; it never affects the others.

    Args:
        sources: Source list (disabled sources are skipped).
        timeout: Per-request timeout in seconds.
        max_workers: Thread pool size.

    Returns:
        One payload per successfully fetched source, in completion order.
    """
    enabled = enabled_sources(sources)
    if not enabled:
        logger.warning("No enabled sources to fetch")
        return []

    logger.info("Fetching %d sources", len(enabled))
    payloads = []
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = {
            executor.submit(_fetch_source, source, timeout): source.id
            for source in enabled
        }
        for future in as_completed(futures):
            payload = future.result()
            if payload is not None:
                payloads.append(payload)

    item_count = sum(len(p.items) for p in payloads)
    logger.info("Fetched %d/%d feeds, %d raw items", len(payloads), len(enabled), item_count)
    return payloads
