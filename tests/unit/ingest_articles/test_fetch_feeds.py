"""Tests for ingest_articles.fetch_feeds module."""

from unittest.mock import Mock, patch

import pytest
import requests

from ingest_articles.fetch_feeds import FeedFetchError, fetch_feed, fetch_feeds
from ingest_articles.models import Source

RSS = b"""<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0">
  <channel>
    <title>Example World News</title>
    <link>https://example.com</link>
    <description>World news</description>
    <item>
      <title>Parliament passes budget</title>
      <link>https://example.com/budget</link>
      <description>Lawmakers approved the annual budget.</description>
      <pubDate>Mon, 01 Jan 2024 12:00:00 GMT</pubDate>
    </item>
    <item>
      <title>Storm reaches the coast</title>
      <link>https://example.com/storm</link>
      <description>Residents prepared for strong winds.</description>
    </item>
  </channel>
</rss>
"""


def _source(source_id: str = "example", **kwargs) -> Source:
    return Source(source_id, "Example", f"https://example.com/{source_id}.xml", **kwargs)


def _response(content: bytes) -> Mock:
    response = Mock()
    response.content = content
    response.raise_for_status.return_value = None
    return response


class TestFetchFeed:
    @patch("ingest_articles.fetch_feeds.requests.get")
    def test_parses_feed_into_payload(self, mock_get) -> None:
        mock_get.return_value = _response(RSS)

        payload = fetch_feed(_source(language="en"), timeout=5)

        assert payload.source_id == "example"
        assert payload.source_name == "Example"
        assert payload.feed_title == "Example World News"
        assert payload.language == "en"
        assert len(payload.items) == 2
        assert payload.items[0]["title"] == "Parliament passes budget"
        assert payload.fetched_at > 0

    @patch("ingest_articles.fetch_feeds.requests.get")
    def test_sends_timeout_and_headers(self, mock_get) -> None:
        mock_get.return_value = _response(RSS)

        fetch_feed(_source(), timeout=3)

        _, kwargs = mock_get.call_args
        assert kwargs["timeout"] == 3
        assert "User-Agent" in kwargs["headers"]
        assert "application/rss+xml" in kwargs["headers"]["Accept"]

    @patch("ingest_articles.fetch_feeds.requests.get")
    def test_http_error_raises_feed_fetch_error(self, mock_get) -> None:
        response = _response(b"")
        response.raise_for_status.side_effect = requests.HTTPError("503 Server Error")
        mock_get.return_value = response

        with pytest.raises(FeedFetchError):
            fetch_feed(_source())

    @patch("ingest_articles.fetch_feeds.requests.get")
    def test_timeout_raises_feed_fetch_error(self, mock_get) -> None:
        mock_get.side_effect = requests.Timeout("timed out")

        with pytest.raises(FeedFetchError):
            fetch_feed(_source())

    @patch("ingest_articles.fetch_feeds.requests.get")
    def test_malformed_feed_raises_feed_fetch_error(self, mock_get) -> None:
        mock_get.return_value = _response(b"<html><body>not a feed")

        with pytest.raises(FeedFetchError):
            fetch_feed(_source())


class TestFetchFeeds:
    @patch("ingest_articles.fetch_feeds.requests.get")
    def test_failing_source_does_not_affect_others(self, mock_get) -> None:
        def fake_get(url, **kwargs):
            if "broken" in url:
                raise requests.ConnectionError("connection refused")
            return _response(RSS)

        mock_get.side_effect = fake_get

        payloads = fetch_feeds([_source("good"), _source("broken"), _source("other")])

        assert sorted(p.source_id for p in payloads) == ["good", "other"]

    @patch("ingest_articles.fetch_feeds.requests.get")
    def test_disabled_sources_skipped(self, mock_get) -> None:
        mock_get.return_value = _response(RSS)

        payloads = fetch_feeds([_source("on"), _source("off", enabled=False)])

        assert [p.source_id for p in payloads] == ["on"]
        assert mock_get.call_count == 1

    @patch("ingest_articles.fetch_feeds.requests.get")
    def test_no_enabled_sources_returns_empty(self, mock_get) -> None:
        assert fetch_feeds([_source(enabled=False)]) == []
        mock_get.assert_not_called()

    @patch("ingest_articles.fetch_feeds.requests.get")
    def test_all_sources_failing_returns_empty(self, mock_get) -> None:
        mock_get.side_effect = requests.ConnectionError("down")

        assert fetch_feeds([_source("a"), _source("b")]) == []
