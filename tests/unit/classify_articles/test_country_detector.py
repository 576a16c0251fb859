"""Tests for classify_articles.country_detector module."""

from common.models import ArticleRecord
from classify_articles.country_detector import country_name, detect_country, score_countries


def _article(title: str, summary: str = "") -> ArticleRecord:
    return ArticleRecord(
        id="a1",
        source_id="example",
        source_name="Example",
        title=title,
        summary=summary,
        content="",
        link="",
        published_at=0,
        fetched_at=0,
    )


class TestScoreCountries:
    def test_title_matches_count_double(self) -> None:
        assert score_countries("Ukraine update", "")["UA"] == 6
        assert score_countries("Update", "News from Ukraine")["UA"] == 3

    def test_no_match(self) -> None:
        assert score_countries("Qwerty zxcvb", "plonk") == {}


class TestDetectCountry:
    def test_strongest_country_wins(self) -> None:
        assert detect_country(_article("Macron visits Berlin", "The French president met officials in France")) == "FR"

    def test_below_threshold_returns_none(self) -> None:
        # A single weight-2 body mention scores 2, which is not above the threshold
        assert detect_country(_article("Officials meet", "Talks took place in Bucharest")) is None

    def test_nothing_detected(self) -> None:
        assert detect_country(_article("Qwerty zxcvb")) is None


class TestCountryName:
    def test_known_code(self) -> None:
        assert country_name("FR") == "France"

    def test_prefers_common_name(self) -> None:
        assert country_name("TW") == "Taiwan"

    def test_unknown_or_empty(self) -> None:
        assert country_name("QQ") is None
        assert country_name(None) is None
        assert country_name("") is None
