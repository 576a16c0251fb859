"""Tests for select_brief.select_brief module."""

import pytest

from common.hashing import generate_brief_id
from common.models import ArticleRecord
from select_brief.models import BriefConfig
from select_brief.select_brief import select_brief

GENERATED_AT = 1704110400000  # 2024-01-01T12:00:00Z
MINUTE_MS = 60 * 1000


def _article(id: str, published_at: int, read_time_min: float = 1.0, **kwargs) -> ArticleRecord:
    return ArticleRecord(
        id=id,
        source_id="example",
        source_name="Example",
        title=f"Story {id}",
        summary="",
        content="",
        link=f"https://example.com/{id}",
        published_at=published_at,
        fetched_at=0,
        read_time_min=read_time_min,
        **kwargs,
    )


class TestSelectBrief:
    def test_read_time_budget(self) -> None:
        articles = [_article(f"a{i}", GENERATED_AT - i * MINUTE_MS, read_time_min=3) for i in range(10)]
        articles.append(_article("short", GENERATED_AT - 60 * MINUTE_MS, read_time_min=1))

        brief = select_brief(articles, BriefConfig(max_read_time_min=10), generated_at=GENERATED_AT)

        assert [a.id for a in brief.articles] == ["a0", "a1", "a2", "short"]
        assert brief.total_read_time == 10
        assert brief.article_count == 4
        assert brief.candidate_count == 11

    def test_read_time_never_exceeded(self) -> None:
        read_times = [4.2, 0.7, 3.3, 2.9, 5.1, 0.4, 1.8, 2.2, 6.0, 0.9]
        articles = [_article(f"a{i}", GENERATED_AT - i, read_time_min=t) for i, t in enumerate(read_times)]

        for limit in (0, 1, 5, 7.5, 15):
            brief = select_brief(articles, BriefConfig(max_read_time_min=limit), generated_at=GENERATED_AT)
            assert sum(a.read_time_min for a in brief.articles) <= limit

    def test_most_recent_first(self) -> None:
        old = _article("old", GENERATED_AT - 2 * MINUTE_MS)
        new = _article("new", GENERATED_AT - MINUTE_MS)

        brief = select_brief([old, new], BriefConfig(), generated_at=GENERATED_AT)

        assert [a.id for a in brief.articles] == ["new", "old"]

    def test_at_most_one_high_arousal(self) -> None:
        articles = [
            _article("h1", GENERATED_AT - 1, arousal_score=0.9),
            _article("h2", GENERATED_AT - 2, arousal_score=0.7),
            _article("calm", GENERATED_AT - 3, arousal_score=0.6),
        ]

        brief = select_brief(articles, BriefConfig(), generated_at=GENERATED_AT)

        assert [a.id for a in brief.articles] == ["h1", "calm"]
        assert sum(1 for a in brief.articles if a.arousal_score > 0.6) == 1

    def test_first_article_skips_load_check(self) -> None:
        articles = [
            _article("heavy", GENERATED_AT - 1, emotional_score=-0.9),
            _article("medium", GENERATED_AT - 2, emotional_score=0.5),
            _article("light", GENERATED_AT - 3, emotional_score=0.1),
        ]

        brief = select_brief(articles, BriefConfig(max_arousal_load=0.6), generated_at=GENERATED_AT)

        # (0.9 + 0.5) / 2 = 0.7 is over the limit; (0.9 + 0.1) / 2 = 0.5 is not
        assert [a.id for a in brief.articles] == ["heavy", "light"]
        assert brief.emotional_load == 0.5

    def test_seen_articles_excluded(self) -> None:
        articles = [_article("seen", GENERATED_AT, seen=True), _article("fresh", GENERATED_AT - 1)]

        brief = select_brief(articles, BriefConfig(), generated_at=GENERATED_AT)

        assert [a.id for a in brief.articles] == ["fresh"]
        assert brief.candidate_count == 1

    def test_empty_input(self) -> None:
        brief = select_brief([], BriefConfig(mode="calm"), generated_at=GENERATED_AT)

        assert brief.articles == []
        assert brief.total_read_time == 0
        assert brief.emotional_load == 0
        assert brief.article_count == 0
        assert brief.candidate_count == 0
        assert brief.mode == "calm"

    def test_totals_rounded(self) -> None:
        articles = [
            _article("a", GENERATED_AT - 1, read_time_min=1.111, emotional_score=0.12),
            _article("b", GENERATED_AT - 2, read_time_min=2.222, emotional_score=-0.46),
        ]

        brief = select_brief(articles, BriefConfig(), generated_at=GENERATED_AT)

        assert brief.total_read_time == 3.33
        assert brief.emotional_load == pytest.approx(0.29)

    def test_deterministic_with_fixed_time(self) -> None:
        articles = [_article(f"a{i}", GENERATED_AT - i, read_time_min=2) for i in range(5)]

        first = select_brief(articles, BriefConfig(), generated_at=GENERATED_AT)
        second = select_brief(list(reversed(articles)), BriefConfig(), generated_at=GENERATED_AT)

        assert first == second
        assert first.id == generate_brief_id(GENERATED_AT, "2024-01-01")
        assert first.generated_at == GENERATED_AT

    def test_generated_at_defaults_to_now(self) -> None:
        brief = select_brief([], BriefConfig())
        assert brief.generated_at > GENERATED_AT
