"""Tests for run_pipeline.projection module."""

from common.models import ArticleRecord
from filter_articles.models import FlaggedArticle, RejectedArticle
from group_stories.group_stories import group_stories
from run_pipeline.pipeline import PipelineOutput
from run_pipeline.projection import project_article, project_for_client
from select_brief.models import DailyBrief

SHARED = [f"term{i}" for i in range(12)]


def _article(id: str, source_id: str, tokens, title: str, **kwargs) -> ArticleRecord:
    return ArticleRecord(
        id=id,
        source_id=source_id,
        source_name=source_id.title(),
        title=title,
        summary=f"{title}. More detail.",
        content="",
        link=f"https://example.com/{id}",
        published_at=1704110400000,
        fetched_at=1704110400000,
        tokens=tuple(tokens),
        **kwargs,
    )


def _output() -> PipelineOutput:
    grouped = [
        _article("g1", "bbc", SHARED, "Kyiv Talks In Geneva resume", country_code="UA", domain="politics"),
        _article("g2", "npr", SHARED, "Kyiv Talks In Geneva continue", country_code="UA", domain="politics"),
    ]
    single = _article(
        "s1", "nature", ["species"], "New species found", domain="science", content_flags=("quality: stub article",)
    )
    grouping = group_stories(grouped + [single])
    articles = grouped + [single]
    brief = DailyBrief(
        id="brief1",
        generated_at=1704110400000,
        articles=articles,
        total_read_time=1.5,
        emotional_load=0.2,
        mode="overview",
        article_count=3,
        candidate_count=5,
    )
    return PipelineOutput(
        brief=brief,
        groups=grouping.groups,
        ungrouped=grouping.ungrouped,
        rejected=[RejectedArticle("r1", "Spam", "bbc", ["spam: promotional"])],
        flagged=[FlaggedArticle("s1", "New species found", ["quality: stub article"])],
    )


def _keys(value) -> set:
    if isinstance(value, dict):
        return set(value) | set().union(*(_keys(v) for v in value.values()))
    if isinstance(value, list):
        return set().union(*(_keys(v) for v in value))
    return set()


class TestProjectForClient:
    def test_brief_totals(self) -> None:
        result = project_for_client(_output())

        assert result["id"] == "brief1"
        assert result["generatedAt"] == 1704110400000
        assert result["mode"] == "overview"
        assert result["totalReadTime"] == 1.5
        assert result["emotionalLoad"] == 0.2
        assert result["articleCount"] == 3
        assert result["candidateCount"] == 5
        assert result["rejectedCount"] == 1
        assert result["flaggedCount"] == 1
        assert result["groupCount"] == 1

    def test_groups_projected(self) -> None:
        (group,) = project_for_client(_output())["groups"]

        assert group["articleCount"] == 2
        assert group["countryCode"] == "UA"
        assert group["countryName"] == "Ukraine"
        assert len(group["sharedTerms"]) == 10
        assert group["sharedTerms"][0] == {"term": "term0", "count": 2}
        assert {"entity": "Kyiv Talks In Geneva", "count": 2} in group["sharedEntities"]
        assert group["representative"]["id"] in {"g1", "g2"}
        assert [s["articleId"] for s in group["sources"]] == ["g1", "g2"]
        assert group["publishedRange"] == {"earliest": 1704110400000, "latest": 1704110400000}

    def test_ungrouped_articles_projected(self) -> None:
        (article,) = project_for_client(_output())["articles"]

        assert article["id"] == "s1"
        assert article["sourceName"] == "Nature"
        assert article["contentFlags"] == ["quality: stub article"]
        assert article["countryCode"] is None
        assert article["countryName"] is None
        assert article["content"] == article["summary"]

    def test_internal_fields_never_exposed(self) -> None:
        keys = _keys(project_for_client(_output()))

        assert "tokens" not in keys
        assert "seen" not in keys
        assert not any("_" in key for key in keys)


class TestProjectArticle:
    def test_content_falls_back_to_summary(self) -> None:
        article = _article("x", "bbc", [], "Title here")
        assert project_article(article)["content"] == "Title here. More detail."
