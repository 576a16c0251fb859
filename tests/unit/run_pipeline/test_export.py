"""Tests for run_pipeline.export module."""

import json

import pytest

from common.models import ArticleRecord
from group_stories.group_stories import group_stories
from run_pipeline.export import EXPORT_FORMATS, export_brief
from run_pipeline.pipeline import PipelineOutput
from run_pipeline.projection import project_for_client
from select_brief.models import DailyBrief

TOKENS = ["ceasefire", "talks", "geneva", "ukraine"]


def _article(id: str, source_id: str, title: str, tokens=TOKENS, **kwargs) -> ArticleRecord:
    return ArticleRecord(
        id=id,
        source_id=source_id,
        source_name=source_id.upper(),
        title=title,
        summary=f"Summary of {title.lower()}.",
        content="",
        link=f"https://example.com/{id}",
        published_at=1704110400000,
        fetched_at=1704110400000,
        tokens=tuple(tokens),
        read_time_min=0.5,
        **kwargs,
    )


@pytest.fixture
def output() -> PipelineOutput:
    articles = [
        _article("a", "bbc", "Ceasefire talks open in Geneva", country_code="UA", domain="politics"),
        _article("b", "npr", "Geneva hosts ceasefire talks", country_code="UA", domain="politics"),
        _article("c", "nature", "Telescope spots distant galaxy", tokens=["telescope", "galaxy"], domain="science"),
    ]
    grouping = group_stories(articles)
    brief = DailyBrief(
        id="brief1",
        generated_at=1704110400000,
        articles=articles,
        total_read_time=1.5,
        emotional_load=0.1,
        mode="calm",
        article_count=3,
        candidate_count=4,
    )
    return PipelineOutput(brief=brief, groups=grouping.groups, ungrouped=grouping.ungrouped)


class TestExportBrief:
    def test_json_is_client_projection(self, output) -> None:
        assert json.loads(export_brief(output, "json")) == project_for_client(output)

    def test_markdown_digest(self, output) -> None:
        text = export_brief(output, "markdown")

        assert text.startswith("# Daily brief 2024-01-01\n")
        assert "3 of 4 articles, 1.5 min, emotional load 0.1 (calm mode)" in text
        assert "## Stories" in text
        assert "### Geneva hosts ceasefire talks" in text
        assert "- [Ceasefire talks open in Geneva](https://example.com/a) (BBC)" in text
        assert "## Articles" in text
        assert "### [Telescope spots distant galaxy](https://example.com/c)" in text
        assert "Ukraine" in text

    def test_raw_digest(self, output) -> None:
        lines = export_brief(output, "raw").splitlines()

        assert lines[0].startswith("Daily brief 2024-01-01:")
        assert "* Geneva hosts ceasefire talks [2 sources]" in lines
        assert "- Telescope spots distant galaxy (NATURE)" in lines

    def test_default_format_is_json(self, output) -> None:
        assert export_brief(output) == export_brief(output, "json")

    def test_unknown_format_raises(self, output) -> None:
        with pytest.raises(ValueError, match="Available: json, markdown, raw"):
            export_brief(output, "pdf")

    def test_formats(self) -> None:
        assert set(EXPORT_FORMATS) == {"json", "markdown", "raw"}
