"""Tests for run_pipeline.helpers module."""

from pathlib import Path

import pytest

from ingest_articles.models import Source
from run_pipeline.helpers import load_seen_ids, parse_run_pipeline_args, select_sources

SOURCES = [
    Source("bbc-world", "BBC", "https://bbc.example/rss"),
    Source("npr-news", "NPR", "https://npr.example/rss"),
]


class TestSelectSources:
    def test_none_keeps_all(self) -> None:
        assert select_sources(SOURCES, None) == SOURCES

    def test_all_keeps_all(self) -> None:
        assert select_sources(SOURCES, " ALL ") == SOURCES

    def test_filters_and_skips_invalid(self) -> None:
        assert select_sources(SOURCES, "npr-news, unknown") == [SOURCES[1]]

    def test_no_valid_sources_raises(self) -> None:
        with pytest.raises(ValueError, match="No valid sources"):
            select_sources(SOURCES, "unknown")


class TestLoadSeenIds:
    def test_none(self) -> None:
        assert load_seen_ids(None) == frozenset()

    def test_reads_ids_ignoring_blank_lines(self, tmp_path) -> None:
        path = tmp_path / "seen.txt"
        path.write_text("abc\n\n  def  \n")
        assert load_seen_ids(path) == {"abc", "def"}

    def test_missing_file_is_empty(self, tmp_path) -> None:
        assert load_seen_ids(tmp_path / "missing.txt") == frozenset()


class TestParseRunPipelineArgs:
    def test_defaults(self) -> None:
        args = parse_run_pipeline_args([])
        assert args.config is None
        assert args.max_read_time is None
        assert args.mode is None
        assert args.fmt == "markdown"
        assert args.load_local is False
        assert args.log_level == "INFO"

    def test_overrides(self) -> None:
        args = parse_run_pipeline_args(
            ["--config", "test", "--max-read-time", "7.5", "--max-arousal-load", "0.4",
             "--mode", "deep", "--seen-file", "seen.txt", "--format", "json", "--load-local"]
        )
        assert args.config == "test"
        assert args.max_read_time == 7.5
        assert args.max_arousal_load == 0.4
        assert args.mode == "deep"
        assert args.seen_file == Path("seen.txt")
        assert args.fmt == "json"
        assert args.load_local is True

    def test_unknown_mode_rejected(self) -> None:
        with pytest.raises(SystemExit):
            parse_run_pipeline_args(["--mode", "frantic"])
