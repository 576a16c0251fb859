"""Helper functions for run_pipeline CLI."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

from ingest_articles.models import Source
from run_pipeline.export import EXPORT_FORMATS
from select_brief.models import MODES

logger = logging.getLogger(__name__)


def select_sources(sources: Sequence[Source], value: str | None) -> list[Source]:
    '''Restrict the configured sources to the --sources argument.'''

    # If no value is provided or if "all" is specified, keep every source
    if not value or value.strip().lower() == "all":
        return list(sources)

    by_id = {s.id: s for s in sources}
    parsed = [s.strip() for s in value.split(",") if s.strip()]

    for source_id in parsed:
        if source_id not in by_id:
            logger.warning("Invalid source: %s", source_id)

    selected = [by_id[s] for s in parsed if s in by_id]
    if not selected:
        raise ValueError(f"No valid sources provided. Valid sources: {', '.join(sorted(by_id))}")

    return selected


def load_seen_ids(path: Path | None) -> frozenset[str]:
    '''Read article ids (one per line) the reader has already seen.'''
    if path is None:
        return frozenset()
    if not path.exists():
        logger.warning("Seen file %s not found, treating all articles as unseen", path)
        return frozenset()
    with path.open() as f:
        return frozenset(line.strip() for line in f if line.strip())


def parse_run_pipeline_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    '''Parse CLI arguments for run_pipeline.'''

    parser = argparse.ArgumentParser(description="Build today's news brief")

    # Config options
    parser.add_argument(
        "--config",
        default=None,
        help="Config name (prod, test) or path to a YAML file (default: $NEWSY_CONFIG or prod)",
    )
    parser.add_argument(
        "--sources",
        default=None,
        help="Comma-separated list of source ids (default: all configured).",
    )

    # Budget overrides
    parser.add_argument("--max-read-time", type=float, default=None, help="Read-time budget in minutes")
    parser.add_argument("--max-arousal-load", type=float, default=None, help="Mean emotional load limit (0-1)")
    parser.add_argument("--mode", choices=MODES, default=None)
    parser.add_argument(
        "--seen-file",
        type=Path,
        default=None,
        help="File of already seen article ids, one per line",
    )

    # Output options
    parser.add_argument(
        "--format",
        dest="fmt",
        choices=sorted(EXPORT_FORMATS),
        default="markdown",
        help="Output format (default: markdown)",
    )
    parser.add_argument("--load-local", action="store_true", help="Save the brief JSON under output/")
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])

    return parser.parse_args(argv)
