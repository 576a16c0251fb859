"""CLI for building the daily brief."""

from __future__ import annotations

import dataclasses
import logging
from typing import Sequence

from dotenv import load_dotenv

from common.cli_helpers import save_json_local, setup_logging
from common.datetime import from_epoch_ms
from run_pipeline.config_loader import PipelineConfig, load_config
from run_pipeline.export import export_brief
from run_pipeline.helpers import load_seen_ids, parse_run_pipeline_args, select_sources
from run_pipeline.pipeline import run_pipeline
from run_pipeline.projection import project_for_client

logger = logging.getLogger(__name__)


def apply_overrides(config: PipelineConfig, args) -> PipelineConfig:
    """Apply --max-read-time/--max-arousal-load/--mode on top of the config."""
    overrides = {
        "max_read_time_min": args.max_read_time,
        "max_arousal_load": args.max_arousal_load,
        "mode": args.mode,
    }
    overrides = {k: v for k, v in overrides.items() if v is not None}
    if not overrides:
        return config
    # replace() re-runs BriefConfig validation
    return dataclasses.replace(config, brief=dataclasses.replace(config.brief, **overrides))


def main(argv: Sequence[str] | None = None) -> None:
    load_dotenv()

    args = parse_run_pipeline_args(argv)
    setup_logging(args.log_level)
    config = apply_overrides(load_config(args.config), args)
    sources = select_sources(config.sources, args.sources)
    seen_ids = load_seen_ids(args.seen_file)

    output = run_pipeline(sources, config, seen_ids)

    if not output.brief.articles:
        logger.warning("No articles selected for the brief")

    print(export_brief(output, args.fmt))

    if args.load_local:
        path = save_json_local(
            project_for_client(output),
            "daily_brief",
            from_epoch_ms(output.brief.generated_at),
        )
        logger.info("Saved brief to %s", path)


if __name__ == "__main__":
    main()
