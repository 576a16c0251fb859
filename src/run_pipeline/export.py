"""Render a pipeline output as json, markdown or raw text."""

import json
from typing import Any, Callable

from common.datetime import from_epoch_ms
from run_pipeline.pipeline import PipelineOutput
from run_pipeline.projection import project_for_client


def _brief_date(brief: dict[str, Any]) -> str:
    return from_epoch_ms(brief["generatedAt"]).strftime("%Y-%m-%d")


def _totals_line(brief: dict[str, Any]) -> str:
    return (
        f"{brief['articleCount']} of {brief['candidateCount']} articles, "
        f"{brief['totalReadTime']} min, emotional load {brief['emotionalLoad']} "
        f"({brief['mode']} mode)"
    )


def _labels(item: dict[str, Any]) -> str:
    labels = [item.get("domain"), item.get("register"), item.get("countryName")]
    return " · ".join(label for label in labels if label)


def format_json(output: PipelineOutput) -> str:
    return json.dumps(project_for_client(output), ensure_ascii=False, indent=2)


def format_markdown(output: PipelineOutput) -> str:
    brief = project_for_client(output)
    lines = [f"# Daily brief {_brief_date(brief)}", "", _totals_line(brief), ""]

    if brief["groups"]:
        lines += ["## Stories", ""]
        for group in brief["groups"]:
            lines.append(f"### {group['headline']}")
            labels = _labels(group)
            if labels:
                lines.append(f"_{labels}_")
            lines.append("")
            for source in group["sources"]:
                lines.append(f"- [{source['title']}]({source['link']}) ({source['sourceName']})")
            lines.append("")

    if brief["articles"]:
        lines += ["## Articles", ""]
        for article in brief["articles"]:
            lines.append(f"### [{article['title']}]({article['link']})")
            meta = f"{article['sourceName']}, {article['readTimeMin']} min"
            labels = _labels(article)
            lines.append(f"_{meta} · {labels}_" if labels else f"_{meta}_")
            if article["summary"]:
                lines += ["", article["summary"]]
            lines.append("")

    return "\n".join(lines).rstrip() + "\n"


def format_raw(output: PipelineOutput) -> str:
    brief = project_for_client(output)
    lines = [f"Daily brief {_brief_date(brief)}: {_totals_line(brief)}"]
    for group in brief["groups"]:
        lines.append(f"* {group['headline']} [{group['articleCount']} sources]")
    for article in brief["articles"]:
        lines.append(f"- {article['title']} ({article['sourceName']})")
    return "\n".join(lines) + "\n"


EXPORT_FORMATS: dict[str, Callable[[PipelineOutput], str]] = {
    "json": format_json,
    "markdown": format_markdown,
    "raw": format_raw,
}


def export_brief(output: PipelineOutput, fmt: str = "json") -> str:
    """Render output in the given format.

    Raises:
        ValueError: If fmt is not a known format.
    """
    formatter = EXPORT_FORMATS.get(fmt)
    if formatter is None:
        raise ValueError(f"Unknown format: {fmt}. Available: {', '.join(EXPORT_FORMATS)}")
    return formatter(output)
