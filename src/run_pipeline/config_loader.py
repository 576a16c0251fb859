"""YAML configuration loader for the pipeline."""

import dataclasses
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

from ingest_articles.models import Source
from ingest_articles.sources import DEFAULT_SOURCES
from select_brief.models import BriefConfig

# Config directory relative to this file
CONFIG_DIR = Path(__file__).parent / "configs"
CONFIG_ENV_VAR = "NEWSY_CONFIG"
DEFAULT_CONFIG = "prod"

_SOURCE_FIELDS = frozenset(f.name for f in dataclasses.fields(Source))


@dataclass
class FetchConfig:
    """Configuration for feed fetching."""

    timeout: float = 10.0
    max_workers: int = 16

    def __post_init__(self) -> None:
        if self.timeout <= 0:
            raise ValueError(f"Invalid fetch timeout: {self.timeout}. Must be > 0")
        if self.max_workers <= 0:
            raise ValueError(f"Invalid max_workers: {self.max_workers}. Must be > 0")


@dataclass
class PipelineConfig:
    brief: BriefConfig = field(default_factory=BriefConfig)
    fetch: FetchConfig = field(default_factory=FetchConfig)
    words_per_minute: int = 225
    dedup_threshold: float = 0.7
    group_threshold: float = 0.20
    sources: list[Source] = field(default_factory=lambda: list(DEFAULT_SOURCES))

    def __post_init__(self) -> None:
        if self.words_per_minute <= 0:
            raise ValueError(f"Invalid words_per_minute: {self.words_per_minute}. Must be > 0")

        for name in ("dedup_threshold", "group_threshold"):
            value = getattr(self, name)
            if not 0 <= value <= 1:
                raise ValueError(f"Invalid {name}: {value}. Must be between 0 and 1")


def _parse_sources(data: dict) -> list[Source]:
    """Parse the optional source list, falling back to the defaults."""
    entries = data.get("sources")
    if not entries:
        return list(DEFAULT_SOURCES)

    sources = []
    for entry in entries:
        missing = [key for key in ("id", "name", "feed_url") if not entry.get(key)]
        if missing:
            raise ValueError(f"Source entry {entry} is missing {', '.join(missing)}")
        unknown = sorted(set(entry) - _SOURCE_FIELDS)
        if unknown:
            raise ValueError(f"Source {entry['id']} has unknown keys: {', '.join(unknown)}")
        sources.append(Source(**entry))
    return sources


def config_from_dict(data: dict) -> PipelineConfig:
    """Build a PipelineConfig from parsed YAML data."""
    return PipelineConfig(
        brief=BriefConfig(**(data.get("brief") or {})),
        fetch=FetchConfig(**(data.get("fetch") or {})),
        words_per_minute=data.get("words_per_minute", 225),
        dedup_threshold=data.get("dedup_threshold", 0.7),
        group_threshold=data.get("group_threshold", 0.20),
        sources=_parse_sources(data),
    )


def resolve_config_path(name: Optional[str] = None, config_dir: Path = CONFIG_DIR) -> Path:
    """Turn a config name or a YAML path into an existing file path.

    Names resolve to ``config_dir/<name>.yaml``. Without a name,
    NEWSY_CONFIG is checked before falling back to 'prod'.

    Raises:
        FileNotFoundError: If the config file doesn't exist.
    """
    if not name:
        name = os.environ.get(CONFIG_ENV_VAR) or DEFAULT_CONFIG

    if "/" in name or name.endswith((".yaml", ".yml")):
        config_path = Path(name)
    else:
        config_path = config_dir / f"{name}.yaml"

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")
    return config_path


def load_config(name: Optional[str] = None) -> PipelineConfig:
    """Load pipeline config by name (e.g., 'test' or 'prod') or path.

    Raises:
        FileNotFoundError: If the config file doesn't exist.
        ValueError: If any value fails validation.
    """
    with open(resolve_config_path(name)) as f:
        data = yaml.safe_load(f) or {}
    return config_from_dict(data)
