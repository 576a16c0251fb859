"""Data models for brief selection."""

from dataclasses import dataclass, field

from common.models import ArticleRecord

MODES = ("calm", "overview", "deep", "monitoring", "slow")
DEFAULT_MODE = "overview"


@dataclass
class BriefConfig:
    """Cognitive budget for one brief."""

    max_read_time_min: float = 15
    max_arousal_load: float = 0.6
    mode: str = DEFAULT_MODE

    def __post_init__(self) -> None:
        if self.max_read_time_min < 0:
            raise ValueError(f"max_read_time_min must be >= 0, got {self.max_read_time_min}")

        if not 0 <= self.max_arousal_load <= 1:
            raise ValueError(
                f"max_arousal_load must be between 0 and 1, got {self.max_arousal_load}"
            )

        if self.mode not in MODES:
            raise ValueError(f"Invalid mode: {self.mode}. Must be one of {list(MODES)}")


@dataclass
class DailyBrief:
    id: str
    generated_at: int  # epoch ms
    articles: list[ArticleRecord] = field(default_factory=list)
    total_read_time: float = 0.0
    emotional_load: float = 0.0
    mode: str = DEFAULT_MODE
    article_count: int = 0
    candidate_count: int = 0
