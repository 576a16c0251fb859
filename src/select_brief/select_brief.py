"""Select the articles that fit a cognitive budget.

Greedy walk over unseen articles, most recent first. An article is
included only if it keeps the brief within the read-time limit, the
high-arousal allowance and the mean emotional load limit. Articles that
miss the budget are skipped and the walk continues.
"""

import logging
from typing import Iterable, Optional

from common.datetime import from_epoch_ms, now_ms
from common.hashing import generate_brief_id
from common.models import ArticleRecord
from select_brief.models import BriefConfig, DailyBrief

logger = logging.getLogger(__name__)

HIGH_AROUSAL = 0.6
MAX_HIGH_AROUSAL = 1


def is_high_arousal(article: ArticleRecord) -> bool:
    return article.arousal_score > HIGH_AROUSAL


def select_brief(
    articles: Iterable[ArticleRecord],
    config: BriefConfig,
    generated_at: Optional[int] = None,
) -> DailyBrief:
    """Build a DailyBrief from scored, deduplicated articles.

    Args:
        articles: Candidate articles; seen articles are ignored.
        config: Budget limits and mode.
        generated_at: Generation time in epoch ms (defaults to now).

    Returns:
        DailyBrief with the selected articles in selection order.
    """
    candidates = sorted(
        (a for a in articles if not a.seen),
        key=lambda a: a.published_at,
        reverse=True,
    )
    if not candidates:
        logger.warning("No unseen candidates for the brief")

    selected: list[ArticleRecord] = []
    total_read_time = 0.0
    emotional_sum = 0.0
    high_arousal_count = 0

    for article in candidates:
        if total_read_time + article.read_time_min > config.max_read_time_min:
            continue

        high_arousal = is_high_arousal(article)
        if high_arousal and high_arousal_count >= MAX_HIGH_AROUSAL:
            continue

        # The first article is admitted on read time and arousal alone
        emotional = abs(article.emotional_score)
        projected_load = (emotional_sum + emotional) / (len(selected) + 1)
        if selected and projected_load > config.max_arousal_load:
            continue

        selected.append(article)
        total_read_time += article.read_time_min
        emotional_sum += emotional
        if high_arousal:
            high_arousal_count += 1

    if generated_at is None:
        generated_at = now_ms()
    date_str = from_epoch_ms(generated_at).strftime("%Y-%m-%d")

    brief = DailyBrief(
        id=generate_brief_id(generated_at, date_str),
        generated_at=generated_at,
        articles=selected,
        total_read_time=round(total_read_time, 2),
        emotional_load=round(emotional_sum / len(selected), 2) if selected else 0.0,
        mode=config.mode,
        article_count=len(selected),
        candidate_count=len(candidates),
    )
    logger.info(
        "Selected %d/%d articles (%.2f min, load %.2f)",
        brief.article_count,
        brief.candidate_count,
        brief.total_read_time,
        brief.emotional_load,
    )
    return brief
