"""Client-safe projection of pipeline output.

Keys are camelCase. Internal fields (tokens, seen, language, fetch time)
never leave the server.
"""

from typing import Any, Optional

from classify_articles.country_detector import country_name
from common.models import ArticleRecord
from group_stories.models import SourceRef, StoryGroup
from run_pipeline.pipeline import PipelineOutput

MAX_SHARED_TERMS = 10
MAX_SHARED_ENTITIES = 8


def _country(code: Optional[str]) -> dict[str, Optional[str]]:
    return {"countryCode": code or None, "countryName": country_name(code)}


def project_article(article: ArticleRecord) -> dict[str, Any]:
    return {
        "id": article.id,
        "title": article.title,
        "summary": article.summary,
        "content": article.content or article.summary or "",
        "link": article.link,
        "sourceName": article.source_name,
        "sourceId": article.source_id,
        "publishedAt": article.published_at,
        "readTimeMin": article.read_time_min,
        "emotionalScore": article.emotional_score,
        "arousalScore": article.arousal_score,
        "categories": list(article.categories),
        "domain": article.domain,
        "register": article.register,
        **_country(article.country_code),
        "domainConfidence": article.domain_confidence,
        "registerConfidence": article.register_confidence,
        "contentFlags": list(article.content_flags),
    }


def project_source(ref: SourceRef) -> dict[str, Any]:
    return {
        "sourceId": ref.source_id,
        "sourceName": ref.source_name,
        "articleId": ref.article_id,
        "title": ref.title,
        "link": ref.link,
        "summary": ref.summary,
        "content": ref.content,
        "publishedAt": ref.published_at,
        "readTimeMin": ref.read_time_min,
        "emotionalScore": ref.emotional_score,
        "arousalScore": ref.arousal_score,
    }


def project_group(group: StoryGroup) -> dict[str, Any]:
    return {
        "groupId": group.group_id,
        "headline": group.headline,
        "domain": group.domain,
        "register": group.register,
        **_country(group.country_code),
        "articleCount": group.article_count,
        "readTimeMin": group.read_time_min,
        "emotionalScore": group.emotional_score,
        "arousalScore": group.arousal_score,
        "publishedRange": {
            "earliest": group.published_range.earliest,
            "latest": group.published_range.latest,
        },
        "sharedTerms": [
            {"term": term, "count": count}
            for term, count in group.shared_terms[:MAX_SHARED_TERMS]
        ],
        "sharedEntities": [
            {"entity": entity, "count": count}
            for entity, count in group.shared_entities[:MAX_SHARED_ENTITIES]
        ],
        "representative": project_article(group.representative),
        "sources": [project_source(ref) for ref in group.sources],
    }


def project_for_client(output: PipelineOutput) -> dict[str, Any]:
    """Reduce a PipelineOutput to the dict a client is allowed to see."""
    brief = output.brief
    return {
        "id": brief.id,
        "generatedAt": brief.generated_at,
        "mode": brief.mode,
        "totalReadTime": brief.total_read_time,
        "emotionalLoad": brief.emotional_load,
        "articleCount": brief.article_count,
        "candidateCount": brief.candidate_count,
        "rejectedCount": len(output.rejected),
        "flaggedCount": len(output.flagged),
        "groupCount": len(output.groups),
        "groups": [project_group(g) for g in output.groups],
        "articles": [project_article(a) for a in output.ungrouped],
    }
