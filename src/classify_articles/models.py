"""Data models for classify_articles pipeline stage."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Classification:
    """Domain, register and country for one article.

    Confidences are the winning raw scores, not normalized.
    """
    domain: Optional[str]
    register: str
    domain_confidence: int
    register_confidence: int
    country_code: Optional[str]
