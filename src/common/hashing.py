"""Hashing utilities."""

import hashlib
from typing import Iterable


def _short_sha256(value: str) -> str:
    return hashlib.sha256(value.encode()).hexdigest()[:16]


def generate_article_id(source_id: str, link: str, title: str) -> str:
    """Generate a stable article ID from source, link and title."""
    return _short_sha256(f"{source_id}|{link}|{title}")


def generate_group_id(article_ids: Iterable[str]) -> str:
    """Generate a story group ID from its member article IDs (order-independent)."""
    return _short_sha256("|".join(sorted(article_ids)))


def generate_brief_id(generated_at_ms: int, date_str: str) -> str:
    """Generate a brief ID from the generation date and timestamp."""
    return _short_sha256(f"brief-{date_str}-{generated_at_ms}")
