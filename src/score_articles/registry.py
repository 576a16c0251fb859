"""Per-language lexicon registry for the scorer.

A lexicon supplies a token -> sentiment weight lookup (typically in
[-5, 5]) and a high-arousal term test. English is registered by
score_articles at import; other languages can be added at runtime.
"""

import logging
from dataclasses import dataclass
from typing import AbstractSet, Mapping, Optional, Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class LexiconProvider(Protocol):
    def sentiment_of(self, token: str) -> Optional[int]:
        ...

    def is_arousal(self, token: str) -> bool:
        ...


@dataclass(frozen=True)
class MappingLexicon:
    """Lexicon backed by a read-only mapping and a set."""

    sentiment: Mapping[str, int]
    arousal: AbstractSet[str]

    def sentiment_of(self, token: str) -> Optional[int]:
        return self.sentiment.get(token)

    def is_arousal(self, token: str) -> bool:
        return token in self.arousal


_LEXICONS: dict[str, LexiconProvider] = {}


def register_lexicon(lang: str, provider: LexiconProvider) -> None:
    """Register (or replace) the lexicon for a language code.

    Raises:
        TypeError: If provider does not implement sentiment_of/is_arousal.
    """
    if not isinstance(provider, LexiconProvider):
        raise TypeError(
            f"Lexicon for '{lang}' must provide sentiment_of() and is_arousal()"
        )
    _LEXICONS[lang] = provider
    logger.debug("Registered lexicon for %s", lang)


def get_lexicon(lang: str) -> Optional[LexiconProvider]:
    return _LEXICONS.get(lang)


def has_lexicon(lang: str) -> bool:
    return lang in _LEXICONS


def available_languages() -> list[str]:
    return list(_LEXICONS)
