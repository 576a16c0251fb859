"""Feed category string -> domain.

Keys are lowercase. Unmapped categories fall through to keyword scoring.
"""

from types import MappingProxyType

CATEGORY_TO_DOMAIN = MappingProxyType({
    # News / Politics
    "news": "politics",
    "world": "politics",
    "world news": "politics",
    "international": "politics",
    "global": "politics",
    "top stories": "politics",
    "headlines": "politics",
    "breaking news": "politics",
    "latest": "politics",
    "politics": "politics",
    "government": "politics",
    "u.s.": "politics",
    "us news": "politics",
    "uk news": "politics",
    "national": "politics",
    "policy": "politics",
    "elections": "politics",

    # Conflict
    "war": "conflict",
    "military": "conflict",
    "defense": "conflict",
    "security": "conflict",
    "terrorism": "conflict",

    # Economy / Business
    "business": "economy",
    "business & economy": "economy",
    "economy": "economy",
    "finance": "economy",
    "markets": "economy",
    "money": "economy",
    "personal finance": "economy",
    "startups": "economy",
    "investing": "economy",
    "cryptocurrency": "economy",

    # Science
    "science": "science",
    "science & environment": "science",
    "space": "science",
    "physics": "science",
    "biology": "science",
    "chemistry": "science",
    "astronomy": "science",
    "research": "science",

    # Tech
    "tech": "tech",
    "technology": "tech",
    "programming": "tech",
    "web development": "tech",
    "android": "tech",
    "android development": "tech",
    "apple": "tech",
    "ios development": "tech",
    "ui / ux": "tech",
    "cybersecurity": "tech",
    "ai": "tech",
    "artificial intelligence": "tech",

    # Environment
    "environment": "environment",
    "climate": "environment",
    "energy": "environment",
    "sustainability": "environment",
    "nature": "environment",
    "weather": "environment",

    # Health
    "health": "health",
    "medicine": "health",
    "medical": "health",
    "wellness": "health",
    "mental health": "health",
    "fitness": "health",

    # Culture / Entertainment
    "culture": "culture",
    "entertainment": "culture",
    "arts": "culture",
    "movies": "culture",
    "music": "culture",
    "books": "culture",
    "television": "culture",
    "food": "culture",
    "fashion": "culture",
    "beauty": "culture",
    "architecture": "culture",
    "interior design": "culture",
    "diy": "culture",
    "photography": "culture",
    "funny": "culture",
    "history": "culture",
    "travel": "culture",
    "education": "culture",
    "religion": "culture",

    # Sports
    "sports": "sports",
    "football": "sports",
    "soccer": "sports",
    "cricket": "sports",
    "tennis": "sports",
    "cars": "sports",
    "gaming": "sports",
})
