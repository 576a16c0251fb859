"""Default feed sources, used when the config does not list any."""

from ingest_articles.models import Source

SOURCE_CATEGORIES = (
    "news", "science", "tech", "business", "sports", "culture", "opinion", "other",
)

DEFAULT_SOURCES = (
    # General news
    Source("bbc-world", "BBC News - World", "https://feeds.bbci.co.uk/news/world/rss.xml", country="uk"),
    Source("guardian-world", "The Guardian - World", "https://www.theguardian.com/world/rss", country="uk"),
    Source("npr-news", "NPR News", "https://feeds.npr.org/1001/rss.xml", country="us"),
    Source("al-jazeera", "Al Jazeera", "https://www.aljazeera.com/xml/rss/all.xml"),
    Source("nyt-world", "New York Times - World", "https://rss.nytimes.com/services/xml/rss/nyt/World.xml", country="us"),
    Source("france24-en", "France 24", "https://www.france24.com/en/rss", country="fr"),
    Source("cnn-world", "CNN World", "http://rss.cnn.com/rss/edition_world.rss", country="us"),
    Source("wapo-world", "Washington Post - World", "http://feeds.washingtonpost.com/rss/world", country="us"),
    # Science
    Source("bbc-science", "BBC Science & Environment",
           "https://feeds.bbci.co.uk/news/science_and_environment/rss.xml", country="uk", category="science"),
    Source("nature", "Nature", "https://www.nature.com/nature.rss", category="science"),
    Source("sciencedaily", "ScienceDaily", "https://www.sciencedaily.com/rss/all.xml", category="science"),
    # Tech
    Source("ars-technica", "Ars Technica", "https://feeds.arstechnica.com/arstechnica/index", country="us", category="tech"),
    Source("hacker-news", "Hacker News", "https://news.ycombinator.com/rss", category="tech"),
    Source("the-verge", "The Verge", "https://www.theverge.com/rss/index.xml", country="us", category="tech"),
)


def enabled_sources(sources) -> list[Source]:
    return [s for s in sources if s.enabled]
