"""Website generation pipeline."""

from .orchestrator import WebsiteGenerator, generate_website
from .stages import (
    ArticlesGenerated,
    ArticlesSorted,
    CreateDirectory,
    PagesGenerated,
    emit_events,
    generate_articles,
    generate_pages,
    sort_articles,
)

__all__ = [
    "ArticlesGenerated",
    "ArticlesSorted",
    "CreateDirectory",
    "PagesGenerated",
    "WebsiteGenerator",
    "emit_events",
    "generate_articles",
    "generate_pages",
    "generate_website",
    "sort_articles",
]
