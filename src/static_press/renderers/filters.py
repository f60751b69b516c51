"""Jinja2 filters for HTML template rendering.

These filters are used in article.html.j2 and listing.html.j2.
"""

import markdown as md_lib

from schemas.dates import Language, PublishedDate

# Markdown extensions for article bodies
MD_EXTENSIONS = [
    "extra",        # tables, fenced code, footnotes, ...
    "sane_lists",
]


def format_date(published_date: PublishedDate | None, language: Language = Language.ENGLISH) -> str:
    """Format a publication date in the article's language.

    Args:
        published_date: Date to format
        language: Display language (default: English)

    Returns:
        Localized date like "May 1, 2021" or "1 mai 2021"

    Examples:
        >>> format_date(PublishedDate(year=2021, month=5, day=1), Language.FRENCH)
        '1 mai 2021'
    """
    if published_date is None:
        return ""
    return published_date.to_string(language)


def format_tags(tags) -> str:
    """Join tag objects or strings into a comma-separated string.

    Examples:
        >>> format_tags(["rust", "web"])
        'rust, web'
    """
    if not tags:
        return ""
    names = [str(tag) for tag in tags]
    return ", ".join(name for name in names if name)


def render_markdown(text) -> str:
    """Convert a Markdown article body to an HTML fragment."""
    if not text:
        return ""
    return md_lib.markdown(str(text), extensions=MD_EXTENSIONS)


# Registry of all filters for easy registration with Jinja2
FILTERS = {
    "format_date": format_date,
    "format_tags": format_tags,
    "markdown": render_markdown,
}
