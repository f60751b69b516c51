"""Jinja2 renderer for article and listing pages."""

import io
import logging
from pathlib import Path
from typing import Sequence

from jinja2 import Environment, FileSystemLoader

from schemas.dates import Language
from schemas.edited_article import EditedArticle
from schemas.generated import GeneratedArticle, HtmlPageIndex
from schemas.values import Buffer
from static_press.config import DEFAULT_SITE_TITLE

from .filters import FILTERS
from .renderer import HtmlRenderer

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent / "templates"


def sibling_href(current: int, target: int) -> str:
    """Relative link from one listing page to another page of the same listing.

    Page 0 lives at the listing root, page n under ``page/n/``.

    Examples:
        >>> sibling_href(0, 1)
        'page/1/'
        >>> sibling_href(1, 0)
        '../../'
        >>> sibling_href(2, 3)
        '../3/'
    """
    if current == 0:
        return "./" if target == 0 else f"page/{target}/"
    if target == 0:
        return "../../"
    return f"../{target}/"


class JinjaHtmlRenderer(HtmlRenderer):
    """Render pages through Jinja2 templates.

    Attributes:
        article_template: Name of the article page template
        listing_template: Name of the listing page template
        site_title: Site name shown in page titles
    """

    def __init__(
        self,
        templates_dir: Path | None = None,
        article_template: str = "article.html.j2",
        listing_template: str = "listing.html.j2",
        site_title: str = DEFAULT_SITE_TITLE,
    ):
        """Initialize the renderer.

        Args:
            templates_dir: Directory containing templates (default: packaged templates)
            article_template: Name of the article page template
            listing_template: Name of the listing page template
            site_title: Site name shown in page titles
        """
        self.templates_dir = templates_dir or TEMPLATES_DIR
        self.article_template = article_template
        self.listing_template = listing_template
        self.site_title = site_title

        self._env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=True,
            keep_trailing_newline=True,
        )
        for name, func in FILTERS.items():
            self._env.filters[name] = func

    def render_article(self, article: EditedArticle) -> Buffer:
        template = self._env.get_template(self.article_template)
        html = template.render(
            article=article,
            language=article.language,
            site_title=self.site_title,
        )
        logger.debug(f"Rendered article page {article.title}")
        return self._to_buffer(html)

    def render_listing(
        self,
        title: str,
        articles: Sequence[GeneratedArticle],
        index: HtmlPageIndex,
        page_count: int,
        language: Language | None = None,
    ) -> Buffer:
        current = index.value
        previous_href = sibling_href(current, current - 1) if current > 0 else None
        next_href = sibling_href(current, current + 1) if current + 1 < page_count else None

        template = self._env.get_template(self.listing_template)
        html = template.render(
            title=title,
            articles=articles,
            page_number=current + 1,
            page_count=page_count,
            previous_href=previous_href,
            next_href=next_href,
            language=language or Language.ENGLISH,
            site_title=self.site_title,
        )
        return self._to_buffer(html)

    def _to_buffer(self, html: str) -> Buffer:
        return io.BytesIO(html.encode("utf-8"))
