"""Base class for page renderers."""

from abc import ABC, abstractmethod
from typing import Sequence

from schemas.dates import Language
from schemas.edited_article import EditedArticle
from schemas.generated import GeneratedArticle, HtmlPageIndex
from schemas.values import Buffer


class HtmlRenderer(ABC):
    """Turns articles and listings into HTML buffers.

    Implementations must be safe to call from several threads at once,
    since articles may be rendered in parallel.
    """

    @abstractmethod
    def render_article(self, article: EditedArticle) -> Buffer:
        """Render the page of a single article.

        Args:
            article: The edited article to render

        Returns:
            Buffer holding the UTF-8 encoded page, positioned at its start
        """
        pass

    @abstractmethod
    def render_listing(
        self,
        title: str,
        articles: Sequence[GeneratedArticle],
        index: HtmlPageIndex,
        page_count: int,
        language: Language | None = None,
    ) -> Buffer:
        """Render one page of an article listing.

        Args:
            title: Heading of the listing (category, tag, site title...)
            articles: Articles shown on this page, most recent first
            index: Zero-based page number
            page_count: Total number of pages in the listing
            language: Language of the listing, None for mixed listings

        Returns:
            Buffer holding the UTF-8 encoded page, positioned at its start
        """
        pass
