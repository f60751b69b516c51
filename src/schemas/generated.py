"""Schemas produced while generating the website.

Output layout (relative to the site root):
    index.html                              # home, page 0
    page/{n}/index.html                     # home, page n
    {language}/{category}/index.html        # category listing
    {language}/{category}/{sub_category}/index.html
    {language}/{category}[/{sub_category}]/{slug}/index.html
    {language}/tags/{tag_slug}/index.html   # tag listing
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import PurePosixPath

from pydantic import ConfigDict, NonNegativeInt, RootModel

from .dates import Language, PublishedDate
from .values import Buffer, Category, Image, SubCategory, Tag, Title

PAGE_FILENAME = "index.html"


class HtmlPageIndex(RootModel[NonNegativeInt]):
    """Zero-based page number of a paginated listing."""

    model_config = ConfigDict(frozen=True)

    @property
    def value(self) -> int:
        return self.root


class PageKind(str, Enum):
    ARTICLE = "article"
    SUB_CATEGORY = "sub_category"
    CATEGORY = "category"
    TAG = "tag"
    HOME = "home"


def page_path(directory: PurePosixPath, index: HtmlPageIndex) -> PurePosixPath:
    """Return the file path of one page of a listing rooted at *directory*."""
    if index.value == 0:
        return directory / PAGE_FILENAME
    return directory / "page" / str(index.value) / PAGE_FILENAME


@dataclass(frozen=True)
class GeneratedArticle:
    """An article rendered to HTML, ready to be grouped into listings.

    Attributes:
        language: Publication language
        category: Category
        sub_category: Optional sub-category
        title: Headline, for listing pages
        slug: Slugified title
        published_date: Publication date, for listing pages
        tags: Unique tags
        html: Rendered article page
        images: Images to publish in the article directory
    """

    language: Language
    category: Category
    sub_category: SubCategory | None
    title: Title
    slug: str
    published_date: PublishedDate
    tags: tuple[Tag, ...]
    html: Buffer = field(compare=False, repr=False)
    images: tuple[Image, ...] = field(default=(), compare=False, repr=False)

    @property
    def directory(self) -> PurePosixPath:
        segments = [self.language.value, self.category.value]
        if self.sub_category is not None:
            segments.append(self.sub_category.value)
        segments.append(self.slug)
        return PurePosixPath(*segments)

    @property
    def page_path(self) -> PurePosixPath:
        return self.directory / PAGE_FILENAME


@dataclass(frozen=True)
class HtmlPage:
    """One rendered page of the site.

    Attributes:
        kind: Which kind of page this is
        path: File path relative to the site root
        html: Rendered page
        index: Page number for listing pages, None for article pages
    """

    kind: PageKind
    path: PurePosixPath
    html: Buffer = field(compare=False, repr=False)
    index: HtmlPageIndex | None = None
