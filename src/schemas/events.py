"""Events emitted by website generation, one per produced page."""

from dataclasses import dataclass, field
from pathlib import PurePosixPath
from typing import ClassVar

from .generated import HtmlPage, PageKind
from .values import Buffer


@dataclass(frozen=True)
class WebsiteEvent:
    """Base of all generation events.

    Attributes:
        path: Output file path relative to the site root
        html: Rendered page for the writer; not part of equality
    """

    kind: ClassVar[PageKind]

    path: PurePosixPath
    html: Buffer | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class ArticlePageGenerated(WebsiteEvent):
    kind: ClassVar[PageKind] = PageKind.ARTICLE


@dataclass(frozen=True)
class SubCategoryHtmlPageGenerated(WebsiteEvent):
    kind: ClassVar[PageKind] = PageKind.SUB_CATEGORY


@dataclass(frozen=True)
class CategoryHtmlPageGenerated(WebsiteEvent):
    kind: ClassVar[PageKind] = PageKind.CATEGORY


@dataclass(frozen=True)
class TagHtmlPageGenerated(WebsiteEvent):
    kind: ClassVar[PageKind] = PageKind.TAG


@dataclass(frozen=True)
class HomeHtmlPageGenerated(WebsiteEvent):
    kind: ClassVar[PageKind] = PageKind.HOME


GenerateWebsiteEvent = (
    ArticlePageGenerated
    | SubCategoryHtmlPageGenerated
    | CategoryHtmlPageGenerated
    | TagHtmlPageGenerated
    | HomeHtmlPageGenerated
)

EVENT_TYPES: dict[PageKind, type[WebsiteEvent]] = {
    cls.kind: cls
    for cls in (
        ArticlePageGenerated,
        SubCategoryHtmlPageGenerated,
        CategoryHtmlPageGenerated,
        TagHtmlPageGenerated,
        HomeHtmlPageGenerated,
    )
}


def event_for(page: HtmlPage) -> GenerateWebsiteEvent:
    return EVENT_TYPES[page.kind](path=page.path, html=page.html)
