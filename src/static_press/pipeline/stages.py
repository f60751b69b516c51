"""Stages of website generation.

Each stage is a function from the state produced by the previous stage to
a new immutable state, so stages can only run forward:

    ArticlesEdited -> ArticlesSorted -> ArticlesGenerated -> PagesGenerated -> events
"""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from pathlib import PurePosixPath
from typing import Callable, Sequence

from schemas.dates import Language
from schemas.edited_article import ArticlesEdited, EditedArticle
from schemas.events import GenerateWebsiteEvent, event_for
from schemas.generated import GeneratedArticle, HtmlPage, PageKind, page_path
from static_press.exceptions import DirectoryCreationError
from static_press.renderers.renderer import HtmlRenderer

from .pagination import group_articles, paginate

logger = logging.getLogger(__name__)

CreateDirectory = Callable[[PurePosixPath], bool]

TAGS_SEGMENT = "tags"


@dataclass(frozen=True)
class ArticlesSorted:
    """Edited articles, most recent first."""

    articles: tuple[EditedArticle, ...]


@dataclass(frozen=True)
class ArticlesGenerated:
    """Rendered articles, in the order of ArticlesSorted."""

    articles: tuple[GeneratedArticle, ...]


@dataclass(frozen=True)
class PagesGenerated:
    """Every page of the site, grouped by kind."""

    article_pages: tuple[HtmlPage, ...]
    sub_category_pages: tuple[HtmlPage, ...]
    category_pages: tuple[HtmlPage, ...]
    tag_pages: tuple[HtmlPage, ...]
    home_pages: tuple[HtmlPage, ...]

    def __iter__(self):
        yield from self.article_pages
        yield from self.sub_category_pages
        yield from self.category_pages
        yield from self.tag_pages
        yield from self.home_pages


@dataclass(frozen=True)
class Listing:
    """A group of articles shown on one or more paginated pages.

    Attributes:
        kind: Kind of listing
        directory: Directory of page 0, relative to the site root
        title: Heading shown on every page
        articles: Articles in the listing, most recent first
        language: Language of the listing, None when mixed
    """

    kind: PageKind
    directory: PurePosixPath
    title: str
    articles: tuple[GeneratedArticle, ...]
    language: Language | None = None


def sort_articles(edited: ArticlesEdited) -> ArticlesSorted:
    """Order articles most recent first; equal dates keep their input order."""
    articles = sorted(edited, key=lambda article: article.published_date.sort_key, reverse=True)
    return ArticlesSorted(tuple(articles))


def article_directory(article: EditedArticle) -> PurePosixPath:
    """Return language/category[/sub_category]/slug for an edited article."""
    return article.directory


def generate_article(
    article: EditedArticle,
    create_directory: CreateDirectory,
    renderer: HtmlRenderer,
) -> GeneratedArticle:
    """Create the article directory and render its page.

    Raises:
        DirectoryCreationError: If *create_directory* reports a failure
    """
    directory = article_directory(article)
    if not create_directory(directory):
        logger.error(f"Could not create directory {directory}")
        raise DirectoryCreationError(directory)

    html = renderer.render_article(article)
    logger.debug(f"Generated article {directory}")

    return GeneratedArticle(
        language=article.language,
        category=article.category,
        sub_category=article.sub_category,
        title=article.title,
        slug=article.title.slug,
        published_date=article.published_date,
        tags=article.tags,
        html=html,
        images=article.images,
    )


def generate_articles(
    sorted_articles: ArticlesSorted,
    create_directory: CreateDirectory,
    renderer: HtmlRenderer,
    max_workers: int = 1,
) -> ArticlesGenerated:
    """Render every article.

    With a single worker articles are processed in order and processing
    stops at the first failure. With several workers articles are submitted
    to a thread pool and the first failure cancels every article not yet
    started. Articles already running finish, then the first failure in
    sorted order is raised.
    """
    articles = sorted_articles.articles
    if max_workers <= 1:
        generated = [
            generate_article(article, create_directory, renderer) for article in articles
        ]
    else:
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            futures = [
                executor.submit(generate_article, article, create_directory, renderer)
                for article in articles
            ]
            for future in as_completed(futures):
                if future.exception() is not None:
                    executor.shutdown(wait=False, cancel_futures=True)
                    break
        for future in futures:
            if not future.cancelled() and future.exception() is not None:
                raise future.exception()
        generated = [future.result() for future in futures]

    return ArticlesGenerated(tuple(generated))


def _sub_category_listings(articles: Sequence[GeneratedArticle]) -> list[Listing]:
    groups = group_articles(
        articles,
        lambda a: [(a.language.value, a.category.value, a.sub_category.value)]
        if a.sub_category is not None
        else [],
    )
    return [
        Listing(
            kind=PageKind.SUB_CATEGORY,
            directory=PurePosixPath(language, category, sub_category),
            title=sub_category,
            articles=tuple(group),
            language=Language(language),
        )
        for (language, category, sub_category), group in groups.items()
    ]


def _category_listings(articles: Sequence[GeneratedArticle]) -> list[Listing]:
    groups = group_articles(articles, lambda a: [(a.language.value, a.category.value)])
    return [
        Listing(
            kind=PageKind.CATEGORY,
            directory=PurePosixPath(language, category),
            title=category,
            articles=tuple(group),
            language=Language(language),
        )
        for (language, category), group in groups.items()
    ]


def _tag_listings(articles: Sequence[GeneratedArticle]) -> list[Listing]:
    def tag_keys(article: GeneratedArticle) -> list[tuple[str, str]]:
        keys = []
        for tag in article.tags:
            if not tag.slug:
                logger.warning(f"Tag {tag.value!r} of {article.directory} has an empty slug, skipping")
                continue
            keys.append((article.language.value, tag.slug))
        return list(dict.fromkeys(keys))

    groups = group_articles(articles, tag_keys)
    listings = []
    for (language, slug), group in groups.items():
        # Tags sharing a slug share a page, titled after the first one seen
        title = next(tag.value for tag in group[0].tags if tag.slug == slug)
        listings.append(
            Listing(
                kind=PageKind.TAG,
                directory=PurePosixPath(language, TAGS_SEGMENT, slug),
                title=title,
                articles=tuple(group),
                language=Language(language),
            )
        )
    return listings


def _home_listing(articles: Sequence[GeneratedArticle], site_title: str) -> Listing:
    return Listing(
        kind=PageKind.HOME,
        directory=PurePosixPath(),
        title=site_title,
        articles=tuple(articles),
    )


def render_listing(listing: Listing, renderer: HtmlRenderer, page_size: int) -> list[HtmlPage]:
    """Paginate a listing and render each of its pages."""
    chunks = paginate(listing.articles, page_size)
    pages = []
    for index, chunk in chunks:
        html = renderer.render_listing(
            listing.title, chunk, index, len(chunks), listing.language
        )
        pages.append(
            HtmlPage(
                kind=listing.kind,
                path=page_path(listing.directory, index),
                html=html,
                index=index,
            )
        )
    return pages


def generate_pages(
    generated: ArticlesGenerated,
    renderer: HtmlRenderer,
    page_size: int,
    site_title: str,
) -> PagesGenerated:
    """Derive article, sub-category, category, tag and home pages."""
    articles = generated.articles

    def render_all(listings: list[Listing]) -> tuple[HtmlPage, ...]:
        return tuple(
            page for listing in listings for page in render_listing(listing, renderer, page_size)
        )

    article_pages = tuple(
        HtmlPage(kind=PageKind.ARTICLE, path=article.page_path, html=article.html)
        for article in articles
    )

    return PagesGenerated(
        article_pages=article_pages,
        sub_category_pages=render_all(_sub_category_listings(articles)),
        category_pages=render_all(_category_listings(articles)),
        tag_pages=render_all(_tag_listings(articles)),
        home_pages=render_all([_home_listing(articles, site_title)]),
    )


def emit_events(pages: PagesGenerated) -> list[GenerateWebsiteEvent]:
    """Flatten pages into events: articles, sub-categories, categories, tags, home."""
    return [event_for(page) for page in pages]
