"""Conversion of repository articles into publish-ready snapshots."""

import logging
from typing import Iterable

from schemas.article import Article
from schemas.dates import Language, PublishedDate
from schemas.edited_article import ArticlesEdited, EditedArticle
from schemas.values import Author, Category, Content, Image, SubCategory, Tag, Title
from static_press.exceptions import UnsupportedLanguageError
from static_press.repository import ArticleRepository

logger = logging.getLogger(__name__)


def to_edited_article(article: Article, images: Iterable[Image] = ()) -> EditedArticle:
    """Snapshot a stored article for publication.

    Args:
        article: Article from the repository
        images: Images to publish next to the article

    Returns:
        The immutable EditedArticle

    Raises:
        UnsupportedLanguageError: If the article language is not published
    """
    try:
        language = Language(article.language)
    except ValueError as e:
        raise UnsupportedLanguageError(article.language) from e

    return EditedArticle(
        language=language,
        category=Category(article.category),
        sub_category=SubCategory(article.sub_category) if article.sub_category else None,
        title=Title(article.title),
        author=Author(article.author),
        published_date=PublishedDate.from_datetime(article.date),
        content=Content(article.content),
        tags=tuple(Tag(tag) for tag in article.tags),
        images=tuple(images),
    )


def edit_articles(repository: ArticleRepository) -> ArticlesEdited | None:
    """Snapshot every stored article; None when the repository is empty.

    Raises:
        ValueError: If two retitled articles now share a directory
    """
    edited = [to_edited_article(article) for article in repository.find_all()]
    logger.info(f"Collected {len(edited)} articles for publication")
    if not edited:
        return None
    return ArticlesEdited(tuple(edited))
