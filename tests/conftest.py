"""Pytest fixtures for static-press tests."""

import io
from unittest.mock import MagicMock

import pytest

from schemas import (
    ArticlesEdited,
    Author,
    Category,
    Content,
    EditedArticle,
    Language,
    PublishedDate,
    SubCategory,
    Tag,
    Title,
)


def make_edited_article(
    title: str = "Title",
    date: tuple[int, int, int] = (2021, 1, 10),
    category: str = "news",
    sub_category: str | None = None,
    language: Language = Language.ENGLISH,
    tags: tuple[str, ...] = (),
    content: str = "Some *content*.",
    author: str = "Jane Doe",
) -> EditedArticle:
    """Build an EditedArticle with sensible defaults."""
    year, month, day = date
    return EditedArticle(
        language=language,
        category=Category(category),
        sub_category=SubCategory(sub_category) if sub_category else None,
        title=Title(title),
        author=Author(author),
        published_date=PublishedDate(year=year, month=month, day=day),
        content=Content(content),
        tags=tuple(Tag(tag) for tag in tags),
    )


@pytest.fixture
def create_directory():
    """Directory-creation capability that always succeeds."""
    return MagicMock(return_value=True)


@pytest.fixture
def two_news_articles():
    """Two English "news" articles, oldest first."""
    return ArticlesEdited(
        (
            make_edited_article(title="Older", date=(2021, 1, 10)),
            make_edited_article(title="Newer", date=(2021, 5, 1)),
        )
    )


@pytest.fixture
def png_buffer():
    return io.BytesIO(b"\x89PNG\r\n\x1a\n")


@pytest.fixture
def make_article():
    """Factory building EditedArticle instances."""
    return make_edited_article
