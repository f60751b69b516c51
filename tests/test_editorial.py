"""Tests for turning repository articles into edited articles."""

from datetime import datetime, timezone
from pathlib import PurePosixPath

import pytest

from schemas import (
    Article,
    ArticlePageGenerated,
    Category,
    Image,
    ImageName,
    Language,
    PublishedDate,
    SubCategory,
    Tag,
    Title,
)
from static_press.editorial import edit_articles, to_edited_article
from static_press.exceptions import UnsupportedLanguageError
from static_press.pipeline import generate_website
from static_press.repository import MemoryArticleRepository


def _stored_article(language="en", category="dev", title="Héllo, World!", sub_category="rust"):
    article = Article.new(language, category, title, sub_category=sub_category)
    article.author = "Jane Doe"
    article.date = datetime(2021, 5, 1, 8, 30, tzinfo=timezone.utc)
    article.content = "Body"
    article.tags = ["rust", "web", "rust"]
    return article


class TestToEditedArticle:
    def test_converts_fields(self):
        edited = to_edited_article(_stored_article())

        assert edited.language is Language.ENGLISH
        assert edited.category == Category("dev")
        assert edited.sub_category == SubCategory("rust")
        assert edited.title == Title("Héllo, World!")
        assert edited.author.value == "Jane Doe"
        assert edited.published_date == PublishedDate(year=2021, month=5, day=1)
        assert edited.content.value == "Body"
        assert edited.tags == (Tag("rust"), Tag("web"))
        assert edited.images == ()

    def test_without_sub_category(self):
        edited = to_edited_article(_stored_article(sub_category=None))
        assert edited.sub_category is None

    def test_with_images(self, png_buffer):
        image = Image(name=ImageName("cover.png"), buffer=png_buffer)

        edited = to_edited_article(_stored_article(), images=[image])

        assert edited.images == (image,)

    def test_unsupported_language(self):
        with pytest.raises(UnsupportedLanguageError) as exc_info:
            to_edited_article(_stored_article(language="de"))

        assert exc_info.value.code == "de"


class TestEditArticles:
    def test_empty_repository_gives_none(self):
        assert edit_articles(MemoryArticleRepository()) is None

    def test_collects_every_article(self):
        repository = MemoryArticleRepository()
        repository.save(_stored_article(title="One"))
        repository.save(_stored_article(title="Two", language="fr"))

        edited = edit_articles(repository)

        assert sorted(a.title.value for a in edited) == ["One", "Two"]

    def test_repository_to_website(self, create_directory):
        """Articles stored in the repository end up as article pages."""
        repository = MemoryArticleRepository()
        article = _stored_article()
        repository.save(article)

        events = generate_website(create_directory, edit_articles(repository))

        assert events[0] == ArticlePageGenerated(path=article.get_path() / "index.html")
        assert events[0].path == PurePosixPath("en/dev/rust/hello_world/index.html")

    def test_retitled_articles_sharing_a_directory(self):
        repository = MemoryArticleRepository()
        repository.save(_stored_article(title="First"))
        second = _stored_article(title="Second")
        repository.save(second)
        repository.find_mut(second.get_id()).title = "first"

        with pytest.raises(ValueError, match="share a directory"):
            edit_articles(repository)
