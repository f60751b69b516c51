"""Publish-ready article snapshots."""

from collections import Counter
from dataclasses import dataclass, field
from pathlib import PurePosixPath
from typing import Iterable, Iterator

from .dates import Language, PublishedDate
from .values import Author, Category, Content, Image, SubCategory, Tag, Title


@dataclass(frozen=True)
class EditedArticle:
    """An article whose editing is finished.

    Tags are kept unique, in first-seen order.

    Attributes:
        language: Publication language
        category: Category the article is filed under
        sub_category: Optional sub-category
        title: Headline
        author: Author display name
        published_date: Publication date
        content: Markdown body
        tags: Unique tags
        images: Images published next to the article page
    """

    language: Language
    category: Category
    sub_category: SubCategory | None
    title: Title
    author: Author
    published_date: PublishedDate
    content: Content
    tags: tuple[Tag, ...] = ()
    images: tuple[Image, ...] = field(default=(), compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "tags", tuple(dict.fromkeys(self.tags)))
        object.__setattr__(self, "images", tuple(self.images))

    @property
    def directory(self) -> PurePosixPath:
        """Return language/category[/sub_category]/slug."""
        segments = [self.language.value, self.category.value]
        if self.sub_category is not None:
            segments.append(self.sub_category.value)
        segments.append(self.title.slug)
        return PurePosixPath(*segments)


@dataclass(frozen=True)
class ArticlesEdited:
    """Non-empty ordered collection of edited articles.

    No two articles may share a directory, since their pages would be
    written to the same path.
    """

    articles: tuple[EditedArticle, ...]

    def __post_init__(self) -> None:
        articles = tuple(self.articles)
        if not articles:
            raise ValueError("at least one edited article is required")
        counts = Counter(article.directory for article in articles)
        duplicates = sorted(str(directory) for directory, count in counts.items() if count > 1)
        if duplicates:
            raise ValueError(f"articles share a directory: {', '.join(duplicates)}")
        object.__setattr__(self, "articles", articles)

    @classmethod
    def new(cls, articles: Iterable[EditedArticle]) -> "ArticlesEdited | None":
        """Build the collection, or return None when it is empty or has clashing directories."""
        try:
            return cls(tuple(articles))
        except ValueError:
            return None

    def __iter__(self) -> Iterator[EditedArticle]:
        return iter(self.articles)

    def __len__(self) -> int:
        return len(self.articles)
