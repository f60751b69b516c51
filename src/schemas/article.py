"""Article domain object and its identity."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import PurePosixPath

from pydantic import BaseModel, ConfigDict

from .values import NonBlankStr, slugify_title


class ArticleId(BaseModel):
    """Storage key of an article.

    Attributes:
        language: Language code (e.g. "en")
        category: Category name
        sub_category: Optional sub-category name
        slug: Slug of the title the article was created with
    """

    model_config = ConfigDict(frozen=True)

    language: NonBlankStr
    category: NonBlankStr
    sub_category: NonBlankStr | None = None
    slug: NonBlankStr


@dataclass(eq=False)
class Article:
    """An article as stored and edited in the repository.

    Two articles are equal when their ids are equal, whatever their
    content. The id is fixed at creation, so retitling an article keeps
    it addressable under the original key.

    Attributes:
        id: Identity assigned by Article.new
        language: Language code
        category: Category name
        title: Headline
        sub_category: Optional sub-category name
        author: Author display name
        date: Publication timestamp (UTC)
        content: Markdown body
        tags: Tag names
    """

    id: ArticleId
    language: str
    category: str
    title: str
    sub_category: str | None = None
    author: str = ""
    date: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    content: str = ""
    tags: list[str] = field(default_factory=list)

    @classmethod
    def new(
        cls,
        language: str,
        category: str,
        title: str,
        sub_category: str | None = None,
    ) -> "Article":
        """Create an empty article and derive its id from the title.

        Language, category and sub-category are stored as normalized by the id.
        """
        article_id = ArticleId(
            language=language,
            category=category,
            sub_category=sub_category,
            slug=slugify_title(title),
        )
        return cls(
            id=article_id,
            language=article_id.language,
            category=article_id.category,
            title=title,
            sub_category=article_id.sub_category,
        )

    def get_id(self) -> ArticleId:
        return self.id

    def get_slug(self) -> str:
        return slugify_title(self.title)

    def get_path(self) -> PurePosixPath:
        """Return language/category[/sub_category]/slug."""
        segments = [self.language, self.category]
        if self.sub_category:
            segments.append(self.sub_category)
        segments.append(self.get_slug())
        return PurePosixPath(*segments)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Article):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
