"""In-memory article repository."""

import copy
import logging
from typing import Iterator

from schemas.article import Article, ArticleId

from .article_repository import ArticleRepository

logger = logging.getLogger(__name__)


class MemoryArticleRepository(ArticleRepository):
    """Keeps articles in a dict keyed by id.

    Edits made to objects returned by ``find_mut`` are visible immediately,
    so ``update`` has nothing to flush. Not thread-safe.
    """

    def __init__(self):
        self._articles: dict[ArticleId, Article] = {}

    def __repr__(self) -> str:
        return f"MemoryArticleRepository({len(self._articles)} articles)"

    def __len__(self) -> int:
        return len(self._articles)

    def __contains__(self, id: object) -> bool:
        return id in self._articles

    def find_all(self) -> Iterator[Article]:
        return (copy.deepcopy(article) for article in list(self._articles.values()))

    def find_all_mut(self) -> Iterator[Article]:
        return iter(list(self._articles.values()))

    def find(self, id: ArticleId) -> Article | None:
        article = self._articles.get(id)
        return copy.deepcopy(article) if article is not None else None

    def find_mut(self, id: ArticleId) -> Article | None:
        return self._articles.get(id)

    def save(self, article: Article) -> None:
        article_id = article.get_id()
        if article_id in self._articles:
            logger.debug(f"Article {article_id} already stored, ignoring save")
            return
        self._articles[article_id] = article

    def update(self, article: Article) -> None:
        pass

    def delete(self, id: ArticleId) -> None:
        self._articles.pop(id, None)
