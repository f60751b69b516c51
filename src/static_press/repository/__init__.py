"""Article storage."""

from .article_repository import ArticleRepository
from .memory_repository import MemoryArticleRepository

__all__ = ["ArticleRepository", "MemoryArticleRepository"]
