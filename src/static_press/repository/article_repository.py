"""Abstract article repository."""

from abc import ABC, abstractmethod
from typing import Iterator

from schemas.article import Article, ArticleId


class ArticleRepository(ABC):
    """Storage of articles keyed by ArticleId.

    Every backend must honour the same contract:

    - ``save`` never overwrites: saving an id that is already stored is ignored.
    - ``update`` flushes in-place edits made through ``find_mut`` /
      ``find_all_mut``; backends that see those edits directly do nothing.
    - ``delete`` of an unknown id does nothing.
    - ``find`` / ``find_mut`` return None for an unknown id.
    - Iteration order is unspecified.
    """

    @abstractmethod
    def find_all(self) -> Iterator[Article]:
        """Iterate over read-only snapshots of all stored articles."""

    @abstractmethod
    def find_all_mut(self) -> Iterator[Article]:
        """Iterate over the stored articles themselves, for editing."""

    @abstractmethod
    def find(self, id: ArticleId) -> Article | None:
        """Return a read-only snapshot of the article stored under *id*."""

    @abstractmethod
    def find_mut(self, id: ArticleId) -> Article | None:
        """Return the stored article under *id*, for editing."""

    @abstractmethod
    def save(self, article: Article) -> None:
        """Store a new article unless its id is already taken."""

    @abstractmethod
    def update(self, article: Article) -> None:
        """Persist edits made to a stored article."""

    @abstractmethod
    def delete(self, id: ArticleId) -> None:
        """Remove the article stored under *id*, if any."""
