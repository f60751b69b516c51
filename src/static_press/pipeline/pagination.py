"""Grouping and pagination of generated articles into listing pages."""

from typing import Callable, Hashable, Iterable, Sequence, TypeVar

from schemas.generated import GeneratedArticle, HtmlPageIndex

K = TypeVar("K", bound=Hashable)
T = TypeVar("T")


def group_articles(
    articles: Iterable[GeneratedArticle],
    keys_of: Callable[[GeneratedArticle], Iterable[K]],
) -> dict[K, list[GeneratedArticle]]:
    """Group articles under every key returned by *keys_of*.

    Articles keep their incoming order inside each group and the groups
    are returned sorted by key, so the result does not depend on hashing.

    Args:
        articles: Articles, most recent first
        keys_of: Returns the group keys of one article (none, one or many)

    Returns:
        Mapping of key to its articles, ordered by key
    """
    groups: dict[K, list[GeneratedArticle]] = {}
    for article in articles:
        for key in keys_of(article):
            groups.setdefault(key, []).append(article)
    return {key: groups[key] for key in sorted(groups)}


def paginate(items: Sequence[T], page_size: int) -> list[tuple[HtmlPageIndex, Sequence[T]]]:
    """Split *items* into consecutive pages of at most *page_size* items.

    An empty sequence still yields a single empty page 0.

    Examples:
        >>> [(i.value, list(p)) for i, p in paginate([1, 2, 3], 2)]
        [(0, [1, 2]), (1, [3])]
    """
    if page_size < 1:
        raise ValueError(f"page_size must be at least 1, got {page_size}")
    if not items:
        return [(HtmlPageIndex(0), items)]
    return [
        (HtmlPageIndex(number), items[start:start + page_size])
        for number, start in enumerate(range(0, len(items), page_size))
    ]
