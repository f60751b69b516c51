"""Validated text value objects shared by articles and the site generator."""

from dataclasses import dataclass
from typing import Annotated, Protocol, runtime_checkable

from pydantic import ConfigDict, RootModel, StringConstraints, model_validator
from slugify import slugify

NonBlankStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]

SLUG_SEPARATOR = "_"


def slugify_title(title: str) -> str:
    """Normalize a title into a filesystem and URL safe token.

    Diacritics are stripped, the text is lower-cased and every run of
    whitespace or punctuation becomes a single underscore.

    Examples:
        >>> slugify_title("Héllo, World!")
        'hello_world'
    """
    return slugify(title, separator=SLUG_SEPARATOR)


class _Name(RootModel[NonBlankStr]):
    """A non-blank, immutable name."""

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return self.root

    @property
    def value(self) -> str:
        return self.root


class _Text(RootModel[str]):
    """Free text that may be empty."""

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return self.root

    @property
    def value(self) -> str:
        return self.root


class Category(_Name):
    pass


class SubCategory(_Name):
    pass


class Tag(_Name):
    @property
    def slug(self) -> str:
        return slugify_title(self.root)


class Title(_Name):
    """A headline that yields a non-empty slug."""

    @model_validator(mode="after")
    def _check_slug(self) -> "Title":
        if not self.slug:
            raise ValueError(f"title {self.root!r} has an empty slug")
        return self

    @property
    def slug(self) -> str:
        return slugify_title(self.root)


class Author(_Text):
    pass


class Content(_Text):
    """Article body, written in Markdown."""


class ImageName(_Name):
    pass


@runtime_checkable
class Buffer(Protocol):
    """Readable and writable byte stream.

    The generator never interprets these bytes; ``io.BytesIO`` is the
    usual implementation.
    """

    def read(self, size: int | None = -1, /) -> bytes: ...

    def write(self, data: bytes, /) -> int: ...

    def seek(self, offset: int, whence: int = 0, /) -> int: ...


@dataclass(frozen=True)
class Image:
    """An image attached to an article.

    Attributes:
        name: File name the image is published under
        buffer: Raw image bytes
    """

    name: ImageName
    buffer: Buffer
