"""Custom exceptions for website generation."""

from pathlib import PurePosixPath


class StaticPressError(Exception):
    """Base exception for all static-press errors."""

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class DirectoryCreationError(StaticPressError):
    """Raised when the directory of a generated article cannot be created."""

    def __init__(self, path: PurePosixPath, message: str | None = None):
        self.path = path
        super().__init__(message or f"Could not create directory: {path}")


class UnsupportedLanguageError(StaticPressError):
    """Raised when an article is written in a language the site does not publish."""

    def __init__(self, code: str):
        self.code = code
        super().__init__(f"Unsupported language: {code!r}")
