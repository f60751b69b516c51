"""Generator configuration and logging setup."""

import logging
from pathlib import Path

DEFAULT_PAGE_SIZE = 10
DEFAULT_SITE_TITLE = "Articles"


def configure_logging(verbose: bool = False) -> None:
    """Configure root logging for applications embedding the generator."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


class GeneratorConfig:
    """Settings for a website generation run, read from a plain dict.

    Config keys:
        page_size: Articles per listing page (default: 10)
        max_workers: Threads used to render articles (default: 1)
        templates_dir: Directory holding the Jinja2 templates
            (default: the templates shipped with the package)
        site_title: Title shown on the home pages (default: "Articles")
    """

    def __init__(self, config: dict | None = None):
        self._config = dict(config or {})

        if self.page_size < 1:
            raise ValueError(f"page_size must be at least 1, got {self.page_size}")
        if self.max_workers < 1:
            raise ValueError(f"max_workers must be at least 1, got {self.max_workers}")

    def __repr__(self) -> str:
        return f"GeneratorConfig({self._config!r})"

    @property
    def page_size(self) -> int:
        return int(self._config.get("page_size", DEFAULT_PAGE_SIZE))

    @property
    def max_workers(self) -> int:
        return int(self._config.get("max_workers", 1))

    @property
    def templates_dir(self) -> Path | None:
        templates_dir = self._config.get("templates_dir")
        return Path(templates_dir) if templates_dir is not None else None

    @property
    def site_title(self) -> str:
        return str(self._config.get("site_title", DEFAULT_SITE_TITLE))
