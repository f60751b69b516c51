"""Website generation orchestrator.

Wires the stages together and runs an edited article set through them.
"""

import logging

from schemas.edited_article import ArticlesEdited
from schemas.events import GenerateWebsiteEvent
from static_press.config import GeneratorConfig
from static_press.renderers.html_renderer import JinjaHtmlRenderer
from static_press.renderers.renderer import HtmlRenderer

from .stages import (
    CreateDirectory,
    emit_events,
    generate_articles,
    generate_pages,
    sort_articles,
)

logger = logging.getLogger(__name__)


class WebsiteGenerator:
    """End-to-end website generator.

    Runs the stages in order: sort, render articles, derive listing pages,
    emit events. The generator holds no state between runs.

    Attributes:
        create_directory: Capability creating an article directory, True on success
        config: Generator settings
        renderer: Renderer producing the HTML of every page
    """

    def __init__(
        self,
        create_directory: CreateDirectory,
        config: GeneratorConfig | dict | None = None,
        renderer: HtmlRenderer | None = None,
    ):
        if not isinstance(config, GeneratorConfig):
            config = GeneratorConfig(config)
        self.create_directory = create_directory
        self.config = config
        self.renderer = renderer or JinjaHtmlRenderer(
            templates_dir=config.templates_dir,
            site_title=config.site_title,
        )

    def run(self, articles: ArticlesEdited) -> list[GenerateWebsiteEvent]:
        """Generate the website for *articles*.

        Args:
            articles: Non-empty set of edited articles

        Returns:
            Events describing every generated page, in emission order

        Raises:
            DirectoryCreationError: If an article directory could not be created
        """
        logger.info(f"Generating website from {len(articles)} articles")

        sorted_articles = sort_articles(articles)
        generated = generate_articles(
            sorted_articles,
            self.create_directory,
            self.renderer,
            max_workers=self.config.max_workers,
        )
        logger.info(f"Rendered {len(generated.articles)} article pages")

        pages = generate_pages(
            generated,
            self.renderer,
            page_size=self.config.page_size,
            site_title=self.config.site_title,
        )
        events = emit_events(pages)

        logger.info(
            f"Generated {len(events)} pages: "
            f"{len(pages.sub_category_pages)} sub-category, "
            f"{len(pages.category_pages)} category, "
            f"{len(pages.tag_pages)} tag, "
            f"{len(pages.home_pages)} home"
        )
        return events


def generate_website(
    create_directory: CreateDirectory,
    articles: ArticlesEdited,
    config: GeneratorConfig | dict | None = None,
) -> list[GenerateWebsiteEvent]:
    """Generate the website for *articles* with the default renderer."""
    return WebsiteGenerator(create_directory, config).run(articles)
