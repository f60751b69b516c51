"""Renderers turning articles into HTML pages."""

from .html_renderer import JinjaHtmlRenderer
from .renderer import HtmlRenderer

__all__ = ["HtmlRenderer", "JinjaHtmlRenderer"]
