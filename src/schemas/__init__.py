"""Schema definitions for static-press."""

from .article import Article, ArticleId
from .dates import MONTH_NAMES, Day, Language, Month, PublishedDate, Year
from .edited_article import ArticlesEdited, EditedArticle
from .events import (
    ArticlePageGenerated,
    CategoryHtmlPageGenerated,
    GenerateWebsiteEvent,
    HomeHtmlPageGenerated,
    SubCategoryHtmlPageGenerated,
    TagHtmlPageGenerated,
    WebsiteEvent,
)
from .generated import GeneratedArticle, HtmlPage, HtmlPageIndex, PageKind
from .values import (
    Author,
    Buffer,
    Category,
    Content,
    Image,
    ImageName,
    SubCategory,
    Tag,
    Title,
    slugify_title,
)

__all__ = [
    "Article",
    "ArticleId",
    "ArticlePageGenerated",
    "ArticlesEdited",
    "Author",
    "Buffer",
    "Category",
    "CategoryHtmlPageGenerated",
    "Content",
    "Day",
    "EditedArticle",
    "GenerateWebsiteEvent",
    "GeneratedArticle",
    "HomeHtmlPageGenerated",
    "HtmlPage",
    "HtmlPageIndex",
    "Image",
    "ImageName",
    "Language",
    "MONTH_NAMES",
    "Month",
    "PageKind",
    "PublishedDate",
    "SubCategory",
    "SubCategoryHtmlPageGenerated",
    "Tag",
    "TagHtmlPageGenerated",
    "Title",
    "WebsiteEvent",
    "Year",
    "slugify_title",
]
