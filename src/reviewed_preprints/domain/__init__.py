"""Domain layer - upstream records, snippets and rich text content."""

from .content import CONTENT_TAGS, Content, content_to_html
from .entities import Author, EnhancedArticle, ProcessedArticle, ReviewedPreprintSnippet, Subject

__all__ = [
    "CONTENT_TAGS",
    "Content",
    "content_to_html",
    "Author",
    "EnhancedArticle",
    "ProcessedArticle",
    "ReviewedPreprintSnippet",
    "Subject",
]
