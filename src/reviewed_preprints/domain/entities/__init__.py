"""Domain entities."""

from .article import Author, EnhancedArticle, ProcessedArticle
from .snippet import ReviewedPreprintSnippet, Subject

__all__ = [
    "Author",
    "EnhancedArticle",
    "ProcessedArticle",
    "ReviewedPreprintSnippet",
    "Subject",
]
