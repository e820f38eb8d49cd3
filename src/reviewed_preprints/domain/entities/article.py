"""
EnhancedArticle - Upstream preprint record without body content.

The upstream preprint service returns one JSON object per reviewed
preprint version. Only the metadata needed for list views is modelled
explicitly; the rest of the processed article block is kept as raw data.

Upstream field names are camelCase; attributes here are snake_case.

Example:
    >>> article = EnhancedArticle.from_dict({
    ...     "id": "80494v1",
    ...     "msid": "80494",
    ...     "preprintDoi": "10.1101/2022.06.24.497502",
    ...     "firstPublished": "2022-10-25T14:00:00.000Z",
    ...     "published": "2022-10-25T14:00:00.000Z",
    ...     "article": {"title": "A title", "authors": []},
    ... })
    >>> article.msid
    '80494'
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from reviewed_preprints.core.exceptions import ParseError
from reviewed_preprints.domain.content import Content


def _string_list(value: Any) -> list[str]:
    if not value:
        return []
    if isinstance(value, str):
        return [value]
    if not isinstance(value, (list, tuple)):
        raise ParseError(f"expected a list of names, got {type(value).__name__}", source="preprints")
    return [str(item) for item in value]


def _list(value: Any, name: str) -> list[Any]:
    if not value:
        return []
    if not isinstance(value, (list, tuple)):
        raise ParseError(f"expected a list for '{name}', got {type(value).__name__}", source="preprints")
    return list(value)


@dataclass
class Author:
    """
    Author of a processed article.

    Upstream sends name parts as arrays, e.g.
    {"givenNames": ["Jane", "Q"], "familyNames": ["Doe"]}.
    """
    given_names: list[str] = field(default_factory=list)
    family_names: list[str] = field(default_factory=list)

    @property
    def display_name(self) -> str:
        """Given names, then family names, each space separated."""
        name = " ".join(self.given_names)
        if self.family_names:
            name = f"{name} {' '.join(self.family_names)}"
        return name

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Author:
        return cls(
            given_names=_string_list(data.get("givenNames")),
            family_names=_string_list(data.get("familyNames")),
        )


@dataclass
class ProcessedArticle:
    """The processed article block nested inside an enhanced article."""
    title: Content = None
    authors: list[Author] = field(default_factory=list)
    licenses: list[dict[str, Any]] = field(default_factory=list)
    headings: list[dict[str, Any]] = field(default_factory=list)
    references: list[dict[str, Any]] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> ProcessedArticle:
        if not data:
            return cls()
        if not isinstance(data, Mapping):
            raise ParseError(f"expected an object for 'article', got {type(data).__name__}", source="preprints")
        return cls(
            title=data.get("title"),
            authors=[Author.from_dict(a) for a in _list(data.get("authors"), "authors") if isinstance(a, Mapping)],
            licenses=_list(data.get("licenses"), "licenses"),
            headings=_list(data.get("headings"), "headings"),
            references=_list(data.get("references"), "references"),
        )


@dataclass
class EnhancedArticle:
    """
    Reviewed preprint version as returned by the upstream listing.

    Timestamps are kept as sent (ISO-8601 strings); normalization happens
    when building snippets.
    """
    id: str | None = None
    msid: str | None = None
    doi: str | None = None
    version_doi: str | None = None
    preprint_doi: str | None = None
    preprint_url: str | None = None
    preprint_posted: str | None = None
    sent_for_review: str | None = None
    published: str | None = None
    published_year: int | None = None
    volume: str | None = None
    e_location_id: str | None = None
    subjects: list[str] | None = None
    pdf_url: str | None = None
    related_content: list[dict[str, Any]] | None = None
    article: ProcessedArticle = field(default_factory=ProcessedArticle)
    first_published: str | None = None

    @classmethod
    def from_dict(cls, data: Any) -> EnhancedArticle:
        """Create from an upstream JSON object."""
        if not isinstance(data, Mapping):
            raise ParseError(f"expected an object, got {type(data).__name__}", source="preprints")

        subjects = data.get("subjects")
        related = data.get("relatedContent")
        return cls(
            id=data.get("id"),
            msid=data.get("msid"),
            doi=data.get("doi"),
            version_doi=data.get("versionDoi"),
            preprint_doi=data.get("preprintDoi"),
            preprint_url=data.get("preprintUrl"),
            preprint_posted=data.get("preprintPosted"),
            sent_for_review=data.get("sentForReview"),
            published=data.get("published"),
            published_year=data.get("publishedYear"),
            volume=data.get("volume"),
            e_location_id=data.get("eLocationId"),
            subjects=_string_list(subjects) if subjects is not None else None,
            pdf_url=data.get("pdfUrl"),
            related_content=_list(related, "relatedContent") if related is not None else None,
            article=ProcessedArticle.from_dict(data.get("article")),
            first_published=data.get("firstPublished"),
        )
