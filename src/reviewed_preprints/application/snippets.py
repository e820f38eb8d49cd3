"""
Snippet building - EnhancedArticle -> ReviewedPreprintSnippet.

Combines the list-view transformations:
- Author line summarization
- Subject mapping
- Rich text title rendering
- UTC timestamp normalization
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime, timezone

from reviewed_preprints.core.exceptions import InvalidTimestampError, MissingFieldError
from reviewed_preprints.domain.content import content_to_html
from reviewed_preprints.domain.entities import Author, EnhancedArticle, ReviewedPreprintSnippet

from .subjects import map_subjects

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def author_line(authors: Sequence[Author]) -> str | None:
    """
    Summarize an author list into a single line.

    Up to three authors are listed in full. Longer lists keep the first
    two and the last author, joined with an ellipsis:

        [A]          -> "A"
        [A, B]       -> "A, B"
        [A, B, C]    -> "A, B, C"
        [A, B, C, D] -> "A, B ... D"

    Returns:
        The author line, or None when there are no authors
    """
    if not authors:
        return None

    line = ", ".join(author.display_name for author in authors[:2])
    if len(authors) > 2:
        conjunction = " ... " if len(authors) > 3 else ", "
        line = f"{line}{conjunction}{authors[-1].display_name}"
    return line


def normalize_date(value: datetime | str | None) -> str:
    """
    Format a timestamp as ``YYYY-MM-DDTHH:MM:SSZ`` in UTC.

    Sub-second precision is dropped. Naive datetimes are taken as UTC.

    Raises:
        InvalidTimestampError: If value is missing or not ISO-8601
    """
    if isinstance(value, datetime):
        moment = value
    elif isinstance(value, str) and value.strip():
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = f"{text[:-1]}+00:00"
        try:
            moment = datetime.fromisoformat(text)
        except ValueError as e:
            raise InvalidTimestampError(value) from e
    else:
        raise InvalidTimestampError(value)

    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc).strftime(TIMESTAMP_FORMAT)


def to_snippet(article: EnhancedArticle) -> ReviewedPreprintSnippet:
    """
    Build the list-view snippet for one upstream record.

    ``published`` and ``reviewedDate`` come from ``firstPublished``;
    ``versionDate`` and ``statusDate`` come from ``published``.

    Raises:
        MissingFieldError: If the record has no manuscript id, preprint DOI,
            firstPublished or published timestamp
    """
    record_id = article.id or article.msid
    if not article.msid:
        raise MissingFieldError("msid", record_id)
    if not article.preprint_doi:
        raise MissingFieldError("preprintDoi", record_id)
    if article.first_published is None:
        raise MissingFieldError("firstPublished", record_id)
    if article.published is None:
        raise MissingFieldError("published", record_id)

    first_published = normalize_date(article.first_published)
    published = normalize_date(article.published)

    return ReviewedPreprintSnippet(
        id=article.msid,
        doi=article.preprint_doi,
        pdf=article.pdf_url,
        author_line=author_line(article.article.authors or []),
        title=content_to_html(article.article.title),
        published=first_published,
        reviewed_date=first_published,
        version_date=published,
        status_date=published,
        subjects=map_subjects(article.subjects or []),
    )
