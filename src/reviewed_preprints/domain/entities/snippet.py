"""
ReviewedPreprintSnippet - Public list-view representation of a reviewed preprint.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal


@dataclass(frozen=True)
class Subject:
    """Subject area. ``id`` is None for names outside the known table."""
    name: str
    id: str | None = None

    def to_dict(self) -> dict[str, Any]:
        if self.id is None:
            return {"name": self.name}
        return {"id": self.id, "name": self.name}


@dataclass
class ReviewedPreprintSnippet:
    """Condensed reviewed preprint shown in list responses."""
    id: str
    doi: str
    pdf: str | None = None
    status: Literal["reviewed"] = "reviewed"
    author_line: str | None = None
    title: str | None = None
    published: str | None = None
    reviewed_date: str | None = None
    version_date: str | None = None
    status_date: str | None = None
    stage: Literal["published"] = "published"
    subjects: list[Subject] | None = field(default=None)

    def to_dict(self) -> dict[str, Any]:
        """Convert to the public JSON shape, omitting unset fields."""
        result: dict[str, Any] = {
            "id": self.id,
            "doi": self.doi,
            "pdf": self.pdf,
            "status": self.status,
            "authorLine": self.author_line,
            "title": self.title,
            "published": self.published,
            "reviewedDate": self.reviewed_date,
            "versionDate": self.version_date,
            "statusDate": self.status_date,
            "stage": self.stage,
        }
        if self.subjects is not None:
            result["subjects"] = [s.to_dict() for s in self.subjects]
        return {k: v for k, v in result.items() if v is not None}
