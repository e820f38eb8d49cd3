"""Application layer - turns upstream records into public snippets."""

from .snippets import author_line, normalize_date, to_snippet
from .subjects import SUBJECT_SLUGS, map_subjects

__all__ = [
    "author_line",
    "normalize_date",
    "to_snippet",
    "SUBJECT_SLUGS",
    "map_subjects",
]
