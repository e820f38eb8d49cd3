"""
Reviewed Preprints - HTTP listing of publicly reviewed preprints.

Fetches reviewed preprint versions from the upstream preprint service and
serves them as condensed snippets for list views.

Usage:
    from reviewed_preprints.api import create_api_server

    app = create_api_server()

    # or from the command line
    #   python -m reviewed_preprints --port 8080 --upstream-url http://localhost:3000

Features:
    - Paginated listing with date range filters
    - Author line summaries and subject slugs
    - Rich text titles rendered as HTML
    - HTTP caching headers on every response
"""

from .application import author_line, map_subjects, normalize_date, to_snippet
from .core import Settings
from .domain import content_to_html

__version__ = "0.1.0"

__all__ = [
    "Settings",
    "author_line",
    "content_to_html",
    "map_subjects",
    "normalize_date",
    "to_snippet",
]
