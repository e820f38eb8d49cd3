"""Upstream data sources."""

from .preprints import (
    LIST_PATH,
    TOTAL_COUNT_HEADER,
    PreprintListResult,
    PreprintsClient,
    build_list_params,
    parse_total_count,
)

__all__ = [
    "LIST_PATH",
    "TOTAL_COUNT_HEADER",
    "PreprintListResult",
    "PreprintsClient",
    "build_list_params",
    "parse_total_count",
]
