"""
Query parameter validation for the reviewed preprint list endpoint.

Every check runs, in a fixed order, whatever the outcome of the previous
ones. When several parameters are invalid the last failure is the one
reported to the client.
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date

from reviewed_preprints.core.exceptions import InvalidParameterError

logger = logging.getLogger(__name__)

DEFAULT_PAGE = 1
DEFAULT_PER_PAGE = 20
MAX_PER_PAGE = 100
DEFAULT_ORDER = "desc"
DEFAULT_USE_DATE = "default"

ORDERS = ("asc", "desc")
USE_DATES = ("default", "published")

PAGE_MESSAGE = "expecting positive integer for 'page' parameter"
PER_PAGE_MESSAGE = "expecting positive integer between 1 and 100 for 'per-page' parameter"
ORDER_MESSAGE = "expecting either 'asc' or 'desc' for 'order' parameter"
USE_DATE_MESSAGE = "expecting either 'default' or 'published' for 'use-date' parameter"
START_DATE_MESSAGE = "expecting YYYY-MM-DD format for 'start-date' parameter"
END_DATE_MESSAGE = "expecting YYYY-MM-DD format for 'end-date' parameter"

_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


@dataclass(frozen=True)
class ListQuery:
    """Validated list endpoint parameters."""
    page: int = DEFAULT_PAGE
    per_page: int = DEFAULT_PER_PAGE
    order: str = DEFAULT_ORDER
    use_date: str = DEFAULT_USE_DATE
    start_date: str = ""
    end_date: str = ""


def parse_integer(value: str | int) -> int | None:
    """
    Parse an integral number.

    Accepts anything numeric with no fractional part ("3", " 3 ", "3.0",
    "1e2"). Returns None otherwise.
    """
    if isinstance(value, int):
        return value
    try:
        number = float(value)
    except ValueError:
        return None
    if not math.isfinite(number) or not number.is_integer():
        return None
    return int(number)


def is_strict_date(value: str) -> bool:
    """Check for an existing calendar date written exactly as YYYY-MM-DD."""
    if not _DATE_PATTERN.match(value):
        return False
    try:
        date.fromisoformat(value)
    except ValueError:
        return False
    return True


def collect_list_param_errors(params: Mapping[str, str]) -> tuple[ListQuery, list[InvalidParameterError]]:
    """
    Run every list parameter check.

    Args:
        params: Raw query parameters, one string per name

    Returns:
        (query built from the raw values, errors in check order)
    """
    errors: list[InvalidParameterError] = []

    page_raw = params.get("page", str(DEFAULT_PAGE))
    per_page_raw = params.get("per-page", str(DEFAULT_PER_PAGE))
    order = params.get("order") or DEFAULT_ORDER
    use_date = params.get("use-date") or DEFAULT_USE_DATE
    start_date = params.get("start-date") or ""
    end_date = params.get("end-date") or ""

    page = parse_integer(page_raw)
    per_page = parse_integer(per_page_raw)

    if page is None or page <= 0:
        errors.append(InvalidParameterError("page", page_raw, PAGE_MESSAGE))

    if per_page is None or per_page <= 0 or per_page > MAX_PER_PAGE:
        errors.append(InvalidParameterError("per-page", per_page_raw, PER_PAGE_MESSAGE))

    if order not in ORDERS:
        errors.append(InvalidParameterError("order", order, ORDER_MESSAGE))

    if use_date not in USE_DATES:
        errors.append(InvalidParameterError("use-date", use_date, USE_DATE_MESSAGE))

    if start_date and not is_strict_date(start_date):
        errors.append(InvalidParameterError("start-date", start_date, START_DATE_MESSAGE))

    # The upstream bound is exclusive, so the day after end-date must exist.
    if end_date and (not is_strict_date(end_date) or date.fromisoformat(end_date) == date.max):
        errors.append(InvalidParameterError("end-date", end_date, END_DATE_MESSAGE))

    query = ListQuery(
        page=page if page is not None else DEFAULT_PAGE,
        per_page=per_page if per_page is not None else DEFAULT_PER_PAGE,
        order=order,
        use_date=use_date,
        start_date=start_date,
        end_date=end_date,
    )
    return query, errors


def validate_list_params(params: Mapping[str, str]) -> ListQuery:
    """
    Validate list endpoint parameters.

    Raises:
        InvalidParameterError: The last failing check, when any fails
    """
    query, errors = collect_list_param_errors(params)
    if errors:
        for error in errors:
            logger.debug(f"Invalid '{error.param_name}' parameter: {error.value!r}")
        raise errors[-1]
    return query
