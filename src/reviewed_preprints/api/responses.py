"""
Response writing - status, media type and cache headers in one place.
"""

from __future__ import annotations

from typing import Any, Literal

from fastapi.responses import JSONResponse
from pydantic import BaseModel

LIST_CONTENT_TYPE = "application/vnd.elife.reviewed-preprint-list+json; version=1"
PROBLEM_CONTENT_TYPE = "application/problem+json"
JSON_CONTENT_TYPE = "application/json"

CACHE_PUBLIC = "max-age=300, public, stale-if-error=86400, stale-while-revalidate=300"
CACHE_PRIVATE = "must-revalidate, no-cache, private"
VARY = "Accept, Authorization"


# Pydantic models for API responses
class ProblemResponse(BaseModel):
    """Problem details for error responses."""
    title: Literal["bad request", "not found", "bad gateway"]
    detail: str | None = None


class ReviewedPreprintListResponse(BaseModel):
    """Paginated list of reviewed preprint snippets."""
    total: int
    items: list[dict[str, Any]]


def write_response(
    content_type: str,
    status_code: Literal[200, 400, 404, 502],
    message: BaseModel,
) -> JSONResponse:
    """
    Build a JSON response with the standard headers.

    Successful responses are publicly cacheable for five minutes; every
    other status is private and must be revalidated.
    """
    return JSONResponse(
        content=message.model_dump(exclude_none=True),
        status_code=status_code,
        media_type=content_type,
        headers={
            "Cache-Control": CACHE_PUBLIC if status_code == 200 else CACHE_PRIVATE,
            "Vary": VARY,
        },
    )


def error_bad_request(detail: str) -> JSONResponse:
    return write_response(PROBLEM_CONTENT_TYPE, 400, ProblemResponse(title="bad request", detail=detail))


def error_not_found() -> JSONResponse:
    return write_response(JSON_CONTENT_TYPE, 404, ProblemResponse(title="not found"))


def error_bad_gateway(detail: str) -> JSONResponse:
    return write_response(PROBLEM_CONTENT_TYPE, 502, ProblemResponse(title="bad gateway", detail=detail))
