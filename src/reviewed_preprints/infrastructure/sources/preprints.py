"""
Preprint Listing Source - upstream reviewed preprint service.

Fetches one page of reviewed preprint versions (metadata only, no body
content) from the upstream service:

    GET {base_url}/api/preprints-no-content?page=1&per-page=20&order=desc

The total number of matching records is read from the ``x-total-count``
response header.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Any

import httpx

from reviewed_preprints.core.exceptions import (
    ErrorContext,
    InvalidParameterError,
    NetworkError,
    ParseError,
    UpstreamResponseError,
)
from reviewed_preprints.domain.entities import EnhancedArticle

logger = logging.getLogger(__name__)

LIST_PATH = "/api/preprints-no-content"
TOTAL_COUNT_HEADER = "x-total-count"


@dataclass
class PreprintListResult:
    """One page of upstream records plus the overall match count."""
    total: int
    items: list[EnhancedArticle] = field(default_factory=list)


def build_list_params(
    page: int,
    per_page: int,
    order: str,
    use_date: str,
    start_date: str = "",
    end_date: str = "",
) -> dict[str, Any]:
    """
    Build the upstream query parameters.

    ``use-date`` is only sent when filtering on the published date.
    ``end-date`` is moved forward one day so the requested end day is
    included by the upstream (exclusive) bound.
    """
    params: dict[str, Any] = {
        "page": page,
        "per-page": per_page,
        "order": order,
    }
    if use_date == "published":
        params["use-date"] = "firstPublished"
    if start_date:
        params["start-date"] = start_date
    if end_date:
        try:
            params["end-date"] = (date.fromisoformat(end_date) + timedelta(days=1)).isoformat()
        except OverflowError as e:
            raise InvalidParameterError("end-date", end_date, "no day follows 'end-date'") from e
    return params


def parse_total_count(header: str | None, fallback: int) -> int:
    """Parse the total count header, falling back to the page size."""
    if header is None:
        return fallback
    try:
        return int(header.strip())
    except ValueError:
        logger.warning(f"Ignoring non-integer {TOTAL_COUNT_HEADER} header: {header!r}")
        return fallback


class PreprintsClient:
    """
    Client for the upstream preprint listing service.

    One request per call, no retries. Failures raise:
    - UpstreamResponseError: non-2xx response
    - NetworkError: connection or timeout failure
    - ParseError: body is not a JSON array of records

    Example:
        client = PreprintsClient(base_url="http://localhost:3000")
        result = await client.fetch_list(page=1, per_page=20, order="desc", use_date="default")
        print(result.total, len(result.items))
    """

    _service_name = "preprints"

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._client = http_client
        self._owns_client = http_client is None

    @property
    def client(self) -> httpx.AsyncClient:
        """
        Lazy-init async HTTP client.

        An injected client is always returned as given, even once closed;
        only a client created here is rebuilt after close().
        """
        if self._owns_client and (self._client is None or self._client.is_closed):
            self._client = httpx.AsyncClient(
                timeout=self._timeout,
                headers={"Accept": "application/json"},
            )
        return self._client

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()

    def _build_url(self, path: str) -> str:
        return f"{self._base_url}{path}"

    async def fetch_list(
        self,
        page: int,
        per_page: int,
        order: str,
        use_date: str,
        start_date: str = "",
        end_date: str = "",
    ) -> PreprintListResult:
        """
        Fetch one page of reviewed preprints.

        Args:
            page: 1-based page number
            per_page: Page size
            order: "asc" or "desc"
            use_date: "default" or "published"
            start_date: Optional YYYY-MM-DD lower bound
            end_date: Optional YYYY-MM-DD upper bound (inclusive)

        Returns:
            PreprintListResult with total count and parsed records
        """
        url = self._build_url(LIST_PATH)
        params = build_list_params(page, per_page, order, use_date, start_date, end_date)
        logger.info(f"Fetching reviewed preprints: {url} {params}")

        try:
            response = await self.client.get(url, params=params)
        except httpx.RequestError as e:
            logger.error(f"{self._service_name} request failed: {e}")
            raise NetworkError(
                f"Connection to {url} failed: {e}",
                context=ErrorContext(operation="fetch_list", url=url),
            ) from e

        request_url = str(response.request.url)
        if not response.is_success:
            logger.error(
                f"{self._service_name} HTTP error {response.status_code}: {response.reason_phrase} for {request_url}"
            )
            raise UpstreamResponseError(
                request_url,
                response.status_code,
                response.reason_phrase,
                context=ErrorContext(operation="fetch_list"),
            )

        try:
            data = response.json()
        except ValueError as e:
            raise ParseError("Invalid JSON response", source=self._service_name) from e
        if not isinstance(data, list):
            raise ParseError(f"expected a JSON array, got {type(data).__name__}", source=self._service_name)

        items = [EnhancedArticle.from_dict(record) for record in data]
        total = parse_total_count(response.headers.get(TOTAL_COUNT_HEADER), len(items))
        logger.debug(f"Fetched {len(items)} of {total} reviewed preprints")
        return PreprintListResult(total=total, items=items)
