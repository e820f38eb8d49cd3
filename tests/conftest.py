"""
Pytest configuration and shared fixtures.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import httpx
import pytest
from fastapi.testclient import TestClient

from reviewed_preprints.api.server import create_api_server
from reviewed_preprints.core.config import Settings
from reviewed_preprints.infrastructure.sources import PreprintsClient

UPSTREAM_URL = "http://upstream.test"


# ============================================================
# Mock Upstream Records
# ============================================================


@pytest.fixture
def make_article_data() -> Callable[..., dict[str, Any]]:
    """Factory for upstream enhanced article records (no content)."""

    def _make(msid: str = "80494", **overrides: Any) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": f"{msid}v1",
            "msid": msid,
            "doi": f"10.7554/eLife.{msid}.1",
            "versionDoi": f"10.7554/eLife.{msid}.1",
            "preprintDoi": "10.1101/2022.06.24.497502",
            "preprintUrl": "https://www.biorxiv.org/content/10.1101/2022.06.24.497502v1",
            "preprintPosted": "2022-06-25T00:00:00.000Z",
            "sentForReview": "2022-07-01T00:00:00.000Z",
            "published": "2023-05-02T09:00:00.123Z",
            "publishedYear": 2023,
            "volume": "12",
            "eLocationId": f"RP{msid}",
            "subjects": ["Cell Biology", "Neuroscience"],
            "pdfUrl": f"https://example.org/{msid}.pdf",
            "article": {
                "title": [
                    "Mapping ",
                    {"type": "Emphasis", "content": "Drosophila"},
                    " wing discs",
                ],
                "authors": [
                    {"givenNames": ["Jane"], "familyNames": ["Doe"]},
                    {"givenNames": ["John", "Q"], "familyNames": ["Public"]},
                ],
                "licenses": [{"type": "CC-BY"}],
                "headings": [],
                "references": [],
            },
            "firstPublished": "2023-05-01T12:30:45.678Z",
        }
        data.update(overrides)
        return data

    return _make


@pytest.fixture
def article_data(make_article_data) -> dict[str, Any]:
    """A single upstream record."""
    return make_article_data()


# ============================================================
# Mock Upstream Service
# ============================================================


@pytest.fixture
def upstream_requests() -> list[httpx.Request]:
    """Requests received by the mock upstream service."""
    return []


@pytest.fixture
def make_preprints_client(upstream_requests) -> Callable[..., PreprintsClient]:
    """Factory for a PreprintsClient backed by an in-memory upstream."""

    def _make(
        status_code: int = 200,
        json: Any = None,
        headers: dict[str, str] | None = None,
        content: bytes | None = None,
    ) -> PreprintsClient:
        def handler(request: httpx.Request) -> httpx.Response:
            upstream_requests.append(request)
            if content is not None:
                return httpx.Response(status_code, content=content, headers=headers)
            return httpx.Response(status_code, json=[] if json is None else json, headers=headers)

        http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return PreprintsClient(base_url=UPSTREAM_URL, http_client=http_client)

    return _make


@pytest.fixture
def make_test_client(make_preprints_client) -> Callable[..., TestClient]:
    """Factory for a TestClient over an app with a mocked upstream."""

    def _make(**upstream: Any) -> TestClient:
        app = create_api_server(
            Settings(upstream_url=UPSTREAM_URL),
            client=make_preprints_client(**upstream),
        )
        return TestClient(app)

    return _make
