"""
HTTP API Server for reviewed preprint listings.

Endpoints:
    GET /        Paginated list of reviewed preprint snippets
    GET /{id}    Single reviewed preprint (not available yet, always 404)

Records are fetched from the upstream preprint service on every request;
nothing is stored or cached here.
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.responses import JSONResponse

from reviewed_preprints.application import to_snippet
from reviewed_preprints.core.config import Settings, configure_logging
from reviewed_preprints.core.exceptions import (
    InvalidParameterError,
    NotFoundError,
    ReviewedPreprintsError,
    is_upstream_error,
)
from reviewed_preprints.infrastructure.sources import PreprintsClient

from .params import validate_list_params
from .responses import (
    LIST_CONTENT_TYPE,
    ReviewedPreprintListResponse,
    error_bad_gateway,
    error_bad_request,
    error_not_found,
    write_response,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan manager."""
    settings: Settings = app.state.settings
    logger.info(f"Reviewed preprints API using upstream {settings.upstream_url}")

    yield

    # Shutdown
    await app.state.preprints_client.close()
    logger.info("Reviewed preprints API shutting down")


def get_preprints_client(request: Request) -> PreprintsClient:
    """Dependency returning the app-wide upstream client."""
    return request.app.state.preprints_client


def query_params(request: Request) -> dict[str, str]:
    """Flatten query parameters; repeated names are comma-joined."""
    params = request.query_params
    return {key: ",".join(params.getlist(key)) for key in params.keys()}


@router.get("/")
async def list_reviewed_preprints(
    request: Request,
    client: PreprintsClient = Depends(get_preprints_client),
) -> JSONResponse:
    """
    List reviewed preprints.

    Query parameters: page, per-page, order, use-date, start-date, end-date.
    """
    query = validate_list_params(query_params(request))

    result = await client.fetch_list(
        page=query.page,
        per_page=query.per_page,
        order=query.order,
        use_date=query.use_date,
        start_date=query.start_date,
        end_date=query.end_date,
    )
    items = [to_snippet(article).to_dict() for article in result.items]

    return write_response(
        LIST_CONTENT_TYPE,
        200,
        ReviewedPreprintListResponse(total=result.total, items=items),
    )


@router.get("/{preprint_id:path}")
async def get_reviewed_preprint(preprint_id: str) -> JSONResponse:
    """Single item lookup is not available yet."""
    raise NotFoundError("reviewed preprint", preprint_id)


async def handle_service_error(request: Request, exc: Exception) -> JSONResponse:
    """Map service exceptions onto problem responses."""
    if isinstance(exc, InvalidParameterError):
        return error_bad_request(str(exc))
    if isinstance(exc, NotFoundError):
        return error_not_found()
    if is_upstream_error(exc):
        logger.exception(f"Upstream failure for {request.url.path}: {exc.to_dict()}")
        return error_bad_gateway(str(exc))
    raise exc


def create_api_server(
    settings: Settings | None = None,
    client: PreprintsClient | None = None,
) -> FastAPI:
    """
    Create the FastAPI server.

    Args:
        settings: Runtime settings (read from the environment if None)
        client: Upstream client (built from settings if None)

    Returns:
        Configured FastAPI instance.
    """
    settings = settings or Settings.from_env()

    app = FastAPI(
        title="Reviewed Preprints API",
        description="Paginated listing of reviewed preprints.",
        version="1.0.0",
        lifespan=lifespan,
        # Every path outside the list route belongs to the item route.
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.settings = settings
    app.state.preprints_client = client or PreprintsClient(
        base_url=settings.upstream_url,
        timeout=settings.upstream_timeout,
    )
    app.add_exception_handler(ReviewedPreprintsError, handle_service_error)
    app.include_router(router)

    return app


# Create the app instance
app = create_api_server()


def run_api_server(settings: Settings) -> None:
    """Run the HTTP API server under uvicorn."""
    import uvicorn

    logger.info(f"Starting HTTP API server on {settings.host}:{settings.port}")
    uvicorn.run(
        create_api_server(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


def main(argv: list[str] | None = None) -> None:
    """Command line entry point."""
    parser = argparse.ArgumentParser(description="Reviewed Preprints HTTP API Server")
    parser.add_argument("--host", help="Host to bind to")
    parser.add_argument("--port", type=int, help="Port to bind to")
    parser.add_argument("--upstream-url", help="Base URL of the upstream preprint service")
    parser.add_argument("--upstream-timeout", type=float, help="Upstream request timeout in seconds")
    parser.add_argument("--log-level", help="Logging level (DEBUG, INFO, ...)")

    args = parser.parse_args(argv)

    settings = Settings.from_env().override(
        host=args.host,
        port=args.port,
        upstream_url=args.upstream_url,
        upstream_timeout=args.upstream_timeout,
        log_level=args.log_level.upper() if args.log_level else None,
    )
    configure_logging(settings.log_level)
    run_api_server(settings)


if __name__ == "__main__":
    main()
