"""
FastAPI application - routes, CORS and server bootstrap.
"""
import logging
from contextlib import asynccontextmanager
from typing import Dict, List, Optional

import uvicorn
from fastapi import Body, Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from pydantic import NonNegativeInt

from ..config.settings import Settings, configure_logging
from ..engine.models import Driver
from ..engine.price_normalizer import normalize
from ..errors import UpstreamError
from ..services.upstream_client import UpstreamClient

logger = logging.getLogger(__name__)


def get_upstream(request: Request) -> UpstreamClient:
    return request.app.state.upstream


async def list_drivers(upstream: UpstreamClient = Depends(get_upstream)) -> List[Driver]:
    return await upstream.fetch_drivers()


async def get_prices(
    products: Dict[str, NonNegativeInt] = Body(...),
    upstream: UpstreamClient = Depends(get_upstream),
):
    response = await upstream.fetch_prices(products)
    grid = normalize(response.quotes)
    return grid.to_dict()


async def root():
    return {"status": "online", "message": "Price Gateway Active"}


async def upstream_error_handler(request: Request, exc: UpstreamError):
    logger.error(f"{request.method} {request.url.path} failed: {exc}")
    return PlainTextResponse(str(exc), status_code=500)


def create_app(settings: Settings, upstream: Optional[UpstreamClient] = None) -> FastAPI:
    """Build the gateway app. `upstream` may be injected (tests); otherwise one is created."""
    upstream = upstream or UpstreamClient(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        await upstream.aclose()

    app = FastAPI(
        title="Price Gateway API",
        description="Driver list and normalized subscription prices for the PrintFactory frontend",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.upstream = upstream

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials=False,
        allow_methods=list(settings.cors_methods),
    )

    app.add_exception_handler(UpstreamError, upstream_error_handler)

    app.add_api_route("/", root, methods=["GET"])
    app.add_api_route("/drivers", list_drivers, methods=["GET"], response_model=List[Driver])
    app.add_api_route("/prices", get_prices, methods=["POST"])

    return app


def main():
    """Read settings from the environment and serve until interrupted."""
    settings = Settings.from_env()
    configure_logging(settings.log_level)

    logger.debug(f"starting server {settings.host} at port {settings.port}…")
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
