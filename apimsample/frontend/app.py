"""Front-end client proxying both forecast sources as JSON."""

import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, Request

from apimsample.client.forecast_client import ForecastClient
from apimsample.client.http import build_http_client
from apimsample.config.schema import AppConfig
from apimsample.models.common import ApiSource

logger = logging.getLogger(__name__)

ROUTES: dict[ApiSource, str] = {
    ApiSource.DIRECT_AUTH: "/direct-auth-api",
    ApiSource.APIM_AUTH: "/apim-auth-api",
}


def create_frontend_app(
    config: AppConfig, http_client: httpx.AsyncClient | None = None
) -> FastAPI:
    """Build the front-end app.

    When ``http_client`` is given the caller owns it; otherwise one pooled
    client is created on startup and closed on shutdown.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        http = http_client or build_http_client(config.api)
        app.state.forecast_client = ForecastClient(http, config.api)
        logger.info("Front-end proxying %s", config.api.base_url)
        try:
            yield
        finally:
            if http_client is None:
                await http.aclose()

    app = FastAPI(title=config.frontend.title, version="0.1.0", lifespan=lifespan)

    @app.get("/")
    def index():
        return {
            "title": config.frontend.title,
            "sources": [
                {"apiSource": str(source), "path": path}
                for source, path in ROUTES.items()
            ],
        }

    @app.get(ROUTES[ApiSource.DIRECT_AUTH])
    async def direct_auth_api(request: Request):
        result = await request.app.state.forecast_client.fetch(ApiSource.DIRECT_AUTH)
        return result.to_dict()

    @app.get(ROUTES[ApiSource.APIM_AUTH])
    async def apim_auth_api(request: Request):
        result = await request.app.state.forecast_client.fetch(ApiSource.APIM_AUTH)
        return result.to_dict()

    return app
