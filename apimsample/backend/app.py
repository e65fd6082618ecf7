"""Backend weather API exposing the direct-auth and gateway-secured routes."""

import logging
import random

from fastapi import APIRouter, Depends, FastAPI, Request

from apimsample.backend.auth import TokenValidator, accept_any_token, require_bearer_token
from apimsample.backend.forecasts import generate_forecasts
from apimsample.config.schema import AppConfig

logger = logging.getLogger(__name__)

# Bearer token required; validation delegated to the identity provider
direct_router = APIRouter(prefix="/direct-auth", tags=["direct-auth"])
# No auth here: the gateway has already checked the subscription key
apim_router = APIRouter(prefix="/apim-auth", tags=["apim-auth"])


def _forecast_payload(request: Request) -> list[dict]:
    return [f.to_dict() for f in generate_forecasts(rng=request.app.state.rng)]


@direct_router.get("/weatherforecast")
def get_direct_forecast(request: Request, _token: str = Depends(require_bearer_token)):
    logger.info("Serving forecasts on direct-auth route")
    return _forecast_payload(request)


@apim_router.get("/weatherforecast")
def get_apim_forecast(request: Request):
    logger.info("Serving forecasts on apim-auth route")
    return _forecast_payload(request)


def create_backend_app(
    config: AppConfig,
    token_validator: TokenValidator | None = None,
    rng: random.Random | None = None,
) -> FastAPI:
    app = FastAPI(
        title="APIM Sample API",
        version="0.1.0",
        swagger_ui_init_oauth={"clientId": config.authentication.swagger_client_id}
        if config.authentication.swagger_client_id
        else None,
    )
    app.state.token_validator = token_validator or accept_any_token
    app.state.rng = rng or random.Random()
    app.include_router(direct_router)
    app.include_router(apim_router)
    return app
