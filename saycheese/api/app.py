"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ..config import Config
from ..logging_config import setup_logging
from ..pipeline import AlternativeAggregator, TeluguAggregator
from . import routes

logger = logging.getLogger(__name__)


def create_app(
    config: Optional[Config] = None,
    telugu_aggregator: Optional[TeluguAggregator] = None,
    alternative_aggregator: Optional[AlternativeAggregator] = None,
    configure_logging: bool = True,
) -> FastAPI:
    """
    Build the API application.

    Aggregators are created from config around one shared HTTP client unless
    supplied. The shared client is closed on shutdown.
    """
    config = config or Config()
    settings = config.config
    if configure_logging:
        setup_logging(settings.log_level)

    client: Optional[httpx.AsyncClient] = None
    if telugu_aggregator is None or alternative_aggregator is None:
        client = httpx.AsyncClient(
            headers={"User-Agent": settings.http.user_agent},
            timeout=settings.http.adapter_timeout_seconds,
        )
    if telugu_aggregator is None:
        telugu_aggregator = TeluguAggregator(config, client=client)
    if alternative_aggregator is None:
        alternative_aggregator = AlternativeAggregator(
            config, client=client, url_validator=getattr(telugu_aggregator, "url_validator", None)
        )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        if client is not None:
            await client.aclose()
            logger.info("HTTP client closed")

    app = FastAPI(title="SayCheese Trending", lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.config = config
    app.state.telugu_aggregator = telugu_aggregator
    app.state.alternative_aggregator = alternative_aggregator

    @app.get("/")
    def root():
        return {"message": "SayCheese trending API", "endpoints": ["/api/trending/telugu", "/api/trending/alternative"]}

    app.include_router(routes.router, prefix="/api", tags=["trending"])
    return app
