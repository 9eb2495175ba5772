"""HTTP routes."""

import logging
from typing import Optional

import pendulum
from fastapi import APIRouter, Query, Request, status
from fastapi.responses import JSONResponse

from ..ingestion import describe_sources
from ..pipeline import parse_categories

logger = logging.getLogger(__name__)

router = APIRouter()


def _error(e: Exception) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": str(e) or type(e).__name__},
    )


@router.get("/trending/telugu")
async def telugu_trending(
    request: Request,
    region: str = Query("Telugu"),
    days: Optional[int] = Query(None, ge=1, le=90),
):
    """Politics, Cinema and All buckets of regional content"""
    try:
        result = await request.app.state.telugu_aggregator.aggregate(region, days)
    except Exception as e:
        logger.exception("Telugu trending request failed")
        return _error(e)
    return result.to_response()


@router.get("/trending/alternative")
async def alternative_trending(
    request: Request,
    region: str = Query("IN"),
    categories: Optional[str] = Query(None, description="Comma-separated, e.g. all,tech,news"),
    days: Optional[int] = Query(None, ge=1, le=90),
):
    """General trending content grouped by the requested categories"""
    try:
        result = await request.app.state.alternative_aggregator.aggregate(
            region, parse_categories(categories), days
        )
    except Exception as e:
        logger.exception("Alternative trending request failed")
        return _error(e)
    return result.to_response()


@router.get("/status")
async def service_status(request: Request):
    """Configured keys and cache statistics"""
    state = request.app.state
    config = state.config
    telugu = state.telugu_aggregator
    alternative = state.alternative_aggregator

    url_validator = getattr(telugu, "url_validator", None)
    return {
        "status": "running",
        "timestamp": pendulum.now("UTC").isoformat(),
        "apiKeys": {
            "news_api": config.get_api_key("news_api") is not None,
            "guardian": config.get_api_key("guardian") is not None,
        },
        "cache": {
            "telugu": telugu.cache.stats() if hasattr(telugu, "cache") else None,
            "alternative": alternative.cache.stats() if hasattr(alternative, "cache") else None,
            "urls": url_validator.get_stats() if url_validator is not None else None,
        },
    }


@router.get("/sources")
async def list_sources(request: Request):
    """Enabled sources and APIs that need keys"""
    try:
        return describe_sources(request.app.state.config)
    except Exception as e:
        logger.exception("Sources request failed")
        return _error(e)
