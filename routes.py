import logging
from typing import Optional, Union

from fastapi import APIRouter, Depends, Request

from config import Settings
from models import ErrorResponse, RawRoastResponse, RoastRequest, RoastResponse
from utils.openrouter_client import RoastGateway
from utils.presentation import build_roast_response, is_pro
from utils.roast_parser import parse_roast

logger = logging.getLogger(__name__)

# Create router
router = APIRouter()


def get_settings_dep(request: Request) -> Settings:
    return request.app.state.settings


def get_gateway(request: Request) -> RoastGateway:
    return request.app.state.gateway


@router.get("/")
async def root():
    return {
        "service": "RevRoast",
        "status": "running",
        "endpoints": {"roast": "/api/roast (POST)"},
    }


@router.get("/health")
async def health_check():
    return {"status": "healthy"}


@router.post(
    "/api/roast",
    response_model=Union[RoastResponse, RawRoastResponse],
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def roast_landing_page(
    body: RoastRequest,
    pro: Optional[str] = None,
    gateway: RoastGateway = Depends(get_gateway),
    settings: Settings = Depends(get_settings_dep),
):
    """
    Roasts a SaaS landing page.

    Returns {"result": text} in raw mode, otherwise the parsed buckets
    (score, good, confusing, improvements). Pass pro=true for the full
    improvements list and the advisory sections.
    """
    completion = await gateway.fetch_roast(body.url)

    if settings.raw_mode:
        return RawRoastResponse(result=completion)

    result = parse_roast(completion)
    logger.info(
        f"✓ Roast parsed for {body.url} - score={result.score or 'n/a'}, "
        f"good={len(result.good)}, confusing={len(result.confusing)}, "
        f"improvements={len(result.improvements)}"
    )
    return build_roast_response(
        result, is_pro(pro), settings.IMPROVEMENTS_PREVIEW_LIMIT
    )
