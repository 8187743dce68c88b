"""Health check router."""

import logging

from fastapi import APIRouter, Depends

from cosine_lab.ai import VectorBridge
from cosine_lab.server.config import get_settings
from cosine_lab.server.dependencies import get_vector_bridge
from cosine_lab.server.schemas import HealthResponse
from cosine_lab.utils.config import Config

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
def health_check(
    bridge: VectorBridge = Depends(get_vector_bridge),
    settings: Config = Depends(get_settings),
):
    """Report server status and whether AI features can be used.

    Does not call the model; `ai_available` only means a credential is set.
    """
    return HealthResponse(
        status="ok",
        ai_available=bridge.available,
        model=getattr(bridge, "model_name", None),
        allowed_dimensions=list(settings.ai.allowed_dimensions or []),
    )
