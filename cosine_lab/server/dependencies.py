"""Dependency injection for the server."""

import logging
from functools import lru_cache

from cosine_lab.ai import LLMVectorBridge, VectorBridge
from cosine_lab.server.config import get_settings

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_vector_bridge() -> VectorBridge:
    """Get or create the AI bridge singleton.

    Without an API key the bridge still exists but reports every request
    as failed, so the calculator keeps working in manual mode.
    """
    llm_config = get_settings().get("llm", {})
    logger.info("Initializing AI bridge...")
    return LLMVectorBridge.from_config(llm_config)
