"""AI concept router: vector generation and score explanation."""

import logging

from fastapi import APIRouter, Depends, HTTPException

from cosine_lab.ai import VectorBridge
from cosine_lab.server.config import get_settings
from cosine_lab.server.dependencies import get_vector_bridge
from cosine_lab.server.schemas import (
    ExplainRequest,
    ExplainResponse,
    GenerateRequest,
    GenerateResponse,
)
from cosine_lab.utils.config import Config
from cosine_lab.vectors import format_vector

logger = logging.getLogger(__name__)

router = APIRouter()

GENERATION_FAILED_MESSAGE = "Failed to generate vectors. Check API Key or try again."


# Plain `def` endpoints: the blocking LLM call runs in FastAPI's threadpool
@router.post("/generate", response_model=GenerateResponse)
def generate(
    request: GenerateRequest,
    bridge: VectorBridge = Depends(get_vector_bridge),
    settings: Config = Depends(get_settings),
):
    """Ask the AI for vectors representing two concepts.

    The vectors come back both as numbers and as input field text so the
    page can drop them straight into the manual inputs.
    """
    concept_a = request.concept_a.strip()
    concept_b = request.concept_b.strip()
    if not concept_a or not concept_b:
        raise HTTPException(status_code=400, detail="Please enter two concepts.")

    dimensions = request.dimensions or settings.ai.default_dimensions
    allowed = settings.ai.allowed_dimensions
    if dimensions not in allowed:
        raise HTTPException(
            status_code=422,
            detail=f"dimensions must be one of {allowed}, got {dimensions}",
        )

    generated = bridge.generate_vectors(concept_a, concept_b, dimensions)
    if generated is None:
        raise HTTPException(status_code=502, detail=GENERATION_FAILED_MESSAGE)

    return GenerateResponse(
        vector_a=generated.vector_a,
        vector_b=generated.vector_b,
        input_a=format_vector(generated.vector_a),
        input_b=format_vector(generated.vector_b),
        topic_a=generated.topic_a,
        topic_b=generated.topic_b,
        reasoning=generated.reasoning,
    )


@router.post("/explain", response_model=ExplainResponse)
def explain(
    request: ExplainRequest,
    bridge: VectorBridge = Depends(get_vector_bridge),
):
    """Explain a similarity score. Always answers with text."""
    text = bridge.explain(request.vector_a, request.vector_b, request.similarity)
    return ExplainResponse(explanation=text)
