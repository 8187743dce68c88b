"""AI bridge backed by an OpenAI-compatible chat model.

Example:
    >>> from cosine_lab.ai import LLMVectorBridge
    >>>
    >>> bridge = LLMVectorBridge.from_config()  # Uses OPENAI_API_KEY from .env
    >>> generated = bridge.generate_vectors("King", "Queen", dimensions=3)
    >>> if generated:
    ...     print(generated.vector_a, generated.vector_b)
    ...     print(bridge.explain(generated.vector_a, generated.vector_b, 0.93))
"""

import json
import logging
import math
import re
from typing import Any, Dict, List, Optional, Sequence

from pydantic import BaseModel, Field, ValidationError

from cosine_lab.ai.base import (
    EMPTY_EXPLANATION,
    FAILED_EXPLANATION,
    NO_CONNECTION_EXPLANATION,
    GeneratedVectors,
    VectorBridge,
)
from cosine_lab.utils.llm_client import LLMClient


logger = logging.getLogger(__name__)

EXPLAIN_PREVIEW_LENGTH = 5

GENERATE_PROMPT_TEMPLATE = """Generate two hypothetical {dimensions}-dimensional semantic feature vectors for the concepts "{topic_a}" and "{topic_b}".
The vectors should represent the semantic meaning of these words in a latent space, with every value between -1 and 1.
Provide a brief reasoning for why they are similar or different.

Respond with a JSON object only, using exactly these keys:
- "vectorA": array of {dimensions} numbers for "{topic_a}"
- "vectorB": array of {dimensions} numbers for "{topic_b}"
- "reasoning": short explanation of the relationship"""

EXPLAIN_PROMPT_TEMPLATE = """I have calculated the Cosine Similarity between two vectors.
Vector A: [{preview_a}]
Vector B: [{preview_b}]
Cosine Similarity Score: {similarity:.4f}

Explain what this score implies geometrically (angle) and generally (relationship strength).
Keep it concise (under 3 sentences) and easy to understand for a student."""

CODE_FENCE_PATTERN = re.compile(r"^```(?:json)?\s*(.*?)\s*```$", re.DOTALL)


class VectorPayload(BaseModel):
    """Expected JSON body of a vector generation response."""
    vector_a: List[float] = Field(alias="vectorA")
    vector_b: List[float] = Field(alias="vectorB")
    reasoning: str


def _preview(vec: Sequence[float]) -> str:
    head = ", ".join(f"{v:g}" for v in vec[:EXPLAIN_PREVIEW_LENGTH])
    return head + ("..." if len(vec) > EXPLAIN_PREVIEW_LENGTH else "")


class LLMVectorBridge(VectorBridge):
    """Vector generation and explanation through an LLMClient.

    A bridge without a client (no API key configured) stays usable: it
    simply reports every request as failed.
    """

    def __init__(
        self,
        llm_client: Optional[LLMClient],
        model: str = None,
        temperature: float = 0.7,
    ):
        """Initialize the bridge.

        Args:
            llm_client: LLM client instance, or None when no credential exists.
            model: Model to use. Defaults to the client's default model.
            temperature: Sampling temperature for generation.
        """
        self.llm_client = llm_client
        self.model = model
        self.temperature = temperature

    @classmethod
    def from_config(cls, llm_config: Optional[Dict[str, Any]] = None) -> "LLMVectorBridge":
        """Build a bridge from the `llm` config section.

        A missing API key is logged and produces a client-less bridge.
        """
        llm_config = llm_config or {}
        client_kwargs = {"timeout": llm_config.get("timeout") or 60}
        if llm_config.get("base_url"):
            client_kwargs["base_url"] = llm_config["base_url"]
        if llm_config.get("model"):
            client_kwargs["default_model"] = llm_config["model"]

        try:
            client = LLMClient(**client_kwargs)
        except ValueError as e:
            logger.warning(f"API key is missing. AI features will not work. ({e})")
            client = None

        temperature = llm_config.get("temperature")
        return cls(
            client,
            model=llm_config.get("model"),
            temperature=0.7 if temperature is None else temperature,
        )

    @property
    def available(self) -> bool:
        return self.llm_client is not None

    @property
    def model_name(self) -> Optional[str]:
        if self.llm_client is None:
            return None
        return self.model or self.llm_client.default_model

    def generate_vectors(
        self,
        concept_a: str,
        concept_b: str,
        dimensions: int = 5,
    ) -> Optional[GeneratedVectors]:
        if self.llm_client is None:
            logger.warning("Vector generation skipped: no LLM client configured")
            return None

        prompt = GENERATE_PROMPT_TEMPLATE.format(
            dimensions=dimensions,
            topic_a=concept_a,
            topic_b=concept_b,
        )

        try:
            response = self.llm_client.json_completion(
                prompt,
                model=self.model,
                temperature=self.temperature,
            )
        except RuntimeError as e:
            logger.error(f"Error generating vectors: {e}")
            return None

        payload = self._parse_payload(response, dimensions)
        if payload is None:
            return None

        logger.info(
            f"Generated {dimensions}-dimensional vectors for "
            f"'{concept_a}' and '{concept_b}'"
        )
        return GeneratedVectors(
            vector_a=payload.vector_a,
            vector_b=payload.vector_b,
            topic_a=concept_a,
            topic_b=concept_b,
            reasoning=payload.reasoning,
        )

    def explain(
        self,
        vec_a: Sequence[float],
        vec_b: Sequence[float],
        similarity: float,
    ) -> str:
        if self.llm_client is None:
            return NO_CONNECTION_EXPLANATION

        prompt = EXPLAIN_PROMPT_TEMPLATE.format(
            preview_a=_preview(vec_a),
            preview_b=_preview(vec_b),
            similarity=similarity,
        )

        try:
            response = self.llm_client.chat_completion(
                messages=[{"role": "user", "content": prompt}],
                model=self.model,
                temperature=self.temperature,
            )
        except RuntimeError as e:
            logger.error(f"Error explaining similarity: {e}")
            return FAILED_EXPLANATION

        return response.strip() or EMPTY_EXPLANATION

    def _parse_payload(self, response: str, dimensions: int) -> Optional[VectorPayload]:
        """Parse and validate the JSON body of a generation response.

        Handles bare JSON and JSON wrapped in a markdown code fence.
        Returns None (and logs why) for anything unusable.
        """
        text = (response or "").strip()
        if not text:
            logger.warning("Empty response from LLM for vector generation")
            return None

        fenced = CODE_FENCE_PATTERN.match(text)
        if fenced:
            text = fenced.group(1)

        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            logger.warning(f"Malformed JSON from LLM: {e}. Response: '{text[:200]}'")
            return None

        if not isinstance(data, dict):
            logger.warning(f"Expected a JSON object from LLM, got {type(data).__name__}")
            return None

        try:
            payload = VectorPayload(**data)
        except ValidationError as e:
            logger.warning(f"LLM response failed validation: {e}")
            return None

        for name, vec in (("vectorA", payload.vector_a), ("vectorB", payload.vector_b)):
            if len(vec) != dimensions:
                logger.warning(
                    f"LLM returned {len(vec)} values for {name}, expected {dimensions}"
                )
                return None
            if not all(math.isfinite(v) for v in vec):
                logger.warning(f"LLM returned non-finite values for {name}")
                return None

        return payload
