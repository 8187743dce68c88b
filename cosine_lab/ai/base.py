"""Base class for AI bridges."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional, Sequence


NO_CONNECTION_EXPLANATION = "Unable to connect to AI for explanation."
FAILED_EXPLANATION = "Error generating explanation."
EMPTY_EXPLANATION = "No explanation available."


@dataclass
class GeneratedVectors:
    """Vectors produced by an AI bridge for two concepts.

    Only used to populate the calculator's input fields.
    """
    vector_a: List[float]
    vector_b: List[float]
    topic_a: str
    topic_b: str
    reasoning: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class VectorBridge(ABC):
    """Abstract interface to the external language model.

    Implementations must never raise for service failures: generation
    degrades to None and explanations degrade to a fixed message.
    """

    @abstractmethod
    def generate_vectors(
        self,
        concept_a: str,
        concept_b: str,
        dimensions: int = 5,
    ) -> Optional[GeneratedVectors]:
        """Generate hypothetical semantic vectors for two concepts.

        Args:
            concept_a: First concept label
            concept_b: Second concept label
            dimensions: Length of each generated vector

        Returns:
            GeneratedVectors, or None if the service is unavailable or
            returned something unusable
        """
        pass

    @abstractmethod
    def explain(
        self,
        vec_a: Sequence[float],
        vec_b: Sequence[float],
        similarity: float,
    ) -> str:
        """Explain a similarity score in plain language.

        Returns:
            Explanation text, or a fixed fallback message on failure
        """
        pass

    @property
    def available(self) -> bool:
        """Whether the bridge can reach a model at all."""
        return True
