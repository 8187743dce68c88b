"""Comparison flow behind the calculator form.

Turns the two raw input strings into either a similarity result or a
user-facing error message. Nothing here raises: every failure resolves
to something the page can display.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from cosine_lab.vectors.parser import format_vector, parse_vector
from cosine_lab.vectors.similarity import SimilarityResult, calculate_similarity

logger = logging.getLogger(__name__)

DEFAULT_INPUTS = ("2, 1", "1, 3")
ORTHOGONAL_PRESET = ("3, 0", "0, 4")

EMPTY_VECTOR_MESSAGE = "Vectors cannot be empty."


@dataclass
class Comparison:
    """Outcome of comparing two vector inputs."""
    vector_a: List[float] = field(default_factory=list)
    vector_b: List[float] = field(default_factory=list)
    result: Optional[SimilarityResult] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.result is not None

    @property
    def label(self) -> Optional[str]:
        return self.result.label if self.result else None


def dimension_mismatch_message(len_a: int, len_b: int) -> str:
    return (
        f"Dimension mismatch: Vector A has {len_a} dims, "
        f"Vector B has {len_b} dims."
    )


def compare_vectors(vec_a: List[float], vec_b: List[float]) -> Comparison:
    """Compare two parsed vectors, reporting mismatch or emptiness as errors."""
    if len(vec_a) != len(vec_b):
        logger.debug(f"Rejected comparison: {len(vec_a)} vs {len(vec_b)} dims")
        return Comparison(
            vector_a=vec_a,
            vector_b=vec_b,
            error=dimension_mismatch_message(len(vec_a), len(vec_b)),
        )
    if len(vec_a) == 0:
        return Comparison(vector_a=vec_a, vector_b=vec_b, error=EMPTY_VECTOR_MESSAGE)

    result = calculate_similarity(vec_a, vec_b)
    return Comparison(vector_a=vec_a, vector_b=vec_b, result=result)


def compare_inputs(text_a: str, text_b: str) -> Comparison:
    """Parse both input fields and compare them."""
    return compare_vectors(parse_vector(text_a), parse_vector(text_b))


def random_vector_pair(rng: Optional[random.Random] = None) -> Tuple[str, str]:
    """Random pair of 2D or 3D integer vectors with components in [-9, 9].

    Args:
        rng: Random source, mainly for reproducible tests.

    Returns:
        Input field texts for vector A and vector B.
    """
    rng = rng or random.Random()
    dimensions = 2 if rng.random() > 0.5 else 3

    vec_a = [rng.randint(-9, 9) for _ in range(dimensions)]
    vec_b = [rng.randint(-9, 9) for _ in range(dimensions)]
    return format_vector(vec_a), format_vector(vec_b)
