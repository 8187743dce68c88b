"""Similarity computation utilities.

Cosine similarity between two equal-length vectors, with the full
breakdown (dot product, magnitudes, angle) that the calculator shows.
"""

import math
from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional, Sequence, Tuple

import numpy as np


@dataclass(frozen=True)
class SimilarityResult:
    """Breakdown of a single cosine similarity calculation.

    A new result is produced on every calculation; it is never mutated.
    """
    dot_product: float
    magnitude_a: float
    magnitude_b: float
    cosine_similarity: float  # Clamped to [-1, 1]
    angle_degrees: float  # In [0, 180]
    dimensions: int

    @property
    def label(self) -> str:
        return classify_similarity(self.cosine_similarity)

    def to_dict(self) -> Dict[str, Any]:
        """Convert result to a plain dictionary."""
        return asdict(self)

    def formula_steps(self) -> List[str]:
        """Worked formula lines shown next to the result."""
        return [
            "cos(θ) = (A · B) / (‖A‖ × ‖B‖)",
            f"A · B = {self.dot_product:.4f}",
            f"‖A‖ = {self.magnitude_a:.4f}",
            f"‖B‖ = {self.magnitude_b:.4f}",
            (
                f"cos(θ) = {self.dot_product:.4f} / "
                f"({self.magnitude_a:.4f} × {self.magnitude_b:.4f}) "
                f"= {self.cosine_similarity:.4f}"
            ),
            f"θ = {self.angle_degrees:.2f}°",
        ]


def _scaled(vec: np.ndarray) -> Tuple[float, np.ndarray]:
    """Split a vector into its largest absolute component and a unit-range copy.

    Working on the unit-range copy keeps squares and products from
    overflowing or underflowing for very large or very small components.
    """
    scale = float(np.max(np.abs(vec)))
    if scale == 0.0:
        return 0.0, vec
    return scale, vec / scale


def calculate_similarity(
    vec_a: Sequence[float],
    vec_b: Sequence[float],
) -> Optional[SimilarityResult]:
    """Compute the cosine similarity breakdown of two vectors.

    Args:
        vec_a: First vector
        vec_b: Second vector

    Returns:
        SimilarityResult, or None if either vector is empty or their
        lengths differ. A zero-magnitude vector yields a cosine similarity
        and angle of 0 instead of NaN.

        The similarity and angle stay finite for any finite input. The
        reported dot product and magnitudes can still exceed the float
        range (e.g. components near 1e200) and are then infinite.
    """
    if len(vec_a) == 0 or len(vec_b) == 0 or len(vec_a) != len(vec_b):
        return None

    a = np.asarray(vec_a, dtype=np.float64)
    b = np.asarray(vec_b, dtype=np.float64)

    scale_a, unit_a = _scaled(a)
    scale_b, unit_b = _scaled(b)

    unit_dot = float(np.dot(unit_a, unit_b))
    norm_a = float(np.linalg.norm(unit_a))
    norm_b = float(np.linalg.norm(unit_b))

    dot_product = unit_dot * scale_a * scale_b
    magnitude_a = norm_a * scale_a
    magnitude_b = norm_b * scale_b

    if scale_a == 0.0 or scale_b == 0.0:
        return SimilarityResult(
            dot_product=dot_product,
            magnitude_a=magnitude_a,
            magnitude_b=magnitude_b,
            cosine_similarity=0.0,
            angle_degrees=0.0,
            dimensions=len(a),
        )

    # Clamp to absorb floating point drift before acos
    similarity = max(-1.0, min(1.0, unit_dot / (norm_a * norm_b)))
    angle_degrees = math.degrees(math.acos(similarity))

    return SimilarityResult(
        dot_product=dot_product,
        magnitude_a=magnitude_a,
        magnitude_b=magnitude_b,
        cosine_similarity=similarity,
        angle_degrees=angle_degrees,
        dimensions=len(a),
    )


def cosine_similarity(vec_a: Sequence[float], vec_b: Sequence[float]) -> float:
    """Compute cosine similarity between two vectors.

    Args:
        vec_a: First vector
        vec_b: Second vector

    Returns:
        Cosine similarity in range [-1, 1]; 0.0 when the vectors cannot be
        compared (empty, mismatched or zero magnitude).
    """
    result = calculate_similarity(vec_a, vec_b)
    if result is None:
        return 0.0
    return result.cosine_similarity


def classify_similarity(score: float) -> str:
    """Human-readable strength of a cosine similarity score."""
    if score > 0.9:
        return "Very Similar"
    if score > 0.5:
        return "Similar"
    if score > 0:
        return "Weakly Related"
    return "Opposite / Unrelated"
