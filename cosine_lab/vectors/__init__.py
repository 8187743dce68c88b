"""Vector parsing, similarity and projection.

Everything in this package is pure and synchronous; no network access.

Example:
    >>> from cosine_lab.vectors import parse_vector, calculate_similarity
    >>>
    >>> result = calculate_similarity(parse_vector("3, 0"), parse_vector("0, 4"))
    >>> print(f"{result.cosine_similarity:.4f} ({result.angle_degrees:.2f}°)")
    0.0000 (90.00°)
"""

from cosine_lab.vectors.parser import format_vector, format_vector_input, parse_vector
from cosine_lab.vectors.projection import (
    ComponentScene,
    DragTracker,
    Projector3D,
    Rotation,
    Scene2D,
    Scene3D,
    build_scene,
    dimension_comparison,
    project_2d,
)
from cosine_lab.vectors.similarity import (
    SimilarityResult,
    calculate_similarity,
    classify_similarity,
    cosine_similarity,
)
from cosine_lab.vectors.workbench import (
    DEFAULT_INPUTS,
    ORTHOGONAL_PRESET,
    Comparison,
    compare_inputs,
    compare_vectors,
    random_vector_pair,
)

__all__ = [
    "ComponentScene",
    "Comparison",
    "DEFAULT_INPUTS",
    "DragTracker",
    "ORTHOGONAL_PRESET",
    "Projector3D",
    "Rotation",
    "Scene2D",
    "Scene3D",
    "SimilarityResult",
    "build_scene",
    "calculate_similarity",
    "classify_similarity",
    "compare_inputs",
    "compare_vectors",
    "cosine_similarity",
    "dimension_comparison",
    "format_vector",
    "format_vector_input",
    "parse_vector",
    "project_2d",
    "random_vector_pair",
]
