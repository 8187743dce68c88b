"""Pydantic models for API responses and requests."""

from typing import Dict, List, Literal, Optional, Union
from pydantic import BaseModel, Field


class ParseRequest(BaseModel):
    """Raw vector field text."""
    text: str = ""


class ParseResponse(BaseModel):
    values: List[float]
    dimensions: int


class FormatRequest(BaseModel):
    """Vector field text as typed, before normalization."""
    value: str = ""


class FormatResponse(BaseModel):
    value: str


class CompareRequest(BaseModel):
    """Both vector input fields."""
    input_a: str = ""
    input_b: str = ""


class SimilarityInfo(BaseModel):
    """Breakdown of a cosine similarity calculation."""
    dot_product: float
    magnitude_a: float
    magnitude_b: float
    cosine_similarity: float
    angle_degrees: float
    dimensions: int


class CompareResponse(BaseModel):
    """Result of comparing two inputs.

    Exactly one of result/error is set.
    """
    vector_a: List[float]
    vector_b: List[float]
    result: Optional[SimilarityInfo] = None
    label: Optional[str] = None
    formula_steps: List[str] = []
    error: Optional[str] = None


class RotationInfo(BaseModel):
    pitch: float = Field(-20.0, ge=-90.0, le=90.0)
    yaw: float = 45.0


class RotateRequest(RotationInfo):
    """Current rotation plus a pointer drag delta in pixels."""
    dx: float = 0.0
    dy: float = 0.0


class SceneRequest(BaseModel):
    """Vectors to draw and, for 3D, the current view rotation."""
    vector_a: List[float]
    vector_b: List[float]
    label_a: str = "Vector A"
    label_b: str = "Vector B"
    pitch: float = Field(-20.0, ge=-90.0, le=90.0)
    yaw: float = 45.0


class PointInfo(BaseModel):
    x: float
    y: float
    depth: float = 0.0


class Scene2DInfo(BaseModel):
    mode: Literal["2d"] = "2d"
    size: int
    scale: float
    origin: PointInfo
    end_a: PointInfo
    end_b: PointInfo


class Scene3DInfo(BaseModel):
    mode: Literal["3d"] = "3d"
    size: int
    scale: float
    max_val: float
    rotation: RotationInfo
    origin: PointInfo
    axes: Dict[str, PointInfo]
    end_a: PointInfo
    end_b: PointInfo
    floor_a: PointInfo
    floor_b: PointInfo


class DimensionRowInfo(BaseModel):
    dimension: str
    value_a: float
    value_b: float
    full_mark: float


class ComponentSceneInfo(BaseModel):
    mode: Literal["components"] = "components"
    chart: Literal["radar", "bar"]
    label_a: str
    label_b: str
    rows: List[DimensionRowInfo]


class SceneResponse(BaseModel):
    """Chart scene; None when there is nothing to draw."""
    scene: Optional[Union[Scene2DInfo, Scene3DInfo, ComponentSceneInfo]] = None


class VectorPairResponse(BaseModel):
    """A pair of vector field texts."""
    input_a: str
    input_b: str


class PresetsResponse(BaseModel):
    """Starting inputs and the initial 3D view."""
    default: VectorPairResponse
    orthogonal: VectorPairResponse
    rotation: RotationInfo


class GenerateRequest(BaseModel):
    """Concepts to turn into vectors."""
    concept_a: str = ""
    concept_b: str = ""
    dimensions: Optional[int] = None  # Falls back to ai.default_dimensions


class GenerateResponse(BaseModel):
    vector_a: List[float]
    vector_b: List[float]
    input_a: str
    input_b: str
    topic_a: str
    topic_b: str
    reasoning: Optional[str] = None


class ExplainRequest(BaseModel):
    vector_a: List[float]
    vector_b: List[float]
    similarity: float = Field(..., ge=-1.0, le=1.0)


class ExplainResponse(BaseModel):
    explanation: str


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    ai_available: bool
    model: Optional[str] = None
    allowed_dimensions: List[int]
