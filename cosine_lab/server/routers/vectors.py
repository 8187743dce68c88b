"""Vector calculator router: parsing, comparison and chart scenes."""

import logging

from fastapi import APIRouter, Depends

from cosine_lab.server.config import get_settings
from cosine_lab.server.schemas import (
    CompareRequest,
    CompareResponse,
    ComponentSceneInfo,
    FormatRequest,
    FormatResponse,
    ParseRequest,
    ParseResponse,
    PresetsResponse,
    RotateRequest,
    RotationInfo,
    Scene2DInfo,
    Scene3DInfo,
    SceneRequest,
    SceneResponse,
    SimilarityInfo,
    VectorPairResponse,
)
from cosine_lab.utils.config import Config
from cosine_lab.vectors import (
    DEFAULT_INPUTS,
    ORTHOGONAL_PRESET,
    ComponentScene,
    Rotation,
    Scene2D,
    build_scene,
    compare_inputs,
    format_vector_input,
    parse_vector,
    random_vector_pair,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/parse", response_model=ParseResponse)
def parse(request: ParseRequest):
    """Parse vector field text, silently dropping non-numeric tokens."""
    values = parse_vector(request.text)
    return ParseResponse(values=values, dimensions=len(values))


@router.post("/format", response_model=FormatResponse)
def format_input(request: FormatRequest):
    """Normalize typed vector text ("1 2 " -> "1, 2, ")."""
    return FormatResponse(value=format_vector_input(request.value))


@router.post("/compare", response_model=CompareResponse)
def compare(request: CompareRequest):
    """Compare both input fields.

    Dimension mismatch and empty vectors are reported in `error`, never
    as an HTTP failure.
    """
    comparison = compare_inputs(request.input_a, request.input_b)

    if not comparison.ok:
        return CompareResponse(
            vector_a=comparison.vector_a,
            vector_b=comparison.vector_b,
            error=comparison.error,
        )

    result = comparison.result
    logger.debug(
        f"Compared {result.dimensions}-dim vectors: "
        f"cos={result.cosine_similarity:.4f}, angle={result.angle_degrees:.2f}"
    )
    return CompareResponse(
        vector_a=comparison.vector_a,
        vector_b=comparison.vector_b,
        result=SimilarityInfo(**result.to_dict()),
        label=comparison.label,
        formula_steps=result.formula_steps(),
    )


@router.post("/scene", response_model=SceneResponse)
def scene(
    request: SceneRequest,
    settings: Config = Depends(get_settings),
):
    """Build the chart scene for a vector pair at the given rotation."""
    built = build_scene(
        request.vector_a,
        request.vector_b,
        rotation=Rotation(pitch=request.pitch, yaw=request.yaw),
        label_a=request.label_a,
        label_b=request.label_b,
        size_2d=settings.chart.size_2d,
        size_3d=settings.chart.size_3d,
    )

    if built is None:
        return SceneResponse(scene=None)
    if isinstance(built, Scene2D):
        return SceneResponse(scene=Scene2DInfo(**built.to_dict()))
    if isinstance(built, ComponentScene):
        return SceneResponse(scene=ComponentSceneInfo(**built.to_dict()))
    return SceneResponse(scene=Scene3DInfo(**built.to_dict()))


@router.post("/rotate", response_model=RotationInfo)
def rotate(
    request: RotateRequest,
    settings: Config = Depends(get_settings),
):
    """Apply a pointer drag to a 3D view rotation."""
    rotation = Rotation(pitch=request.pitch, yaw=request.yaw)
    rotation.drag(request.dx, request.dy, sensitivity=settings.chart.drag_sensitivity)
    return RotationInfo(pitch=rotation.pitch, yaw=rotation.yaw)


@router.get("/random", response_model=VectorPairResponse)
def random_pair():
    """Random 2D or 3D integer vector pair."""
    input_a, input_b = random_vector_pair()
    return VectorPairResponse(input_a=input_a, input_b=input_b)


@router.get("/presets", response_model=PresetsResponse)
def presets(settings: Config = Depends(get_settings)):
    return PresetsResponse(
        default=VectorPairResponse(input_a=DEFAULT_INPUTS[0], input_b=DEFAULT_INPUTS[1]),
        orthogonal=VectorPairResponse(
            input_a=ORTHOGONAL_PRESET[0], input_b=ORTHOGONAL_PRESET[1]
        ),
        rotation=RotationInfo(
            pitch=settings.chart.initial_pitch,
            yaw=settings.chart.initial_yaw,
        ),
    )
