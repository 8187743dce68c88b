"""Screen projection of vectors for the chart.

Three chart modes exist:
    - "2d": both vectors have 2 components and are drawn on a Cartesian plane
    - "3d": both vectors have 3 components and are drawn with an orthographic
      projection under a drag-controlled rotation
    - "components": any other dimensionality is shown as a per-dimension
      comparison (radar for more than 3 dimensions, bar otherwise)

Screen coordinates have their origin in the top-left corner with y pointing
down, so every projection flips the y axis.
"""

import math
from dataclasses import dataclass, asdict, field
from typing import Any, Dict, List, Optional, Sequence

import numpy as np


CANVAS_SIZE_2D = 300
MARGIN_2D = 20
PADDING_2D = 1.2
MIN_EXTENT_2D = 1.0

CANVAS_SIZE_3D = 320
MARGIN_3D = 40
PADDING_3D = 1.5
MIN_EXTENT_3D = 5.0

PITCH_LIMIT = 90.0
DEFAULT_PITCH = -20.0
DEFAULT_YAW = 45.0
DRAG_SENSITIVITY = 0.5


@dataclass
class ScreenPoint:
    """A projected point; depth is only meaningful for 3D scenes."""
    x: float
    y: float
    depth: float = 0.0


def _max_abs(*vectors: Sequence[float]) -> float:
    components = [abs(v) for vec in vectors for v in vec]
    return max(components) if components else 0.0


# ============== 2D ==============

@dataclass
class Scene2D:
    """Two 2-vectors scaled onto a square canvas."""
    size: int
    scale: float
    origin: ScreenPoint
    end_a: ScreenPoint
    end_b: ScreenPoint
    mode: str = "2d"

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def project_2d(
    vec_a: Sequence[float],
    vec_b: Sequence[float],
    size: int = CANVAS_SIZE_2D,
) -> Scene2D:
    """Scale two 2D vectors to fit the canvas with the origin centred.

    The extent is the largest absolute component padded by 20%, and never
    less than 1 so near-zero vectors do not blow up the scale.

    Raises:
        ValueError: If either vector is not 2-dimensional.
    """
    if len(vec_a) != 2 or len(vec_b) != 2:
        raise ValueError(
            f"2D projection needs two 2-dimensional vectors, "
            f"got {len(vec_a)} and {len(vec_b)}"
        )

    center = size / 2
    max_val = max(_max_abs(vec_a, vec_b), MIN_EXTENT_2D) * PADDING_2D
    scale = (center - MARGIN_2D) / max_val

    def to_screen(x: float, y: float) -> ScreenPoint:
        return ScreenPoint(x=center + x * scale, y=center - y * scale)

    return Scene2D(
        size=size,
        scale=scale,
        origin=to_screen(0.0, 0.0),
        end_a=to_screen(vec_a[0], vec_a[1]),
        end_b=to_screen(vec_b[0], vec_b[1]),
    )


# ============== 3D ==============

@dataclass
class Rotation:
    """View rotation in degrees. Pitch is clamped, yaw is unbounded."""
    pitch: float = DEFAULT_PITCH
    yaw: float = DEFAULT_YAW

    def __post_init__(self):
        self.pitch = _clamp_pitch(self.pitch)

    def drag(self, dx: float, dy: float, sensitivity: float = DRAG_SENSITIVITY) -> "Rotation":
        """Apply a pointer drag: vertical movement pitches, horizontal yaws."""
        self.pitch = _clamp_pitch(self.pitch + dy * sensitivity)
        self.yaw = self.yaw + dx * sensitivity
        return self


def _clamp_pitch(pitch: float) -> float:
    return max(-PITCH_LIMIT, min(PITCH_LIMIT, pitch))


class DragTracker:
    """Turns press/move/release pointer events into rotation updates."""

    def __init__(self, rotation: Optional[Rotation] = None, sensitivity: float = DRAG_SENSITIVITY):
        self.rotation = rotation or Rotation()
        self.sensitivity = sensitivity
        self.is_dragging = False
        self._last = (0.0, 0.0)

    def press(self, x: float, y: float) -> None:
        self.is_dragging = True
        self._last = (x, y)

    def move(self, x: float, y: float) -> Rotation:
        if self.is_dragging:
            dx = x - self._last[0]
            dy = y - self._last[1]
            self.rotation.drag(dx, dy, self.sensitivity)
            self._last = (x, y)
        return self.rotation

    def release(self) -> None:
        self.is_dragging = False


@dataclass
class Scene3D:
    """Two 3-vectors projected orthographically under a rotation."""
    size: int
    scale: float
    max_val: float
    rotation: Rotation
    origin: ScreenPoint
    axes: Dict[str, ScreenPoint]
    end_a: ScreenPoint
    end_b: ScreenPoint
    floor_a: ScreenPoint  # Vector A dropped onto the y=0 plane
    floor_b: ScreenPoint
    mode: str = "3d"

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class Projector3D:
    """Orthographic projector for a pair of 3D vectors.

    The scale is fixed by the vectors (largest absolute component, at
    least 5, padded by 50%) so rotating never rescales the scene.
    """

    def __init__(
        self,
        vec_a: Sequence[float],
        vec_b: Sequence[float],
        rotation: Optional[Rotation] = None,
        size: int = CANVAS_SIZE_3D,
    ):
        if len(vec_a) != 3 or len(vec_b) != 3:
            raise ValueError(
                f"3D projection needs two 3-dimensional vectors, "
                f"got {len(vec_a)} and {len(vec_b)}"
            )
        self.vec_a = [float(v) for v in vec_a]
        self.vec_b = [float(v) for v in vec_b]
        self.rotation = rotation or Rotation()
        self.size = size
        self.center = size / 2
        self.max_val = max(_max_abs(vec_a, vec_b), MIN_EXTENT_3D) * PADDING_3D
        self.scale = (self.center - MARGIN_3D) / self.max_val

    def rotation_matrix(self) -> np.ndarray:
        """Yaw about the vertical axis followed by pitch about the horizontal axis."""
        pitch = math.radians(self.rotation.pitch)
        yaw = math.radians(self.rotation.yaw)

        yaw_matrix = np.array([
            [math.cos(yaw), 0.0, -math.sin(yaw)],
            [0.0, 1.0, 0.0],
            [math.sin(yaw), 0.0, math.cos(yaw)],
        ])
        pitch_matrix = np.array([
            [1.0, 0.0, 0.0],
            [0.0, math.cos(pitch), -math.sin(pitch)],
            [0.0, math.sin(pitch), math.cos(pitch)],
        ])
        return pitch_matrix @ yaw_matrix

    def project(self, x: float, y: float, z: float) -> ScreenPoint:
        """Rotate a point and drop its depth onto the screen plane."""
        rx, ry, rz = self.rotation_matrix() @ np.array([x, y, z], dtype=np.float64)
        return ScreenPoint(
            x=self.center + float(rx) * self.scale,
            y=self.center - float(ry) * self.scale,
            depth=float(rz),
        )

    def scene(self) -> Scene3D:
        a, b = self.vec_a, self.vec_b
        return Scene3D(
            size=self.size,
            scale=self.scale,
            max_val=self.max_val,
            rotation=Rotation(self.rotation.pitch, self.rotation.yaw),
            origin=self.project(0.0, 0.0, 0.0),
            axes={
                "x": self.project(self.max_val, 0.0, 0.0),
                "y": self.project(0.0, self.max_val, 0.0),
                "z": self.project(0.0, 0.0, self.max_val),
            },
            end_a=self.project(a[0], a[1], a[2]),
            end_b=self.project(b[0], b[1], b[2]),
            floor_a=self.project(a[0], 0.0, a[2]),
            floor_b=self.project(b[0], 0.0, b[2]),
        )


# ============== Component comparison ==============

@dataclass
class DimensionRow:
    dimension: str
    value_a: float
    value_b: float
    full_mark: float


@dataclass
class ComponentScene:
    """Per-dimension comparison used when no geometric view exists."""
    chart: str  # "radar" or "bar"
    label_a: str
    label_b: str
    rows: List[DimensionRow] = field(default_factory=list)
    mode: str = "components"

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def dimension_comparison(
    vec_a: Sequence[float],
    vec_b: Sequence[float],
    label_a: str = "Vector A",
    label_b: str = "Vector B",
) -> ComponentScene:
    """One row per dimension of vec_a; missing values of vec_b count as 0."""
    rows = []
    for idx, value_a in enumerate(vec_a):
        value_b = vec_b[idx] if idx < len(vec_b) else 0.0
        rows.append(DimensionRow(
            dimension=f"Dim {idx + 1}",
            value_a=float(value_a),
            value_b=float(value_b),
            full_mark=max(abs(value_a), abs(value_b)),
        ))

    return ComponentScene(
        chart="radar" if len(vec_a) > 3 else "bar",
        label_a=label_a,
        label_b=label_b,
        rows=rows,
    )


def build_scene(
    vec_a: Sequence[float],
    vec_b: Sequence[float],
    rotation: Optional[Rotation] = None,
    label_a: str = "Vector A",
    label_b: str = "Vector B",
    size_2d: int = CANVAS_SIZE_2D,
    size_3d: int = CANVAS_SIZE_3D,
):
    """Pick the chart mode for a vector pair and build its scene.

    Returns:
        Scene2D, Scene3D or ComponentScene; None when vec_a is empty.
    """
    if len(vec_a) == 0:
        return None
    if len(vec_a) == 2 and len(vec_b) == 2:
        return project_2d(vec_a, vec_b, size=size_2d)
    if len(vec_a) == 3 and len(vec_b) == 3:
        return Projector3D(vec_a, vec_b, rotation=rotation, size=size_3d).scene()
    return dimension_comparison(vec_a, vec_b, label_a, label_b)
