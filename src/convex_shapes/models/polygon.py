"""The polygon core: vertex normalization, validation, area and perimeter.

A Polygon is created with its kind fixed and no vertices. ``set_vertices``
orders the points counter-clockwise around their centroid, runs the kind's
validation on the ordered copy and only then commits it. A rejected call
leaves the polygon exactly as it was.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Mapping, Sequence
from typing import Any, Union

from pydantic import BaseModel, Field, PrivateAttr

from convex_shapes.models.errors import InvalidInputError, NotReadyError, ShapeError
from convex_shapes.models.geometry import EPSILON, Point2D, distance, order_counter_clockwise
from convex_shapes.models.shapes import SHAPE_SPECS, ShapeKind, ShapeSpec

logger = logging.getLogger(__name__)

PointLike = Union[Point2D, tuple[float, float], Mapping[str, float]]


def _coerce_point(value: Any, position: int) -> Point2D:
    """Turn a Point2D, (x, y) pair or {"x", "y"} mapping into a Point2D."""
    if isinstance(value, Point2D):
        return value
    if isinstance(value, (str, bytes)):
        raise InvalidInputError(f"Vertex {position} is not an (x, y) point: {value!r}")
    try:
        if isinstance(value, Mapping):
            return Point2D.model_validate(value)
        x, y = value
        return Point2D(x=x, y=y)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(
            f"Vertex {position} is not a finite (x, y) point: {value!r}"
        ) from e


def _shoelace_area(v: Sequence[Point2D]) -> float:
    """Shoelace area, taken relative to the first vertex to limit overflow."""
    ox, oy = v[0].x, v[0].y
    n = len(v)
    total = 0.0
    for i in range(n):
        j = (i + 1) % n
        total += (v[i].x - ox) * (v[j].y - oy)
        total -= (v[j].x - ox) * (v[i].y - oy)
    return abs(total) / 2.0


def _perimeter(v: Sequence[Point2D]) -> float:
    n = len(v)
    return sum(distance(v[i], v[(i + 1) % n]) for i in range(n))


class Polygon(BaseModel):
    """A triangle or convex quadrilateral, selected by ``kind``."""

    kind: ShapeKind = Field(frozen=True, description="Shape variant")
    _vertices: tuple[Point2D, ...] = PrivateAttr(default=())

    @property
    def spec(self) -> ShapeSpec:
        return SHAPE_SPECS[self.kind]

    @property
    def vertex_count(self) -> int:
        """Number of vertices this kind requires."""
        return self.spec.vertex_count

    @property
    def vertices(self) -> tuple[Point2D, ...]:
        """Committed vertices in counter-clockwise order (empty until set)."""
        return self._vertices

    @property
    def is_ready(self) -> bool:
        return bool(self._vertices)

    def describe(self) -> str:
        """Human-readable name of the shape kind."""
        return self.spec.label

    def set_vertices(self, points: Iterable[PointLike] | None) -> Polygon:
        """Normalize, validate and commit a new set of vertices.

        Raises InvalidInputError for missing, malformed, miscounted or
        coinciding points, and whatever the kind's validation raises
        (DegenerateError, NonConvexError) for bad geometry. Nothing is
        committed unless every check passes.
        """
        if points is None:
            raise InvalidInputError("Vertex list must not be None")
        try:
            raw = list(points)
        except TypeError as e:
            raise InvalidInputError("Vertices must be given as a sequence of points") from e
        pts = [_coerce_point(p, i) for i, p in enumerate(raw, start=1)]
        if not pts:
            raise InvalidInputError("Vertex list must not be empty")

        expected = self.vertex_count
        if len(pts) != expected:
            raise InvalidInputError(f"Expected {expected} vertices, got {len(pts)}")

        for i in range(len(pts)):
            for j in range(i + 1, len(pts)):
                if distance(pts[i], pts[j]) < EPSILON:
                    raise InvalidInputError(
                        f"Vertices {i + 1} and {j + 1} coincide at {pts[i]}"
                    )

        ordered = order_counter_clockwise(pts)
        logger.debug(
            "%s ordered counter-clockwise: %s",
            self.kind.value,
            ", ".join(str(p) for p in ordered),
        )
        try:
            self.spec.validate(ordered)
        except ShapeError as e:
            logger.debug("Rejected %s (%s): %s", self.kind.value, e.code, e)
            raise

        if not (math.isfinite(_shoelace_area(ordered)) and math.isfinite(_perimeter(ordered))):
            raise InvalidInputError(
                "Vertex coordinates are too large to measure area and perimeter"
            )

        self._vertices = ordered
        logger.debug("Committed %d vertices for %s", len(ordered), self.kind.value)
        return self

    def _require_vertices(self) -> tuple[Point2D, ...]:
        if not self._vertices:
            raise NotReadyError(
                f"{self.describe()} has no vertices yet; call set_vertices first"
            )
        return self._vertices

    @property
    def area(self) -> float:
        """Area by the shoelace formula. Returns absolute value."""
        return _shoelace_area(self._require_vertices())

    @property
    def perimeter(self) -> float:
        """Total edge length, closing edge included."""
        return _perimeter(self._require_vertices())


def _unknown_kind(kind: object) -> InvalidInputError:
    choices = ", ".join(k.value for k in ShapeKind)
    return InvalidInputError(f"Unknown shape kind: {kind!r}; expected one of {choices}, 3 or 4")


def create_shape(kind: ShapeKind | str | int) -> Polygon:
    """Create an empty polygon from a kind, its name, or its vertex count."""
    if isinstance(kind, ShapeKind):
        return Polygon(kind=kind)
    if isinstance(kind, bool):
        raise _unknown_kind(kind)
    if isinstance(kind, int):
        return Polygon(kind=ShapeKind.from_vertex_count(kind))
    if isinstance(kind, str):
        name = kind.strip().lower()
        if name.isdecimal():
            try:
                count = int(name)
            except ValueError:
                raise _unknown_kind(kind) from None
            return Polygon(kind=ShapeKind.from_vertex_count(count))
        try:
            return Polygon(kind=ShapeKind(name))
        except ValueError:
            raise _unknown_kind(kind) from None
    raise _unknown_kind(kind)


def build_shape(kind: ShapeKind | str | int, points: Iterable[PointLike] | None) -> Polygon:
    """Create a polygon of ``kind`` and populate it in one step."""
    return create_shape(kind).set_vertices(points)
