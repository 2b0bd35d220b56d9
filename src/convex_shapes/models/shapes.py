"""Shape kinds and their validation rules.

Each kind maps to a ShapeSpec: how many vertices it takes, how to check
an already counter-clockwise ordered vertex tuple, and its display label.
The validation functions assume the ordering step has run and raise a
ShapeError subclass on the first problem found.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum

from convex_shapes.models.errors import DegenerateError, InvalidInputError, NonConvexError
from convex_shapes.models.geometry import Point2D, cross, is_zero


class ShapeKind(str, Enum):
    """Supported shape variants."""

    TRIANGLE = "triangle"
    QUADRILATERAL = "quadrilateral"

    @classmethod
    def from_vertex_count(cls, count: int) -> ShapeKind:
        """Pick the kind by number of vertices (3 or 4)."""
        for kind, spec in SHAPE_SPECS.items():
            if spec.vertex_count == count:
                return kind
        raise InvalidInputError(f"No shape with {count} vertices; choose 3 or 4")


def _require_count(vertices: Sequence[Point2D], expected: int) -> None:
    if len(vertices) != expected:
        raise InvalidInputError(
            f"Expected {expected} vertices, got {len(vertices)}"
        )


def _turn(a: Point2D, b: Point2D, c: Point2D) -> float:
    """cross(a, b, c), rejecting coordinates too large to measure."""
    turn = cross(a, b, c)
    if not math.isfinite(turn):
        raise InvalidInputError(
            "Vertex coordinates are too large to measure; the turn at "
            f"{b} overflows"
        )
    return turn


def validate_triangle(vertices: Sequence[Point2D]) -> None:
    """Reject triangles whose three vertices lie on one line."""
    _require_count(vertices, 3)
    a, b, c = vertices
    if is_zero(_turn(a, b, c)):
        raise DegenerateError("Triangle vertices are collinear")


def validate_convex_quadrilateral(vertices: Sequence[Point2D]) -> None:
    """Reject quadrilaterals that are not strictly convex.

    Every consecutive triple (v[i], v[i+1], v[i+2]) must turn the same way.
    A zero turn means three consecutive vertices are collinear.
    """
    _require_count(vertices, 4)
    n = len(vertices)
    sign = 0
    for i in range(n):
        a, b, c = vertices[i], vertices[(i + 1) % n], vertices[(i + 2) % n]
        turn = _turn(a, b, c)
        if is_zero(turn):
            raise DegenerateError(
                f"Vertices {a}, {b}, {c} are collinear; "
                "the quadrilateral is not strictly convex"
            )
        turn_sign = 1 if turn > 0 else -1
        if sign == 0:
            sign = turn_sign
        elif turn_sign != sign:
            raise NonConvexError(
                f"Turn direction changes at vertex {b}; "
                "the quadrilateral is not convex or its vertices cross"
            )


@dataclass(frozen=True)
class ShapeSpec:
    """Per-kind parameters of the polygon core."""

    vertex_count: int
    label: str
    validate: Callable[[Sequence[Point2D]], None]


SHAPE_SPECS: dict[ShapeKind, ShapeSpec] = {
    ShapeKind.TRIANGLE: ShapeSpec(
        vertex_count=3,
        label="Triangle",
        validate=validate_triangle,
    ),
    ShapeKind.QUADRILATERAL: ShapeSpec(
        vertex_count=4,
        label="Convex quadrilateral",
        validate=validate_convex_quadrilateral,
    ),
}
