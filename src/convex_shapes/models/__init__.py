"""Shape data models."""

from convex_shapes.models.errors import (
    DegenerateError,
    InvalidInputError,
    NonConvexError,
    NotReadyError,
    ShapeError,
)
from convex_shapes.models.geometry import (
    EPSILON,
    Point2D,
    centroid,
    cross,
    distance,
    is_zero,
    order_counter_clockwise,
    polar_angle,
)
from convex_shapes.models.shapes import (
    SHAPE_SPECS,
    ShapeKind,
    ShapeSpec,
    validate_convex_quadrilateral,
    validate_triangle,
)
from convex_shapes.models.polygon import Polygon, build_shape, create_shape

__all__ = [
    "DegenerateError",
    "InvalidInputError",
    "NonConvexError",
    "NotReadyError",
    "ShapeError",
    "EPSILON",
    "Point2D",
    "centroid",
    "cross",
    "distance",
    "is_zero",
    "order_counter_clockwise",
    "polar_angle",
    "SHAPE_SPECS",
    "ShapeKind",
    "ShapeSpec",
    "validate_convex_quadrilateral",
    "validate_triangle",
    "Polygon",
    "build_shape",
    "create_shape",
]
