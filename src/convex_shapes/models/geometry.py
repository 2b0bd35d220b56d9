"""Geometric primitives and the numeric helpers the shape core is built on."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

from pydantic import BaseModel, ConfigDict, field_validator

EPSILON = 1e-9


class Point2D(BaseModel):
    """Immutable 2D point in the XY plane."""

    model_config = ConfigDict(frozen=True)

    x: float
    y: float

    @field_validator("x", "y")
    @classmethod
    def finite_coordinate(cls, v: float) -> float:
        if not math.isfinite(v):
            raise ValueError("Point coordinates must be finite numbers")
        return v

    def distance_to(self, other: Point2D) -> float:
        """Euclidean distance to another point."""
        return math.hypot(other.x - self.x, other.y - self.y)

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    def __str__(self) -> str:
        return f"({self.x:g}, {self.y:g})"


def is_zero(v: float) -> bool:
    """True if ``v`` is within EPSILON of zero."""
    return abs(v) < EPSILON


def distance(a: Point2D, b: Point2D) -> float:
    return a.distance_to(b)


def cross(a: Point2D, b: Point2D, c: Point2D) -> float:
    """Z-component of (b - a) x (c - a).

    Positive for a counter-clockwise turn a -> b -> c, negative for clockwise.
    The magnitude is twice the area of triangle abc.
    """
    return (b.x - a.x) * (c.y - a.y) - (b.y - a.y) * (c.x - a.x)


def centroid(points: Sequence[Point2D]) -> Point2D:
    """Arithmetic mean of the point coordinates."""
    if not points:
        raise ValueError("Centroid of an empty point set is undefined")
    n = len(points)
    return Point2D(
        x=sum(p.x for p in points) / n,
        y=sum(p.y for p in points) / n,
    )


def polar_angle(p: Point2D, origin: Point2D) -> float:
    """Angle of ``p`` around ``origin`` in (-pi, pi]."""
    return math.atan2(p.y - origin.y, p.x - origin.x)


def order_counter_clockwise(points: Iterable[Point2D]) -> tuple[Point2D, ...]:
    """Sort points counter-clockwise by polar angle around their centroid.

    The sort is stable: points at the same angle keep their input order.
    """
    pts = list(points)
    center = centroid(pts)
    return tuple(sorted(pts, key=lambda p: polar_angle(p, center)))
