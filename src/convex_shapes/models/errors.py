"""Errors raised by the shape core.

All of them derive from ``ValueError`` so callers can treat a rejected shape
like any other rejected value. ``code`` is a stable machine-readable tag
used in CLI output.
"""

from __future__ import annotations


class ShapeError(ValueError):
    """Base class for shape construction and measurement errors."""

    code = "shape_error"


class InvalidInputError(ShapeError):
    """Wrong vertex count, unusable points, or coinciding vertices."""

    code = "invalid_input"


class DegenerateError(ShapeError):
    """Three vertices that must form a turn lie on one line."""

    code = "degenerate"


class NonConvexError(ShapeError):
    """Quadrilateral turn directions are not all the same."""

    code = "non_convex"


class NotReadyError(ShapeError):
    """Metrics requested before any vertices were accepted."""

    code = "not_ready"
