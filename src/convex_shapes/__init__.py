"""Triangle and convex quadrilateral construction, validation and measurement."""

__version__ = "0.1.0"
