"""convex-shapes CLI.

Usage:
    python -m convex_shapes <command> [options]

``measure`` builds one shape from --point options and prints JSON.
``interactive`` is the prompt-driven console: pick a shape, type the
vertices, retry until they form a valid shape, then see area and perimeter.
"""
from __future__ import annotations

import json
import logging
import sys

import typer

from convex_shapes.models.errors import InvalidInputError, ShapeError
from convex_shapes.models.geometry import Point2D
from convex_shapes.models.polygon import Polygon, build_shape, create_shape

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="convex-shapes",
    help="Build a triangle or convex quadrilateral and measure it.",
    no_args_is_help=True,
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _parse_point(text: str) -> Point2D:
    """Parse 'X,Y' into a point."""
    parts = [p.strip() for p in text.split(",")]
    if len(parts) != 2:
        raise InvalidInputError(f"Point must be written as X,Y: {text!r}")
    try:
        return Point2D(x=float(parts[0]), y=float(parts[1]))
    except ValueError as e:
        raise InvalidInputError(f"Point must be two finite numbers X,Y: {text!r}") from e


def _shape_json(shape: Polygon, precision: int) -> dict:
    return {
        "ok": True,
        "shape": shape.kind.value,
        "description": shape.describe(),
        "vertices": [[round(p.x, precision), round(p.y, precision)] for p in shape.vertices],
        "area": round(shape.area, precision),
        "perimeter": round(shape.perimeter, precision),
    }


def _output(data: dict) -> None:
    """Print JSON output to stdout."""
    typer.echo(json.dumps(data, indent=2, ensure_ascii=False))


def _choose_shape() -> Polygon:
    while True:
        choice = typer.prompt("Choose a shape (3 - triangle, 4 - convex quadrilateral)")
        try:
            return create_shape(choice)
        except InvalidInputError:
            typer.echo("Invalid choice. Enter 3 or 4.\n")


def _read_vertices(shape: Polygon) -> list[tuple[float, float]]:
    label = shape.describe().lower()
    points = []
    for i in range(1, shape.vertex_count + 1):
        x = typer.prompt(f"x{i} ({label})", type=float)
        y = typer.prompt(f"y{i} ({label})", type=float)
        points.append((x, y))
    return points


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output to stderr"),
):
    """Build a triangle or convex quadrilateral and measure it."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@app.command()
def version() -> None:
    """Show version."""
    from convex_shapes import __version__

    typer.echo(f"convex-shapes v{__version__}")


@app.command()
def measure(
    kind: str = typer.Argument(..., help="Shape kind: triangle, quadrilateral, 3 or 4"),
    points: list[str] = typer.Option(..., "--point", "-p", help="Vertex as X,Y (repeat for each vertex)"),
    precision: int = typer.Option(2, "--precision", min=0, help="Decimals in the output"),
):
    """Validate one shape and print its vertices, area and perimeter as JSON."""
    try:
        shape = build_shape(kind, [_parse_point(p) for p in points])
    except ShapeError as e:
        logger.debug("measure %s failed: %s", kind, e)
        _output({"ok": False, "error": str(e), "error_kind": e.code})
        raise typer.Exit(1)
    _output(_shape_json(shape, precision))


@app.command()
def interactive():
    """Prompt for a shape and its vertices until they are valid, then report it."""
    shape = _choose_shape()

    while True:
        points = _read_vertices(shape)
        try:
            shape.set_vertices(points)
            break
        except ShapeError as e:
            typer.echo(f"Error: {e}\n")

    typer.echo(f"\n{shape.describe()}")
    typer.echo("Vertices:")
    for i, p in enumerate(shape.vertices, start=1):
        typer.echo(f"Vertex {i}: {p}")
    typer.echo(f"Area: {shape.area:.2f}")
    typer.echo(f"Perimeter: {shape.perimeter:.2f}")


if __name__ == "__main__":
    app()
