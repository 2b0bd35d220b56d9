"""convex-shapes CLI.

Usage:
    python -m convex_shapes measure triangle -p 0,0 -p 4,0 -p 2,3
    python -m convex_shapes interactive
"""

from convex_shapes.cli.main import app

if __name__ == "__main__":
    app(prog_name="convex-shapes")
