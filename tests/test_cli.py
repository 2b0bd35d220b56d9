"""Tests for the CLI interface."""
import json
import os
import subprocess
import sys
from pathlib import Path

CLI = [sys.executable, "-m", "convex_shapes"]
ROOT = Path(__file__).parent.parent
ENV = {**os.environ, "PYTHONIOENCODING": "utf-8", "PYTHONPATH": os.pathsep.join(
    p for p in (str(ROOT / "src"), os.environ.get("PYTHONPATH", "")) if p
)}


def run(*args: str, stdin: str | None = None) -> subprocess.CompletedProcess:
    return subprocess.run(
        [*CLI, *args],
        capture_output=True, text=True, encoding="utf-8", cwd=str(ROOT), env=ENV, input=stdin,
    )


def run_cli(*args: str) -> dict:
    """Run CLI command and return parsed JSON output."""
    result = run(*args)
    assert result.returncode == 0, f"CLI failed: {result.stderr}\n{result.stdout}"
    return json.loads(result.stdout)


def run_cli_expect_fail(*args: str) -> dict:
    """Run CLI command expecting failure, return parsed JSON output."""
    result = run(*args)
    assert result.returncode != 0
    return json.loads(result.stdout)


def point_args(*coords: str) -> list[str]:
    args = []
    for c in coords:
        args += ["--point", c]
    return args


class TestVersion:
    def test_version(self):
        result = run("version")
        assert result.returncode == 0
        assert result.stdout.startswith("convex-shapes v")


class TestMeasure:
    def test_triangle(self):
        data = run_cli("measure", "triangle", *point_args("2,3", "0,0", "4,0"))
        assert data["ok"] is True
        assert data["shape"] == "triangle"
        assert data["description"] == "Triangle"
        assert data["vertices"] == [[0, 0], [4, 0], [2, 3]]
        assert data["area"] == 6.0
        assert data["perimeter"] == 11.21

    def test_square_by_vertex_count(self):
        data = run_cli("measure", "4", *point_args("0,0", "3,0", "3,3", "0,3"))
        assert data["shape"] == "quadrilateral"
        assert data["area"] == 9.0
        assert data["perimeter"] == 12.0

    def test_negative_coordinates(self):
        data = run_cli("measure", "triangle", "-p", "-1,-1", "-p", "1,-1", "-p", "0,1")
        assert data["area"] == 2.0

    def test_precision(self):
        data = run_cli(
            "measure", "triangle", "--precision", "4", *point_args("0,0", "4,0", "2,3")
        )
        assert data["perimeter"] == 11.2111

    def test_collinear(self):
        data = run_cli_expect_fail("measure", "triangle", *point_args("0,0", "2,0", "4,0"))
        assert data["ok"] is False
        assert data["error_kind"] == "degenerate"

    def test_non_convex(self):
        data = run_cli_expect_fail(
            "measure", "quadrilateral", *point_args("0,0", "2,2", "4,0", "2,1")
        )
        assert data["error_kind"] == "non_convex"

    def test_duplicates(self):
        data = run_cli_expect_fail("measure", "triangle", *point_args("0,0", "0,0", "1,1"))
        assert data["error_kind"] == "invalid_input"

    def test_quadrilateral_duplicates(self):
        data = run_cli_expect_fail(
            "measure", "quadrilateral", *point_args("0,0", "0,0", "3,3", "0,3")
        )
        assert data["error_kind"] == "invalid_input"
        assert "Vertices 1 and 2 coincide" in data["error"]

    def test_overflowing_coordinates(self):
        data = run_cli_expect_fail(
            "measure", "triangle", *point_args("1e308,1e308", "-1e308,-1e308", "1e308,-1e308")
        )
        assert data["error_kind"] == "invalid_input"
        assert "too large" in data["error"]

    def test_wrong_count(self):
        data = run_cli_expect_fail("measure", "quadrilateral", *point_args("0,0", "1,0", "0,1"))
        assert data["error_kind"] == "invalid_input"
        assert "Expected 4 vertices, got 3" in data["error"]

    def test_malformed_point(self):
        data = run_cli_expect_fail("measure", "triangle", *point_args("0,0", "1;0", "0,1"))
        assert data["error_kind"] == "invalid_input"
        assert "X,Y" in data["error"]

    def test_unknown_kind(self):
        data = run_cli_expect_fail("measure", "pentagon", *point_args("0,0", "1,0", "0,1"))
        assert data["error_kind"] == "invalid_input"

    def test_verbose_logs_to_stderr(self):
        result = run("--verbose", "measure", "triangle", *point_args("0,0", "4,0", "2,3"))
        assert result.returncode == 0
        assert "Committed 3 vertices" in result.stderr
        assert json.loads(result.stdout)["ok"] is True


class TestInteractive:
    def test_triangle(self):
        result = run("interactive", stdin="3\n2\n3\n0\n0\n4\n0\n")
        assert result.returncode == 0, result.stderr
        out = result.stdout
        assert "\nTriangle\n" in out
        assert "Vertex 1: (0, 0)" in out
        assert "Vertex 2: (4, 0)" in out
        assert "Vertex 3: (2, 3)" in out
        assert "Area: 6.00" in out
        assert "Perimeter: 11.21" in out

    def test_retries_after_invalid_shape(self):
        stdin = "3\n0\n0\n2\n0\n4\n0\n0\n0\n4\n0\n2\n3\n"
        result = run("interactive", stdin=stdin)
        assert result.returncode == 0, result.stderr
        assert "Error: Triangle vertices are collinear" in result.stdout
        assert "Area: 6.00" in result.stdout

    def test_retries_after_invalid_choice(self):
        stdin = "7\n4\n0\n0\n3\n0\n3\n3\n0\n3\n"
        result = run("interactive", stdin=stdin)
        assert result.returncode == 0, result.stderr
        assert "Invalid choice" in result.stdout
        assert "Convex quadrilateral" in result.stdout
        assert "Area: 9.00" in result.stdout
        assert "Perimeter: 12.00" in result.stdout

    def test_reprompts_on_non_numeric(self):
        result = run("interactive", stdin="3\nabc\n0\n0\n4\n0\n2\n3\n")
        assert result.returncode == 0, result.stderr
        assert "Area: 6.00" in result.stdout

    def test_reprompts_on_unparsable_digit_choice(self):
        result = run("interactive", stdin="²\n3\n0\n0\n4\n0\n2\n3\n")
        assert result.returncode == 0, result.stderr
        assert "Invalid choice" in result.stdout
        assert "Area: 6.00" in result.stdout
