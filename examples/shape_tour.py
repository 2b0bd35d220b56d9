"""A few shapes through the core, accepted and rejected.

   (0,3) -------- (3,3)
     |              |
     |    square    |
     |              |
   (0,0) -------- (3,0)

Vertices may be given in any order; they come back counter-clockwise
around the centroid, starting just after the negative x axis.
"""

from convex_shapes.models import ShapeError, ShapeKind, build_shape, create_shape

SIDE = 3.0

SHAPES = [
    ("Right-angle corner", ShapeKind.TRIANGLE, [(0, 0), (4, 0), (2, 3)]),
    ("Square, scrambled", ShapeKind.QUADRILATERAL, [(SIDE, SIDE), (0, 0), (0, SIDE), (SIDE, 0)]),
    ("Flat triangle", ShapeKind.TRIANGLE, [(0, 0), (2, 0), (4, 0)]),
    ("Dart", ShapeKind.QUADRILATERAL, [(0, 0), (2, 2), (4, 0), (2, 1)]),
    ("Repeated corner", ShapeKind.TRIANGLE, [(0, 0), (0, 0), (1, 1)]),
]

for name, kind, points in SHAPES:
    try:
        shape = build_shape(kind, points)
    except ShapeError as e:
        print(f"REJECTED {name}: [{e.code}] {e}")
        continue
    vertices = ", ".join(str(p) for p in shape.vertices)
    print(f"OK {name}: {shape.describe()}")
    print(f"   Vertices: {vertices}")
    print(f"   Area: {shape.area:.2f}")
    print(f"   Perimeter: {shape.perimeter:.2f}")

# --- A rejected update keeps the last good vertices ---
square = create_shape("quadrilateral").set_vertices([(0, 0), (SIDE, 0), (SIDE, SIDE), (0, SIDE)])
try:
    square.set_vertices([(0, 0), (2, 2), (4, 0), (2, 1)])
except ShapeError as e:
    print(f"\nUpdate rejected ({e.code}); area is still {square.area:.2f}")
