"""Base solids that a typical geometry kernel does not provide directly.

Rounded rectangles, wedges, tori for o-ring grooves and hex prisms for
nut cavities. Each helper returns a node of the Solid description tree.
"""

import math

from ..errors import InvalidGeometry
from ..models.solid import Box, Cylinder, Hull, Polyhedron, Solid, Torus, union
from .params import CAVITY_OVERCUT


def rounded_rect_prism(x: float, y: float, corner_radius: float, height: float) -> Hull:
    """Create a rectangular prism with rounded vertical edges, centered in XY.

    Built as the convex hull of four vertical cylinders inset by the corner
    radius from the rectangle corners.

    Args:
        x: Overall length in X in mm.
        y: Overall width in Y in mm.
        corner_radius: Radius of the vertical edges in mm.
        height: Extrusion height along Z in mm.

    Returns:
        Hull of four translated cylinders standing on z=0.

    Raises:
        InvalidGeometry: If any dimension is non-positive or the corner
            radius does not leave a flat edge on both sides.
    """
    if x <= 0 or y <= 0 or height <= 0:
        raise InvalidGeometry(
            f"rounded_rect_prism dimensions must be positive, got x={x}, y={y}, height={height}"
        )
    if corner_radius <= 0 or corner_radius >= min(x, y) / 2:
        raise InvalidGeometry(
            f"corner_radius must be in (0, {min(x, y) / 2}), got {corner_radius}"
        )

    inset_x = x / 2 - corner_radius
    inset_y = y / 2 - corner_radius
    corner = Cylinder(height=height, radius=corner_radius)
    return Hull(tuple(
        corner.translate(sx * inset_x, sy * inset_y, 0)
        for sx, sy in ((1, 1), (-1, 1), (-1, -1), (1, -1))
    ))


def wedge(x: float, y: float, z: float) -> Polyhedron:
    """Create a wedge rising from the front bottom edge to the back top edge.

    The base is the full x*y rectangle on z=0; the top is the single edge
    at y=y, z=z.
    """
    _check_positive("wedge", x=x, y=y, z=z)
    return Polyhedron(
        points=(
            (0.0, 0.0, 0.0), (x, 0.0, 0.0), (x, y, 0.0), (0.0, y, 0.0),
            (0.0, y, z), (x, y, z),
        ),
        faces=((0, 1, 2, 3), (5, 4, 3, 2), (0, 4, 5, 1), (0, 3, 4), (5, 2, 1)),
    )


def right_triangle_prism(x: float, y: float, z: float) -> Polyhedron:
    """Create a right-triangle prism: legs along +X and +Y, extruded along +Z."""
    _check_positive("right_triangle_prism", x=x, y=y, z=z)
    return Polyhedron(
        points=(
            (0.0, 0.0, 0.0), (x, 0.0, 0.0), (0.0, y, 0.0),
            (0.0, 0.0, z), (x, 0.0, z), (0.0, y, z),
        ),
        faces=((0, 1, 2), (3, 5, 4), (0, 3, 4, 1), (0, 2, 5, 3), (1, 4, 5, 2)),
    )


def torus(tube_radius: float, centerline_radius: float) -> Torus:
    """Create a torus in the XY plane (used to carve o-ring grooves)."""
    if tube_radius <= 0 or centerline_radius <= tube_radius:
        raise InvalidGeometry(
            f"torus needs 0 < tube_radius < centerline_radius, "
            f"got tube_radius={tube_radius}, centerline_radius={centerline_radius}"
        )
    return Torus(tube_radius=tube_radius, centerline_radius=centerline_radius)


def hex_prism(across_flats: float, height: float, bore_diameter: float = 0.0) -> Solid:
    """Create a hexagonal prism, flats facing +/-X, standing on z=0.

    Three centered boxes rotated 60 degrees apart; optionally bored through
    along Z.

    Args:
        across_flats: Distance between opposite flats in mm.
        height: Prism height in mm.
        bore_diameter: Diameter of a coaxial through bore; 0 for none.
    """
    _check_positive("hex_prism", across_flats=across_flats, height=height)
    if bore_diameter < 0 or bore_diameter >= across_flats:
        raise InvalidGeometry(
            f"bore_diameter must be in [0, {across_flats}), got {bore_diameter}"
        )

    slab = Box(across_flats, across_flats / math.sqrt(3), height, center=True)
    hexagon = union(*(slab.rotate(0, 0, angle) for angle in (0, 60, 120)))
    if bore_diameter > 0:
        bore = Cylinder(
            height=height + 2 * CAVITY_OVERCUT, radius=bore_diameter / 2,
        ).translate(0, 0, -CAVITY_OVERCUT)
        return hexagon.cut(bore)
    return hexagon


def wheel_hex_12mm(height: float = 6.0) -> Solid:
    """Cavity for a standard 12 mm hex wheel adapter."""
    return hex_prism(12.0, height)


def m3_nut(height: float = 2.6, clearance: float = 0.2) -> Solid:
    """Cavity for an M3 hex nut (5.5 mm across flats) with print clearance."""
    return hex_prism(5.5 + clearance, height)


def _check_positive(name: str, **dims: float) -> None:
    for key, value in dims.items():
        if value <= 0:
            raise InvalidGeometry(f"{name} {key} must be positive, got {value}")
