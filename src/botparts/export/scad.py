"""Serialize a Solid description tree as OpenSCAD source."""

from ..errors import KernelError
from ..models.solid import (
    Box,
    Cylinder,
    Difference,
    Hull,
    Polyhedron,
    Rotate,
    Solid,
    Text,
    Torus,
    Translate,
    Union,
)

INDENT = "    "


def to_scad(solid: Solid, segments: int = 64) -> str:
    """Return OpenSCAD source for ``solid``.

    Args:
        solid: Root of the description tree.
        segments: Value emitted as ``$fn`` for curved primitives.
    """
    lines = [f"$fn = {segments};", ""]
    _emit(solid, 0, lines)
    return "\n".join(lines) + "\n"


def _num(value: float) -> str:
    value = round(float(value), 6)
    if value == int(value):
        return str(int(value))
    return repr(value)


def _vec(values) -> str:
    return "[" + ", ".join(_num(v) for v in values) + "]"


def _block(name: str, children, depth: int, lines: list[str]) -> None:
    pad = INDENT * depth
    lines.append(f"{pad}{name} {{")
    for child in children:
        _emit(child, depth + 1, lines)
    lines.append(f"{pad}}}")


def _emit(solid: Solid, depth: int, lines: list[str]) -> None:
    pad = INDENT * depth

    if isinstance(solid, Cylinder):
        top = solid.top_radius if solid.top_radius is not None else solid.radius
        lines.append(
            f"{pad}cylinder(h={_num(solid.height)}, r1={_num(solid.radius)}, r2={_num(top)});"
        )
    elif isinstance(solid, Box):
        if solid.center:
            lines.append(
                f"{pad}translate([0, 0, {_num(solid.z / 2)}]) "
                f"cube({_vec((solid.x, solid.y, solid.z))}, center=true);"
            )
        else:
            lines.append(f"{pad}cube({_vec((solid.x, solid.y, solid.z))});")
    elif isinstance(solid, Polyhedron):
        points = ", ".join(_vec(p) for p in solid.points)
        faces = ", ".join("[" + ", ".join(str(i) for i in f) + "]" for f in solid.faces)
        lines.append(f"{pad}polyhedron(points=[{points}], faces=[{faces}]);")
    elif isinstance(solid, Torus):
        lines.append(
            f"{pad}rotate_extrude() translate([{_num(solid.centerline_radius)}, 0, 0]) "
            f"circle(r={_num(solid.tube_radius)});"
        )
    elif isinstance(solid, Text):
        escaped = solid.text.replace("\\", "\\\\").replace('"', '\\"')
        lines.append(
            f'{pad}linear_extrude(height={_num(solid.depth)}) '
            f'text("{escaped}", size={_num(solid.size)}, '
            f'halign="{solid.halign}", valign="{solid.valign}");'
        )
    elif isinstance(solid, Translate):
        _block(f"translate({_vec(solid.offset)})", [solid.child], depth, lines)
    elif isinstance(solid, Rotate):
        _block(f"rotate({_vec(solid.angles)})", [solid.child], depth, lines)
    elif isinstance(solid, Union):
        _block("union()", solid.members, depth, lines)
    elif isinstance(solid, Difference):
        _block("difference()", solid.children(), depth, lines)
    elif isinstance(solid, Hull):
        _block("hull()", solid.members, depth, lines)
    else:
        raise KernelError(f"Unsupported node type: {type(solid).__name__}")
