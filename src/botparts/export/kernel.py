"""Build cadquery geometry from a Solid description tree."""

from __future__ import annotations

import cadquery as cq

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

_ORIGIN = cq.Vector(0, 0, 0)
_AXES = (cq.Vector(1, 0, 0), cq.Vector(0, 1, 0), cq.Vector(0, 0, 1))


def to_cadquery(solid: Solid) -> cq.Workplane:
    """Convert a description tree into a CadQuery Workplane holding one shape."""
    return cq.Workplane("XY").newObject([to_shape(solid)])


def to_shape(solid: Solid) -> cq.Shape:
    """Convert a description tree into a CadQuery shape."""
    if isinstance(solid, Cylinder):
        if solid.is_cone:
            return cq.Solid.makeCone(solid.radius, solid.top_radius, solid.height)
        return cq.Solid.makeCylinder(solid.radius, solid.height)

    if isinstance(solid, Box):
        box = cq.Solid.makeBox(solid.x, solid.y, solid.z)
        if solid.center:
            return box.translate(cq.Vector(-solid.x / 2, -solid.y / 2, 0))
        return box

    if isinstance(solid, Torus):
        return cq.Solid.makeTorus(solid.centerline_radius, solid.tube_radius)

    if isinstance(solid, Polyhedron):
        return _polyhedron(solid)

    if isinstance(solid, Text):
        text = cq.Workplane("XY").text(
            solid.text, solid.size, solid.depth,
            halign=solid.halign, valign=solid.valign,
        )
        return text.val()

    if isinstance(solid, Translate):
        return to_shape(solid.child).translate(cq.Vector(*solid.offset))

    if isinstance(solid, Rotate):
        shape = to_shape(solid.child)
        for axis, angle in zip(_AXES, solid.angles):
            if angle:
                shape = shape.rotate(_ORIGIN, axis, angle)
        return shape

    if isinstance(solid, Union):
        shapes = [to_shape(member) for member in solid.members]
        return shapes[0].fuse(*shapes[1:]).clean()

    if isinstance(solid, Difference):
        base = to_shape(solid.base)
        if not solid.subtracted:
            return base
        return base.cut(*[to_shape(s) for s in solid.subtracted]).clean()

    if isinstance(solid, Hull):
        return _vertical_hull(solid)

    raise KernelError(f"Unsupported node type: {type(solid).__name__}")


def _polyhedron(solid: Polyhedron) -> cq.Solid:
    faces = []
    for face in solid.faces:
        wire = cq.Wire.makePolygon([cq.Vector(*solid.points[i]) for i in face], close=True)
        faces.append(cq.Face.makeFromWires(wire))
    shell = cq.Shell.makeShell(faces)
    return cq.Solid.makeSolid(shell)


def _vertical_hull(solid: Hull) -> cq.Shape:
    """Hull of upright cylinders sharing one z-range.

    This is the only hull the generators emit (rounded rectangles); it is the
    2D hull of the cylinder footprints extruded over their common height.
    """
    circles = []
    for member in solid.members:
        offset = (0.0, 0.0, 0.0)
        if isinstance(member, Translate):
            offset, member = member.offset, member.child
        if not isinstance(member, Cylinder) or member.is_cone:
            raise KernelError("Hull is only supported for translated upright cylinders")
        circles.append((offset, member))

    z0 = circles[0][0][2]
    height = circles[0][1].height
    if any(o[2] != z0 or c.height != height for o, c in circles):
        raise KernelError("Hull members must share the same z-range")

    sketch = cq.Sketch()
    for (x, y, _), cylinder in circles:
        sketch = sketch.arc((x, y), cylinder.radius, 0.0, 360.0)
    sketch = sketch.hull()

    return (
        cq.Workplane("XY")
        .workplane(offset=z0)
        .placeSketch(sketch)
        .extrude(height)
        .val()
    )
