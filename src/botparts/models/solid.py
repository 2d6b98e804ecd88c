"""Solid description tree.

Parts are built as immutable trees of primitive and boolean nodes. The tree
is pure data: it can be compared, walked and serialized without a geometry
kernel. See ``botparts.export.kernel`` for the cadquery bridge.

Conventions:
- Units are millimetres, angles are degrees.
- Cylinders and uncentered boxes stand on z=0 and grow along +Z.
- Rotations are applied about X, then Y, then Z.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Type, TypeVar

Vector = tuple[float, float, float]

T = TypeVar("T", bound="Solid")


class Solid:
    """Base class for every node in the description tree."""

    def translate(self, x: float = 0.0, y: float = 0.0, z: float = 0.0) -> "Translate":
        return Translate(self, (float(x), float(y), float(z)))

    def rotate(self, x: float = 0.0, y: float = 0.0, z: float = 0.0) -> "Rotate":
        return Rotate(self, (float(x), float(y), float(z)))

    def cut(self, *others: "Solid") -> "Difference":
        return Difference(self, tuple(others))

    def children(self) -> tuple["Solid", ...]:
        return ()


# Primitives

@dataclass(frozen=True)
class Cylinder(Solid):
    """Cylinder (or frustum when ``top_radius`` is set) standing on z=0."""

    height: float
    radius: float
    top_radius: Optional[float] = None

    @property
    def is_cone(self) -> bool:
        return self.top_radius is not None and self.top_radius != self.radius


@dataclass(frozen=True)
class Box(Solid):
    """Rectangular box.

    Uncentered boxes span [0, x] x [0, y] x [0, z]. Centered boxes are
    centered in X and Y and still stand on z=0.
    """

    x: float
    y: float
    z: float
    center: bool = False


@dataclass(frozen=True)
class Polyhedron(Solid):
    """Closed polyhedron; faces index into points, clockwise seen from outside."""

    points: tuple[Vector, ...]
    faces: tuple[tuple[int, ...], ...]


@dataclass(frozen=True)
class Torus(Solid):
    """Torus lying in the XY plane, centered at the origin."""

    tube_radius: float
    centerline_radius: float


@dataclass(frozen=True)
class Text(Solid):
    """Text extruded from z=0 to z=depth."""

    text: str
    size: float
    depth: float
    halign: str = "center"
    valign: str = "center"


# Composites

@dataclass(frozen=True)
class Union(Solid):
    members: tuple[Solid, ...]

    def children(self) -> tuple[Solid, ...]:
        return self.members


@dataclass(frozen=True)
class Difference(Solid):
    """``base`` minus every solid in ``subtracted``."""

    base: Solid
    subtracted: tuple[Solid, ...]

    def children(self) -> tuple[Solid, ...]:
        return (self.base,) + self.subtracted


@dataclass(frozen=True)
class Hull(Solid):
    """Convex hull of the member solids."""

    members: tuple[Solid, ...]

    def children(self) -> tuple[Solid, ...]:
        return self.members


@dataclass(frozen=True)
class Translate(Solid):
    child: Solid
    offset: Vector

    def children(self) -> tuple[Solid, ...]:
        return (self.child,)


@dataclass(frozen=True)
class Rotate(Solid):
    child: Solid
    angles: Vector

    def children(self) -> tuple[Solid, ...]:
        return (self.child,)


def union(*solids: Solid) -> Solid:
    """Union of the given solids; a single solid is returned unchanged."""
    if not solids:
        raise ValueError("union() needs at least one solid")
    if len(solids) == 1:
        return solids[0]
    return Union(tuple(solids))


def walk(solid: Solid) -> Iterator[Solid]:
    """Yield every node of the tree, depth first, parents before children."""
    yield solid
    for child in solid.children():
        yield from walk(child)


def find(solid: Solid, node_type: Type[T]) -> list[T]:
    """Return every node of ``node_type`` in the tree, in walk order."""
    return [node for node in walk(solid) if isinstance(node, node_type)]
