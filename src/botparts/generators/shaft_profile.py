"""Shaft profiles with 0, 1 or 2 flats.

A flat is a planar cut parallel to the shaft axis at distance
``diameter / 2 - removal`` from the axis. One flat on +X gives a D-shaft;
flats on +X and -X give a flattened shaft (TT gear motors). The removal
depth can be expressed three equivalent ways:

- FlatWidth: distance across the flats, removal = (diameter - width) / 2
- FractionRemoved: removal = diameter * fraction
- FlatRadius: distance from axis to flat, removal = diameter / 2 - radius

Shafts stand on z=0 and extend along +Z. Used as cavities they are
positioned by the caller.
"""

import logging
from dataclasses import dataclass
from typing import Union as TypingUnion

from ..errors import InvalidGeometry
from ..models.enums import Orientation
from ..models.solid import Box, Cylinder, Solid

logger = logging.getLogger(__name__)

# How far cut boxes extend past the shaft surface
_CUT_MARGIN = 1.0


@dataclass(frozen=True)
class FlatWidth:
    width: float


@dataclass(frozen=True)
class FractionRemoved:
    fraction: float


@dataclass(frozen=True)
class FlatRadius:
    radius: float


Removal = TypingUnion[FlatWidth, FractionRemoved, FlatRadius]


@dataclass(frozen=True)
class ShaftProfile:
    """Shaft cross-section and length.

    Attributes:
        diameter: Round diameter in mm.
        removal: Flat depth specification; ignored when flats == 0.
        length: Length along Z in mm.
        flats: 0 (round), 1 (D-shaft) or 2 (flattened).
        orientation: TALL keeps flats on X; WIDE turns them to face Y.
    """

    diameter: float
    removal: Removal
    length: float
    flats: int = 1
    orientation: Orientation = Orientation.TALL

    @property
    def remove_amount(self) -> float:
        return resolve_removal(self.diameter, self.removal)


def resolve_removal(diameter: float, removal: Removal) -> float:
    """Convert a removal specification into a cut depth in mm."""
    if isinstance(removal, FlatWidth):
        return (diameter - removal.width) / 2
    if isinstance(removal, FractionRemoved):
        return diameter * removal.fraction
    if isinstance(removal, FlatRadius):
        return diameter / 2 - removal.radius
    raise TypeError(f"Unknown removal specification: {removal!r}")


def make_shaft(profile: ShaftProfile) -> Solid:
    """Build the shaft solid described by ``profile``.

    Raises:
        InvalidGeometry: If the diameter or length is not positive, the flat
            count is unknown, or the cut depth is outside (0, diameter / 2).
    """
    diameter = profile.diameter
    if diameter <= 0:
        raise InvalidGeometry(f"shaft diameter must be positive, got {diameter}")
    if profile.length <= 0:
        raise InvalidGeometry(f"shaft length must be positive, got {profile.length}")
    if profile.flats not in (0, 1, 2):
        raise InvalidGeometry(f"shaft flats must be 0, 1 or 2, got {profile.flats}")

    radius = diameter / 2
    shaft: Solid = Cylinder(height=profile.length, radius=radius)

    if profile.flats:
        remove = profile.remove_amount
        if not 0 < remove < radius:
            raise InvalidGeometry(
                f"shaft cut depth must be in (0, {radius}) for diameter {diameter}, got {remove}"
            )
        logger.debug(f"Shaft d={diameter} flats={profile.flats} cut depth={remove:.3f}")

        # Box spanning the cut region on +X, oversized in Y and Z
        cut_box = Box(
            remove + _CUT_MARGIN,
            diameter + 2 * _CUT_MARGIN,
            profile.length + 2 * _CUT_MARGIN,
        )
        cuts = [cut_box.translate(radius - remove, -radius - _CUT_MARGIN, -_CUT_MARGIN)]
        if profile.flats == 2:
            cuts.append(cut_box.translate(-radius - _CUT_MARGIN, -radius - _CUT_MARGIN, -_CUT_MARGIN))
        shaft = shaft.cut(*cuts)

    if Orientation(profile.orientation) is Orientation.WIDE:
        shaft = shaft.rotate(0, 0, -90)
    return shaft


def d_shaft(
    diameter: float,
    removal: Removal,
    length: float,
    orientation: Orientation = Orientation.TALL,
) -> Solid:
    """Create a D-shaft: one flat on the +X side (before orientation)."""
    return make_shaft(ShaftProfile(diameter, removal, length, flats=1, orientation=orientation))


def flattened_shaft(
    diameter: float,
    flat_width: float,
    length: float,
    orientation: Orientation = Orientation.TALL,
) -> Solid:
    """Create a shaft with two opposing flats ``flat_width`` apart.

    Each side loses ``(diameter - flat_width) / 2``.
    """
    if flat_width >= diameter:
        raise InvalidGeometry(
            f"flat_width ({flat_width}) must be smaller than diameter ({diameter})"
        )
    return make_shaft(
        ShaftProfile(diameter, FlatWidth(flat_width), length, flats=2, orientation=orientation)
    )


def round_shaft(diameter: float, length: float) -> Solid:
    """Create a plain round shaft."""
    return make_shaft(ShaftProfile(diameter, FractionRemoved(0.0), length, flats=0))
