"""O-ring tyred wheel generator.

The wheel is a disc with a hub, an o-ring groove around its rim, a motor
shaft cavity through the hub, a flex-relief slot and a ring of lightening
holes.

Coordinate system:
- Z axis: wheel axis, disc stands on z=0
- Flex-relief slot runs from the rim to the center along -X
"""

import logging
import math
from dataclasses import dataclass, asdict
from typing import Optional

from ..errors import InvalidWheelSpec
from ..models.enums import ShaftKind
from ..models.geometry import PartMetadata
from ..models.solid import Box, Cylinder, Solid, union
from ..models.spec import WheelSpec
from .params import CAVITY_OVERCUT, PartsConfig
from .primitives import torus
from .shaft_profile import d_shaft, flattened_shaft, round_shaft

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WheelDimensions:
    """Dimensions derived from a WheelSpec."""

    tube_diameter: float          # O-ring cross-section
    torus_diameter: float         # O-ring centerline diameter
    base_wheel_diameter: float
    web_diameter: float
    shaft_diameter: float         # Round diameter of the shaft cavity
    center_hub_diameter: float
    center_hub_thickness: float
    groove_tube_radius: float
    groove_centerline_radius: float
    hole_diameter: float
    hole_angles: tuple[float, ...]
    hole_radius: float            # Radius of the circle the holes sit on


class WheelGenerator:
    """Generator for o-ring wheels on d-shaft, TT or round motor shafts."""

    def __init__(self, spec: WheelSpec, config: Optional[PartsConfig] = None):
        """Initialize the wheel generator.

        Args:
            spec: Wheel specification.
            config: Generator configuration. Uses defaults if not provided.
        """
        self.spec = spec
        self.config = config or PartsConfig()

    def dimensions(self) -> WheelDimensions:
        """Derive every secondary dimension and check the ordering invariants.

        Raises:
            InvalidWheelSpec: If the o-ring, stretch or thickness values
                cannot produce a valid wheel.
        """
        s = self.spec
        w = self.config.wheel

        if s.oring_od <= s.oring_id:
            raise InvalidWheelSpec(
                f"oring_od ({s.oring_od}) must be larger than oring_id ({s.oring_id})"
            )
        if s.thickness <= w.relief_floor:
            raise InvalidWheelSpec(
                f"thickness ({s.thickness}) must exceed the relief floor ({w.relief_floor})"
            )

        tube_diameter = (s.oring_od - s.oring_id) / 2
        torus_diameter = (s.oring_id + s.oring_od) / 2
        # stretch is a diameter delta; -1 is an empirical fit allowance
        base_wheel_diameter = s.oring_id + tube_diameter + s.stretch - 1
        web_diameter = base_wheel_diameter - w.web_inset

        if base_wheel_diameter <= 0:
            raise InvalidWheelSpec(
                f"base wheel diameter {base_wheel_diameter} is not positive "
                f"(oring_id={s.oring_id}, oring_od={s.oring_od}, stretch={s.stretch})"
            )

        shaft_diameter = self._shaft_diameter()
        hub = w.hub_for(s.shaft_kind)
        hub_diameter = shaft_diameter + 2 * hub.wall
        hub_thickness = s.thickness + hub.extension

        if web_diameter <= hub_diameter:
            raise InvalidWheelSpec(
                f"web diameter {web_diameter} must exceed hub diameter {hub_diameter}; "
                f"use a larger o-ring or stretch"
            )

        tube_radius = tube_diameter / 2
        # Undercut by a quarter tube radius so the groove cradles the o-ring
        centerline_radius = torus_diameter / 2 - tube_radius / 4 + s.stretch / 2

        if s.oring_od < w.hole_threshold_od:
            hole_diameter, hole_angles = w.small_hole_diameter, w.small_hole_angles
        else:
            hole_diameter, hole_angles = w.large_hole_diameter, w.large_hole_angles

        # Holes are centered in the annulus between the hub and the web edge
        annulus_width = (web_diameter - hub_diameter) / 2
        hole_diameter = min(hole_diameter, annulus_width - 2 * w.hole_margin)
        if hole_diameter <= 0:
            raise InvalidWheelSpec(
                f"no room for decorative holes between hub ({hub_diameter}) and web ({web_diameter}); "
                f"use a larger o-ring or stretch"
            )

        return WheelDimensions(
            tube_diameter=tube_diameter,
            torus_diameter=torus_diameter,
            base_wheel_diameter=base_wheel_diameter,
            web_diameter=web_diameter,
            shaft_diameter=shaft_diameter,
            center_hub_diameter=hub_diameter,
            center_hub_thickness=hub_thickness,
            groove_tube_radius=tube_radius,
            groove_centerline_radius=centerline_radius,
            hole_diameter=hole_diameter,
            hole_angles=tuple(hole_angles),
            hole_radius=(hub_diameter + web_diameter) / 4,
        )

    def generate(self) -> Solid:
        """Generate the wheel.

        Returns:
            Difference of the disc-plus-hub body and, in order, the o-ring
            groove, the shaft cavity, the flex-relief slot and the
            decorative holes.
        """
        d = self.dimensions()
        thickness = self.spec.thickness
        floor = self.config.wheel.relief_floor
        logger.debug(
            f"Wheel {self.spec.name}: base={d.base_wheel_diameter:.2f} web={d.web_diameter:.2f} "
            f"hub={d.center_hub_diameter:.2f}x{d.center_hub_thickness:.2f}"
        )

        # Disc with the web relief cut from the floor up through the top face
        disc = Cylinder(height=thickness, radius=d.base_wheel_diameter / 2)
        relief = Cylinder(height=thickness - CAVITY_OVERCUT, radius=d.web_diameter / 2)
        disc = disc.cut(relief.translate(0, 0, floor))

        hub = Cylinder(height=d.center_hub_thickness, radius=d.center_hub_diameter / 2)
        body = union(disc, hub)

        groove = torus(d.groove_tube_radius, d.groove_centerline_radius).translate(0, 0, thickness / 2)

        return body.cut(
            groove,
            self.shaft_cavity(d),
            self.flex_slot(d),
            *self.decorative_holes(d),
        )

    def shaft_cavity(self, d: Optional[WheelDimensions] = None) -> Solid:
        """Motor shaft cavity through the full hub height."""
        d = d or self.dimensions()
        shaft = self.spec.shaft
        kind = self.spec.shaft_kind
        length = d.center_hub_thickness + 2 * CAVITY_OVERCUT

        if kind is ShaftKind.D_SHAFT:
            cavity = d_shaft(shaft.diameter, shaft.removal(), length, shaft.orientation)
        elif kind is ShaftKind.FLAT_SHAFT:
            tt = self.config.tt_shaft
            cavity = flattened_shaft(
                d.shaft_diameter, tt.flat_width + tt.fit_clearance, length, shaft.orientation,
            )
        elif kind is ShaftKind.ROUND_SHAFT:
            cavity = round_shaft(d.shaft_diameter, length)
        else:
            raise AssertionError(f"unhandled shaft kind {kind}")

        return cavity.translate(0, 0, -CAVITY_OVERCUT)

    def flex_slot(self, d: Optional[WheelDimensions] = None) -> Solid:
        """Slot from the rim to the center on -X that lets the hub flex open."""
        d = d or self.dimensions()
        slot_width = self.config.wheel.flex_slot_width
        height = max(d.center_hub_thickness, self.spec.thickness)
        reach = d.base_wheel_diameter / 2 + CAVITY_OVERCUT
        slot = Box(reach, slot_width, height + 2 * CAVITY_OVERCUT)
        return slot.translate(-reach, -slot_width / 2, -CAVITY_OVERCUT)

    def decorative_holes(self, d: Optional[WheelDimensions] = None) -> list[Solid]:
        """Lightening holes through the web floor."""
        d = d or self.dimensions()
        hole = Cylinder(
            height=self.spec.thickness + 2 * CAVITY_OVERCUT, radius=d.hole_diameter / 2,
        )
        holes = []
        for angle in d.hole_angles:
            a = math.radians(angle)
            holes.append(hole.translate(
                d.hole_radius * math.cos(a), d.hole_radius * math.sin(a), -CAVITY_OVERCUT,
            ))
        return holes

    def get_metadata(self) -> PartMetadata:
        d = self.dimensions()
        dims = {k: v for k, v in asdict(d).items() if isinstance(v, float)}
        dims["hole_count"] = float(len(d.hole_angles))
        return PartMetadata(
            part_id=self.spec.name,
            kind="wheel",
            name=f"O-ring wheel {self.spec.oring_id:g}x{self.spec.oring_od:g} ({self.spec.shaft_kind.value})",
            dimensions=dims,
            notes=f"Finished OD approx. {self.spec.oring_od + self.spec.stretch / 2:g} mm with o-ring fitted",
        )

    def _shaft_diameter(self) -> float:
        shaft = self.spec.shaft
        kind = self.spec.shaft_kind
        if kind is ShaftKind.D_SHAFT:
            return shaft.diameter
        if kind is ShaftKind.FLAT_SHAFT:
            tt = self.config.tt_shaft
            return tt.diameter + tt.fit_clearance
        if kind is ShaftKind.ROUND_SHAFT:
            return shaft.diameter + shaft.clearance
        raise AssertionError(f"unhandled shaft kind {kind}")
