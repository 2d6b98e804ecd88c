"""Board carrier generator.

A rounded base plate with two or four mount towers for a circuit board,
an embossed label and fastener size, and one screw cavity per tower cut
through tower and plate.

Coordinate system:
- Plate centered in XY, bottom face on z=0
- Towers stand on the plate's top face
"""

import logging
from typing import Optional

from ..errors import InvalidGeometry
from ..models.enums import FastenerClass, TowerShape
from ..models.geometry import PartMetadata
from ..models.solid import Solid, Text, union
from ..models.spec import BoardCarrierSpec
from .fastener import FastenerGenerator
from .params import CAVITY_OVERCUT, PartsConfig
from .primitives import m3_nut, rounded_rect_prism

logger = logging.getLogger(__name__)

# Depth of a nut trap cut into the plate underside
NUT_TRAP_DEPTH = 2.6


class BoardCarrierGenerator:
    """Generator for board carrier plates."""

    def __init__(self, spec: BoardCarrierSpec, config: Optional[PartsConfig] = None):
        """Initialize the carrier generator.

        Args:
            spec: Board carrier specification.
            config: Generator configuration. Uses defaults if not provided.
        """
        self.spec = spec
        self.config = config or PartsConfig()
        self.fastener = FastenerGenerator(
            spec.fastener, self.config.fasteners, cone_flare=self.config.board.cone_flare,
        )

    def tower_positions(self) -> list[tuple[float, float]]:
        """(x, y) tower centers; two posts use the diagonal pair."""
        hx = self.spec.screw_x / 2
        hy = self.spec.screw_y / 2
        if self.spec.post_count == 4:
            return [(hx, hy), (-hx, hy), (-hx, -hy), (hx, -hy)]
        if self.spec.post_count == 2:
            return [(hx, hy), (-hx, -hy)]
        raise InvalidGeometry(f"post_count must be 2 or 4, got {self.spec.post_count}")

    def generate(self) -> Solid:
        """Generate the carrier.

        Returns:
            Difference of (plate + towers + text) and one cavity per tower,
            followed by nut traps when enabled.
        """
        self._validate()
        s = self.spec
        positions = self.tower_positions()
        logger.debug(f"Board carrier {s.name}: {len(positions)} towers at {positions}")

        plate = rounded_rect_prism(s.length, s.width, s.corner_radius, s.thickness)
        if s.blind_holes:
            tower = self.fastener.tower_with_counterbore(
                s.tower_height, self.config.board.counterbore_depth, s.tower_shape,
            )
        else:
            tower = self.fastener.mount_tower(s.tower_height, s.tower_shape)
        towers = [tower.translate(x, y, s.thickness) for x, y in positions]

        body = union(plate, *towers, *self._texts())
        if s.blind_holes:
            return body

        total_height = s.thickness + s.tower_height
        if s.through_holes:
            cavity = self.fastener.passthrough_cavity(total_height)
        else:
            cavity = self.fastener.thread_cavity(total_height)
        cavities = [cavity.translate(x, y, 0) for x, y in positions]

        if s.nut_traps:
            trap = m3_nut(height=NUT_TRAP_DEPTH + CAVITY_OVERCUT)
            cavities.extend(trap.translate(x, y, -CAVITY_OVERCUT) for x, y in positions)

        return body.cut(*cavities)

    def get_metadata(self) -> PartMetadata:
        s = self.spec
        return PartMetadata(
            part_id=s.name,
            kind="board_carrier",
            name=f"Board carrier {s.label or s.name}",
            dimensions={
                "length": s.length,
                "width": s.width,
                "thickness": s.thickness,
                "screw_x": s.screw_x,
                "screw_y": s.screw_y,
                "tower_height": s.tower_height,
                "tower_diameter": self.fastener.tower_diameter,
                "post_count": float(s.post_count),
            },
            notes=f"{s.fastener.label} {'through holes' if s.through_holes else 'thread holes'}",
        )

    def _texts(self) -> list[Solid]:
        """Label centered on the top face, fastener size near the -Y edge."""
        s = self.spec
        b = self.config.board
        texts = []
        if s.label:
            texts.append(Text(s.label, b.label_size, b.text_depth).translate(0, 0, s.thickness))
        size_y = -s.width / 2 + s.corner_radius + b.fastener_label_size / 2
        texts.append(
            Text(s.fastener.label, b.fastener_label_size, b.text_depth).translate(0, size_y, s.thickness)
        )
        return texts

    def _validate(self) -> None:
        s = self.spec
        tower_d = self.fastener.tower_diameter
        if s.tower_shape is TowerShape.CONE:
            tower_d *= self.config.board.cone_flare
        if s.screw_x + tower_d > s.length:
            raise InvalidGeometry(
                f"screw_x ({s.screw_x}) plus tower diameter ({tower_d}) exceeds plate length ({s.length})"
            )
        if s.screw_y + tower_d > s.width:
            raise InvalidGeometry(
                f"screw_y ({s.screw_y}) plus tower diameter ({tower_d}) exceeds plate width ({s.width})"
            )
        if s.nut_traps and not (s.through_holes and s.fastener is FastenerClass.M30):
            raise InvalidGeometry("nut_traps requires through_holes with an M30 fastener")
        if s.nut_traps and NUT_TRAP_DEPTH >= s.thickness:
            raise InvalidGeometry(
                f"plate thickness ({s.thickness}) too thin for a {NUT_TRAP_DEPTH} mm nut trap"
            )
        if s.blind_holes and (s.through_holes or s.nut_traps):
            raise InvalidGeometry("blind_holes cannot be combined with through_holes or nut_traps")
