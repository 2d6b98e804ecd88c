"""Mount towers and screw cavities for one fastener class.

Towers stand on z=0. Cavities start at z=-0.1 and run 0.2 longer than the
requested height so that they open both faces cleanly when subtracted.
"""

from ..errors import InvalidGeometry
from ..models.enums import FastenerClass, TowerShape
from ..models.solid import Cylinder, Solid
from .params import CAVITY_OVERCUT, BoardCarrierParams, FastenerParams, FastenerTable

_BOARD_DEFAULTS = BoardCarrierParams()


class FastenerGenerator:
    """Generator for towers and holes sized for a fastener class."""

    def __init__(
        self,
        fastener_class,
        fasteners: FastenerTable = FastenerTable(),
        cone_flare: float = _BOARD_DEFAULTS.cone_flare,
    ):
        """Initialize the generator.

        Args:
            fastener_class: FastenerClass member or its string value.
            fasteners: Hole size table; defaults to self-tap holes.
            cone_flare: Base/top diameter ratio of conical towers.

        Raises:
            UnsupportedFastener: If ``fastener_class`` is not recognized.
        """
        self.fastener_class = FastenerClass.parse(fastener_class)
        self.params: FastenerParams = fasteners.get(self.fastener_class)
        self.cone_flare = cone_flare

    @property
    def tower_diameter(self) -> float:
        return self.params.tower_diameter

    def mount_tower(self, height: float, shape: TowerShape = TowerShape.CYLINDER) -> Cylinder:
        """Solid tower; conical towers widen toward the base for support-free printing."""
        _check_height(height)
        radius = self.params.tower_diameter / 2
        if TowerShape(shape) is TowerShape.CONE:
            return Cylinder(height=height, radius=radius * self.cone_flare, top_radius=radius)
        return Cylinder(height=height, radius=radius)

    def thread_cavity(self, height: float) -> Solid:
        """Screw-engaging hole: threaded insert bore or self-tap hole."""
        return self._cavity(self.params.thread_diameter, height)

    def passthrough_cavity(self, height: float) -> Solid:
        """Clearance hole the screw passes through freely."""
        return self._cavity(self.params.clearance_diameter, height)

    def tower_with_counterbore(
        self,
        height: float,
        depth: float = _BOARD_DEFAULTS.counterbore_depth,
        shape: TowerShape = TowerShape.CYLINDER,
    ) -> Solid:
        """Tower bored only in its top ``depth`` mm, solid below."""
        tower = self.mount_tower(height, shape)
        depth = min(depth, height)
        bore = self.thread_cavity(depth).translate(0, 0, height - depth)
        return tower.cut(bore)

    def _cavity(self, diameter: float, height: float) -> Solid:
        _check_height(height)
        return Cylinder(
            height=height + 2 * CAVITY_OVERCUT, radius=diameter / 2,
        ).translate(0, 0, -CAVITY_OVERCUT)


def _check_height(height: float) -> None:
    if height <= 0:
        raise InvalidGeometry(f"height must be positive, got {height}")
