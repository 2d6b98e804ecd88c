"""Configuration for part generators.

All parameter sets are frozen dataclasses with defaults; composers take a
single ``PartsConfig`` instead of reading module-level constants.
"""

from dataclasses import dataclass, field, replace

from ..models.enums import FastenerClass, ShaftKind


# Extension applied to every cavity past the faces it opens
CAVITY_OVERCUT = 0.1


@dataclass(frozen=True)
class FastenerParams:
    """Hole sizes for one metric screw class."""

    self_tap_diameter: float      # Screw cuts its own thread in plastic
    clearance_diameter: float     # Screw passes through freely
    insert_diameter: float        # Bore for a heat-set threaded insert
    tower_diameter: float         # Outer diameter of a mount tower
    use_insert: bool = False

    @property
    def thread_diameter(self) -> float:
        """Active screw-engaging bore: insert bore or self-tap hole, never both."""
        return self.insert_diameter if self.use_insert else self.self_tap_diameter


@dataclass(frozen=True)
class FastenerTable:
    """Fastener parameters for each supported class."""

    m20: FastenerParams = FastenerParams(
        self_tap_diameter=1.8, clearance_diameter=2.4, insert_diameter=3.2, tower_diameter=5.0,
    )
    m25: FastenerParams = FastenerParams(
        self_tap_diameter=2.2, clearance_diameter=2.9, insert_diameter=3.6, tower_diameter=5.5,
    )
    m30: FastenerParams = FastenerParams(
        self_tap_diameter=2.7, clearance_diameter=3.4, insert_diameter=4.2, tower_diameter=6.5,
    )

    def get(self, fastener_class) -> FastenerParams:
        fastener_class = FastenerClass.parse(fastener_class)
        if fastener_class is FastenerClass.M20:
            return self.m20
        if fastener_class is FastenerClass.M25:
            return self.m25
        if fastener_class is FastenerClass.M30:
            return self.m30
        raise AssertionError(f"unhandled fastener class {fastener_class}")

    def with_inserts(self, use_insert: bool = True) -> "FastenerTable":
        """Copy of the table with the threaded insert flag set on every class."""
        return FastenerTable(
            m20=replace(self.m20, use_insert=use_insert),
            m25=replace(self.m25, use_insert=use_insert),
            m30=replace(self.m30, use_insert=use_insert),
        )


@dataclass(frozen=True)
class TTShaftParams:
    """Output shaft of a TT (yellow, 1:48) gear motor."""

    diameter: float = 5.4
    flat_width: float = 3.7       # Distance across the two flats
    fit_clearance: float = 0.1    # Added to both dimensions of the cavity


@dataclass(frozen=True)
class HubParams:
    """Hub sizing for one shaft kind."""

    wall: float        # Material around the shaft cavity (per side)
    extension: float   # How far the hub stands above the wheel disc


@dataclass(frozen=True)
class WheelParams:
    """Empirical constants for o-ring wheels."""

    relief_floor: float = 2.0        # Solid base left under the web relief
    web_inset: float = 6.0           # base_wheel_dia - web_diameter
    flex_slot_width: float = 1.0
    d_shaft_hub: HubParams = HubParams(wall=3.0, extension=3.0)
    tt_hub: HubParams = HubParams(wall=2.5, extension=5.0)
    round_hub: HubParams = HubParams(wall=3.0, extension=3.0)

    # Decorative holes switch on a single o-ring OD threshold
    hole_threshold_od: float = 40.0
    small_hole_diameter: float = 6.0
    small_hole_angles: tuple[float, ...] = (45.0, 135.0, 225.0, 315.0)
    large_hole_diameter: float = 8.0
    large_hole_angles: tuple[float, ...] = (0.0, 60.0, 120.0, 180.0, 240.0, 300.0)
    hole_margin: float = 0.5         # Material kept between a hole and the hub or web edge

    def hub_for(self, kind) -> HubParams:
        kind = ShaftKind.parse(kind)
        if kind is ShaftKind.D_SHAFT:
            return self.d_shaft_hub
        if kind is ShaftKind.FLAT_SHAFT:
            return self.tt_hub
        if kind is ShaftKind.ROUND_SHAFT:
            return self.round_hub
        raise AssertionError(f"unhandled shaft kind {kind}")


@dataclass(frozen=True)
class BoardCarrierParams:
    """Constants for board carriers."""

    label_size: float = 5.0
    fastener_label_size: float = 3.0
    text_depth: float = 0.6
    counterbore_depth: float = 8.0   # Bored length of a counterbored tower
    cone_flare: float = 2.0          # Cone base diameter / tower diameter


@dataclass(frozen=True)
class PartsConfig:
    """Everything a composer needs besides its own part specification."""

    fasteners: FastenerTable = field(default_factory=FastenerTable)
    wheel: WheelParams = field(default_factory=WheelParams)
    board: BoardCarrierParams = field(default_factory=BoardCarrierParams)
    tt_shaft: TTShaftParams = field(default_factory=TTShaftParams)

    def with_inserts(self, use_insert: bool = True) -> "PartsConfig":
        return replace(self, fasteners=self.fasteners.with_inserts(use_insert))
