"""Closed selector types for conditional sub-geometry."""

from enum import Enum

from ..errors import UnsupportedFastener, UnsupportedShaftKind


class FastenerClass(str, Enum):
    """Metric screw class used for board mounting."""
    M20 = "M20"  # M2.0
    M25 = "M25"  # M2.5
    M30 = "M30"  # M3.0

    @classmethod
    def parse(cls, value) -> "FastenerClass":
        """Return the member for ``value``; unknown values are rejected."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise UnsupportedFastener(
                f"Unsupported fastener class {value!r}; "
                f"expected one of {[m.value for m in cls]}"
            ) from None

    @property
    def label(self) -> str:
        """Human readable size, e.g. ``M2.5``."""
        return f"M{self.value[1]}.{self.value[2]}"


class ShaftKind(str, Enum):
    """Motor shaft coupling cut into a wheel hub."""
    D_SHAFT = "d_shaft"   # Single flat (N20 style gear motors)
    FLAT_SHAFT = "tt"     # Two opposing flats (TT yellow gear motors)
    ROUND_SHAFT = "round"  # Plain round shaft with clearance

    @classmethod
    def parse(cls, value) -> "ShaftKind":
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise UnsupportedShaftKind(
                f"Unsupported shaft kind {value!r}; "
                f"expected one of {[m.value for m in cls]}"
            ) from None


class TowerShape(str, Enum):
    """Mount tower shape."""
    CYLINDER = "cylinder"  # Printed lying flat
    CONE = "cone"          # Printed standing up, self-supporting


class Orientation(str, Enum):
    """Which transverse axis the shaft flats face."""
    TALL = "tall"  # Flats face +/-X
    WIDE = "wide"  # Rotated -90 degrees about Z, flats face +/-Y
