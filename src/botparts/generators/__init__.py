"""Part generators."""

from .params import (
    BoardCarrierParams,
    FastenerParams,
    FastenerTable,
    PartsConfig,
    TTShaftParams,
    WheelParams,
)
from .primitives import (
    hex_prism,
    m3_nut,
    right_triangle_prism,
    rounded_rect_prism,
    torus,
    wedge,
    wheel_hex_12mm,
)
from .shaft_profile import (
    FlatRadius,
    FlatWidth,
    FractionRemoved,
    ShaftProfile,
    d_shaft,
    flattened_shaft,
    make_shaft,
    resolve_removal,
    round_shaft,
)
from .fastener import FastenerGenerator
from .board_carrier import BoardCarrierGenerator
from .wheel import WheelDimensions, WheelGenerator

__all__ = [
    # Configuration
    "BoardCarrierParams",
    "FastenerParams",
    "FastenerTable",
    "PartsConfig",
    "TTShaftParams",
    "WheelParams",
    # Primitives
    "hex_prism",
    "m3_nut",
    "right_triangle_prism",
    "rounded_rect_prism",
    "torus",
    "wedge",
    "wheel_hex_12mm",
    # Shaft profiles
    "FlatRadius",
    "FlatWidth",
    "FractionRemoved",
    "ShaftProfile",
    "d_shaft",
    "flattened_shaft",
    "make_shaft",
    "resolve_removal",
    "round_shaft",
    # Part generators
    "FastenerGenerator",
    "BoardCarrierGenerator",
    "WheelDimensions",
    "WheelGenerator",
    "generator_for",
]


def generator_for(spec, config=None):
    """Return the generator matching a part specification."""
    from ..models.spec import BoardCarrierSpec, WheelSpec

    if isinstance(spec, WheelSpec):
        return WheelGenerator(spec, config)
    if isinstance(spec, BoardCarrierSpec):
        return BoardCarrierGenerator(spec, config)
    raise TypeError(f"No generator for {type(spec).__name__}")
