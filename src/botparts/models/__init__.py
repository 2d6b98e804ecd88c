"""Data models for part generation."""

from .enums import FastenerClass, Orientation, ShaftKind, TowerShape
from .geometry import PartMetadata
from .spec import (
    BoardCarrierSpec,
    DShaftSpec,
    PartsFile,
    RoundShaftSpec,
    TTShaftSpec,
    WheelSpec,
)

__all__ = [
    "FastenerClass",
    "Orientation",
    "ShaftKind",
    "TowerShape",
    "PartMetadata",
    "BoardCarrierSpec",
    "DShaftSpec",
    "PartsFile",
    "RoundShaftSpec",
    "TTShaftSpec",
    "WheelSpec",
]
