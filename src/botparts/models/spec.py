"""Pydantic models for part specification parsing and validation.

Field-level checks (positive sizes, known selectors) happen here. Checks
that relate several derived dimensions live in the generators, which raise
the specific error types from ``botparts.errors``.
"""

from __future__ import annotations

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field, field_validator, model_validator

from .enums import FastenerClass, Orientation, ShaftKind, TowerShape


class DShaftSpec(BaseModel):
    """D-shaft coupling (single flat). Give exactly one removal parameter."""

    kind: Literal["d_shaft"] = "d_shaft"
    diameter: float = Field(default=3.0, gt=0, description="Shaft diameter in mm")
    flat_width: Optional[float] = Field(default=None, gt=0, description="(diameter - flat_width) / 2 is removed")
    fraction: Optional[float] = Field(default=None, gt=0, lt=0.5, description="Fraction of diameter removed")
    flat_radius: Optional[float] = Field(default=None, gt=0, description="Distance from axis to flat in mm")
    orientation: Orientation = Orientation.TALL

    @model_validator(mode="after")
    def validate_single_removal(self) -> "DShaftSpec":
        given = [v for v in (self.flat_width, self.fraction, self.flat_radius) if v is not None]
        if len(given) > 1:
            raise ValueError("give only one of flat_width, fraction, flat_radius")
        if not given:
            self.flat_width = self.diameter - 1.0
        return self

    def removal(self):
        from ..generators.shaft_profile import FlatRadius, FlatWidth, FractionRemoved

        if self.fraction is not None:
            return FractionRemoved(self.fraction)
        if self.flat_radius is not None:
            return FlatRadius(self.flat_radius)
        return FlatWidth(self.flat_width)


class TTShaftSpec(BaseModel):
    """Flattened shaft of a TT gear motor; sizes come from the configuration."""

    kind: Literal["tt"] = "tt"
    orientation: Orientation = Orientation.TALL


class RoundShaftSpec(BaseModel):
    """Plain round shaft with a clearance fit."""

    kind: Literal["round"] = "round"
    diameter: float = Field(default=3.0, gt=0, description="Shaft diameter in mm")
    clearance: float = Field(default=0.2, ge=0, description="Added to the bore diameter in mm")


ShaftSpec = Annotated[
    Union[DShaftSpec, TTShaftSpec, RoundShaftSpec],
    Field(discriminator="kind"),
]


class WheelSpec(BaseModel):
    """O-ring tyred wheel."""

    kind: Literal["wheel"] = "wheel"
    name: str = Field(default="wheel", min_length=1)
    oring_id: float = Field(gt=0, description="O-ring inner diameter in mm")
    oring_od: float = Field(gt=0, description="O-ring outer diameter in mm")
    thickness: float = Field(gt=0, description="Wheel disc thickness in mm")
    stretch: float = Field(default=2.0, description="Diameter added to stretch the o-ring, in mm")
    shaft: ShaftSpec = Field(default_factory=DShaftSpec)

    @model_validator(mode="before")
    @classmethod
    def validate_shaft_kind(cls, data):
        if isinstance(data, dict) and isinstance(data.get("shaft"), dict):
            shaft = dict(data["shaft"])
            shaft["kind"] = ShaftKind.parse(shaft.get("kind", ShaftKind.D_SHAFT.value)).value
            data = {**data, "shaft": shaft}
        return data

    @property
    def shaft_kind(self) -> ShaftKind:
        return ShaftKind(self.shaft.kind)


class BoardCarrierSpec(BaseModel):
    """Base plate with mount towers for a circuit board."""

    kind: Literal["board_carrier"] = "board_carrier"
    name: str = Field(default="board_carrier", min_length=1)
    length: float = Field(gt=0, description="Plate length (X) in mm")
    width: float = Field(gt=0, description="Plate width (Y) in mm")
    thickness: float = Field(default=3.0, gt=0, description="Plate thickness in mm")
    screw_x: float = Field(gt=0, description="Mount screw spacing along X in mm")
    screw_y: float = Field(gt=0, description="Mount screw spacing along Y in mm")
    fastener: FastenerClass = FastenerClass.M25
    post_count: Literal[2, 4] = 4
    label: str = ""
    tower_shape: TowerShape = TowerShape.CYLINDER
    tower_height: float = Field(default=6.0, gt=0, description="Tower height above the plate in mm")
    corner_radius: float = Field(default=3.0, gt=0)
    through_holes: bool = Field(default=False, description="Clearance holes instead of thread holes")
    nut_traps: bool = Field(default=False, description="M3 nut cavities under through holes")
    blind_holes: bool = Field(default=False, description="Bore only the top of each tower, leaving the plate closed")

    @field_validator("fastener", mode="before")
    @classmethod
    def parse_fastener(cls, value):
        return FastenerClass.parse(value)


PartSpec = Annotated[Union[WheelSpec, BoardCarrierSpec], Field(discriminator="kind")]


class PartsFile(BaseModel):
    """Top-level YAML document: a batch of parts sharing one configuration."""

    use_threaded_inserts: bool = False
    parts: list[PartSpec] = Field(min_length=1)

    @model_validator(mode="after")
    def validate_unique_names(self) -> "PartsFile":
        names = [part.name for part in self.parts]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ValueError(f"part names must be unique, duplicated: {duplicates}")
        return self
