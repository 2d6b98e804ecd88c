"""Part metadata for manifests."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class PartMetadata:
    """Metadata describing a generated part."""

    part_id: str
    kind: str
    name: str
    material: str = "PLA"
    count: int = 1
    dimensions: dict[str, float] = field(default_factory=dict)
    notes: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "part_id": self.part_id,
            "kind": self.kind,
            "name": self.name,
            "material": self.material,
            "count": self.count,
            "dimensions": self.dimensions,
            "notes": self.notes,
        }
