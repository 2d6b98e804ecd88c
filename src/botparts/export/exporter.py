"""Export functionality for STL/STEP/SCAD files."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional, Dict, List

from ..models.geometry import PartMetadata
from ..models.solid import Solid
from .scad import to_scad

logger = logging.getLogger(__name__)

SUPPORTED_FORMATS = ("stl", "step", "scad")


class Exporter:
    """Exports generated parts to various formats."""

    def __init__(self, output_dir: Path, formats: Optional[List[str]] = None):
        """Initialize exporter.

        Args:
            output_dir: Directory to write output files
            formats: List of export formats (stl, step, scad). Defaults to stl and step.
        """
        self.output_dir = Path(output_dir)
        self.formats = formats or ["stl", "step"]
        for fmt in self.formats:
            if fmt not in SUPPORTED_FORMATS:
                raise ValueError(f"Unsupported format: {fmt}")

        self.parts_dir = self.output_dir / "parts"
        self.parts_dir.mkdir(parents=True, exist_ok=True)

    def export(
        self,
        parts: dict[str, Solid],
        metadata: Optional[Dict[str, PartMetadata]] = None,
    ) -> Dict[str, Path]:
        """Export individual parts and a manifest.

        Args:
            parts: Dict of part_id -> Solid description tree
            metadata: Optional metadata for the manifest

        Returns:
            Dict mapping output file name to file paths
        """
        outputs: dict[str, Path] = {}

        for part_id, part in parts.items():
            for fmt in self.formats:
                path = self._export_part(part_id, part, fmt)
                outputs[f"{part_id}.{fmt}"] = path

        manifest_path = self._export_manifest(parts, metadata or {})
        outputs["parts_manifest.json"] = manifest_path

        return outputs

    def _export_part(self, part_id: str, part: Solid, fmt: str) -> Path:
        """Export a single part."""
        path = self.parts_dir / f"{part_id}.{fmt}"

        if fmt == "scad":
            path.write_text(to_scad(part))
        else:
            import cadquery as cq
            from .kernel import to_cadquery

            export_type = "STL" if fmt == "stl" else "STEP"
            cq.exporters.export(to_cadquery(part), str(path), exportType=export_type)

        logger.info(f"Exported {part_id} to {path}")
        return path

    def _export_manifest(
        self,
        parts: dict[str, Solid],
        metadata: dict[str, PartMetadata],
    ) -> Path:
        """Export manifest with file names, units and part metadata."""
        path = self.output_dir / "parts_manifest.json"

        manifest = {
            "units": "mm",
            "parts": {
                part_id: {
                    "files": {fmt: f"parts/{part_id}.{fmt}" for fmt in self.formats},
                    **(metadata[part_id].to_dict() if part_id in metadata else {}),
                }
                for part_id in parts
            },
        }

        with open(path, "w") as f:
            json.dump(manifest, f, indent=2)

        return path
