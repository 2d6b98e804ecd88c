"""Serialization of description trees: OpenSCAD text, cadquery solids, files.

The cadquery bridge lives in ``botparts.export.kernel`` and is imported on
demand so that pure tree work does not load the geometry kernel.
"""

from .exporter import Exporter
from .scad import to_scad

__all__ = ["Exporter", "to_scad"]
