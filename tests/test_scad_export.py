"""Tests for OpenSCAD source generation and file export."""

import json

import pytest

from botparts.export import Exporter, to_scad
from botparts.generators.board_carrier import BoardCarrierGenerator
from botparts.generators.primitives import right_triangle_prism, rounded_rect_prism, torus
from botparts.generators.wheel import WheelGenerator
from botparts.models.solid import Box, Cylinder, Text
from botparts.models.spec import BoardCarrierSpec, WheelSpec


class TestToScad:
    """Tests for the OpenSCAD emitter."""

    def test_header(self):
        assert to_scad(Cylinder(height=2, radius=1), segments=32).startswith("$fn = 32;")

    def test_cylinder(self):
        assert "cylinder(h=2, r1=1, r2=1);" in to_scad(Cylinder(height=2, radius=1))

    def test_cone(self):
        assert "cylinder(h=6, r1=5.5, r2=2.75);" in to_scad(
            Cylinder(height=6, radius=5.5, top_radius=2.75)
        )

    def test_centered_box_stands_on_floor(self):
        assert "translate([0, 0, 1.5]) cube([2, 4, 3], center=true);" in to_scad(
            Box(2, 4, 3, center=True)
        )

    def test_difference_block(self):
        source = to_scad(Box(4, 4, 4).cut(Cylinder(height=4.2, radius=1).translate(2, 2, -0.1)))
        lines = [line.strip() for line in source.splitlines() if line.strip()]
        assert lines[1:] == [
            "difference() {",
            "cube([4, 4, 4]);",
            "translate([2, 2, -0.1]) {",
            "cylinder(h=4.2, r1=1, r2=1);",
            "}",
            "}",
        ]

    def test_hull(self):
        source = to_scad(rounded_rect_prism(20, 10, 2, 3))
        assert "hull() {" in source
        assert source.count("cylinder(") == 4

    def test_torus(self):
        assert "rotate_extrude() translate([10, 0, 0]) circle(r=1.5);" in to_scad(torus(1.5, 10))

    def test_polyhedron(self):
        source = to_scad(right_triangle_prism(1, 2, 3))
        assert "faces=[[0, 1, 2], [3, 5, 4]" in source

    def test_text_escaped(self):
        source = to_scad(Text('A"B', 5, 0.6))
        assert 'text("A\\"B", size=5' in source

    def test_wheel_source_is_deterministic(self):
        spec = WheelSpec(oring_id=20, oring_od=26, thickness=6)
        assert to_scad(WheelGenerator(spec).generate()) == to_scad(WheelGenerator(spec).generate())


class TestExporter:
    """Tests for file export without the geometry kernel."""

    @pytest.fixture
    def parts(self):
        wheel = WheelGenerator(WheelSpec(name="w1", oring_id=20, oring_od=26, thickness=6))
        carrier = BoardCarrierGenerator(
            BoardCarrierSpec(name="c1", length=70, width=60, screw_x=58, screw_y=49)
        )
        return {
            "w1": (wheel.generate(), wheel.get_metadata()),
            "c1": (carrier.generate(), carrier.get_metadata()),
        }

    def test_scad_files_and_manifest(self, tmp_path, parts):
        exporter = Exporter(tmp_path, ["scad"])
        outputs = exporter.export(
            {k: v[0] for k, v in parts.items()},
            {k: v[1] for k, v in parts.items()},
        )
        assert (tmp_path / "parts" / "w1.scad").exists()
        assert (tmp_path / "parts" / "c1.scad").exists()
        assert "parts_manifest.json" in outputs

        manifest = json.loads((tmp_path / "parts_manifest.json").read_text())
        assert manifest["units"] == "mm"
        assert manifest["parts"]["w1"]["kind"] == "wheel"
        assert manifest["parts"]["c1"]["files"] == {"scad": "parts/c1.scad"}

    def test_unknown_format(self, tmp_path):
        with pytest.raises(ValueError, match="Unsupported format"):
            Exporter(tmp_path, ["obj"])
