"""Tests for converting description trees into cadquery solids."""

import math

import cadquery as cq
import pytest

from botparts.errors import KernelError
from botparts.export.kernel import to_cadquery, to_shape
from botparts.generators.primitives import (
    hex_prism,
    right_triangle_prism,
    rounded_rect_prism,
    wedge,
)
from botparts.generators.shaft_profile import FlatWidth, d_shaft, flattened_shaft
from botparts.generators.wheel import WheelGenerator
from botparts.models.enums import Orientation
from botparts.models.solid import Box, Cylinder, Hull
from botparts.models.spec import WheelSpec


def segment_area(radius: float, depth: float) -> float:
    """Area of a circular segment of the given depth."""
    d = radius - depth
    return radius ** 2 * math.acos(d / radius) - d * math.sqrt(radius ** 2 - d ** 2)


class TestPrimitiveShapes:
    """Tests for primitive conversion."""

    def test_cylinder_volume(self):
        shape = to_shape(Cylinder(height=10, radius=2))
        assert shape.Volume() == pytest.approx(math.pi * 4 * 10, rel=1e-3)

    def test_cone_volume(self):
        shape = to_shape(Cylinder(height=6, radius=3, top_radius=1))
        expected = math.pi * 6 / 3 * (9 + 3 + 1)
        assert shape.Volume() == pytest.approx(expected, rel=1e-3)

    def test_centered_box_bounds(self):
        bb = to_shape(Box(4, 6, 2, center=True)).BoundingBox()
        assert (bb.xmin, bb.ymin, bb.zmin) == pytest.approx((-2, -3, 0))
        assert (bb.xmax, bb.ymax, bb.zmax) == pytest.approx((2, 3, 2))

    @pytest.mark.parametrize("factory", [wedge, right_triangle_prism])
    def test_prism_volume(self, factory):
        shape = to_shape(factory(4, 5, 6))
        assert shape.isValid()
        assert abs(shape.Volume()) == pytest.approx(60, rel=1e-6)

    def test_rounded_rect_volume(self):
        shape = to_shape(rounded_rect_prism(40, 20, 3, 2))
        expected = (40 * 20 - (4 - math.pi) * 9) * 2
        assert shape.Volume() == pytest.approx(expected, rel=1e-3)

    def test_hex_prism_area(self):
        shape = to_shape(hex_prism(10, 1))
        # Regular hexagon area from across-flats distance
        expected = math.sqrt(3) / 2 * 10 ** 2
        assert shape.Volume() == pytest.approx(expected, rel=1e-3)

    def test_unsupported_hull(self):
        with pytest.raises(KernelError):
            to_shape(Hull((Box(1, 1, 1), Box(2, 2, 2))))


class TestShaftShapes:
    """Tests for shaft geometry volumes."""

    def test_d_shaft_volume(self):
        shape = to_shape(d_shaft(4.0, FlatWidth(3.0), 10.0))
        expected = (math.pi * 4 - segment_area(2.0, 0.5)) * 10
        assert shape.Volume() == pytest.approx(expected, rel=1e-3)

    def test_flattened_shaft_volume(self):
        shape = to_shape(flattened_shaft(5.4, 3.7, 8.0))
        expected = (math.pi * 2.7 ** 2 - 2 * segment_area(2.7, 0.85)) * 8
        assert shape.Volume() == pytest.approx(expected, rel=1e-3)

    def test_wide_flats_face_y(self):
        bb = to_shape(flattened_shaft(5.4, 3.7, 8.0, Orientation.WIDE)).BoundingBox()
        assert bb.ylen == pytest.approx(3.7, abs=1e-3)
        assert bb.xlen == pytest.approx(5.4, abs=1e-3)


class TestWheelShape:
    """Tests for the rendered wheel."""

    @pytest.fixture
    def wheel(self):
        spec = WheelSpec(oring_id=20, oring_od=26, thickness=6, shaft={"kind": "d_shaft"})
        return to_cadquery(WheelGenerator(spec).generate())

    def test_returns_workplane(self, wheel):
        assert isinstance(wheel, cq.Workplane)
        assert isinstance(wheel.val(), cq.Shape)

    def test_valid_solid(self, wheel):
        solid = wheel.val()
        assert solid.isValid()
        assert solid.Volume() > 0

    def test_outer_diameter_and_height(self, wheel):
        bb = wheel.val().BoundingBox()
        assert bb.ylen == pytest.approx(24, abs=0.05)
        assert bb.zlen == pytest.approx(9, abs=0.05)

    def test_groove_removes_material(self, wheel):
        bb = wheel.val().BoundingBox()
        solid_disc = math.pi * 12 ** 2 * 6
        assert wheel.val().Volume() < solid_disc
        assert bb.zmin == pytest.approx(0, abs=1e-6)
