"""Tests for the board carrier generator."""

import pytest

from botparts.errors import InvalidGeometry
from botparts.generators.board_carrier import BoardCarrierGenerator
from botparts.generators.params import PartsConfig
from botparts.models.solid import Cylinder, Difference, Hull, Text, Union, find
from botparts.models.spec import BoardCarrierSpec


def make_carrier(config=None, **overrides):
    data = {
        "name": "pi_carrier",
        "length": 70,
        "width": 60,
        "screw_x": 58,
        "screw_y": 49,
        "fastener": "M25",
        "post_count": 4,
        "label": "PI",
    }
    data.update(overrides)
    return BoardCarrierGenerator(BoardCarrierSpec.model_validate(data), config)


def tower_nodes(carrier):
    """Translated tower nodes in the carrier body."""
    body = carrier.base
    return [m for m in body.members[1:] if not isinstance(m.child, Text)]


class TestTowerLayout:
    """Tests for tower placement."""

    def test_four_posts(self):
        gen = make_carrier()
        assert sorted(gen.tower_positions()) == [
            (-29, -24.5), (-29, 24.5), (29, -24.5), (29, 24.5),
        ]

    def test_two_posts_diagonal(self):
        gen = make_carrier(post_count=2)
        assert gen.tower_positions() == [(29, 24.5), (-29, -24.5)]

    def test_four_towers_each_with_one_cavity(self):
        carrier = make_carrier().generate()
        towers = tower_nodes(carrier)
        assert len(towers) == 4
        assert len(carrier.subtracted) == 4
        tower_xy = sorted(t.offset[:2] for t in towers)
        cavity_xy = sorted(c.offset[:2] for c in carrier.subtracted)
        assert tower_xy == cavity_xy

    def test_towers_stand_on_plate(self):
        carrier = make_carrier().generate()
        for tower in tower_nodes(carrier):
            assert tower.offset[2] == pytest.approx(3)

    def test_cavity_penetrates_plate_and_tower(self):
        carrier = make_carrier().generate()
        for cavity in carrier.subtracted:
            inner = cavity.child
            bottom = cavity.offset[2] + inner.offset[2]
            top = bottom + inner.child.height
            assert bottom < 0
            assert top > 3 + 6
            assert inner.child.radius == pytest.approx(1.1)


class TestCarrierBody:
    """Tests for plate and text."""

    def test_plate_is_rounded_rect(self):
        carrier = make_carrier().generate()
        plate = carrier.base.members[0]
        assert isinstance(plate, Hull)

    def test_label_and_size_text(self):
        carrier = make_carrier().generate()
        texts = [t.text for t in find(carrier, Text)]
        assert texts == ["PI", "M2.5"]

    def test_no_label(self):
        carrier = make_carrier(label="").generate()
        assert [t.text for t in find(carrier, Text)] == ["M2.5"]

    def test_conical_towers(self):
        carrier = make_carrier(tower_shape="cone", length=75, width=65).generate()
        for tower in tower_nodes(carrier):
            assert tower.child.is_cone

    def test_through_holes_use_clearance(self):
        carrier = make_carrier(through_holes=True).generate()
        for cavity in carrier.subtracted:
            assert cavity.child.child.radius == pytest.approx(1.45)

    def test_threaded_inserts(self):
        carrier = make_carrier(PartsConfig().with_inserts()).generate()
        for cavity in carrier.subtracted:
            assert cavity.child.child.radius == pytest.approx(1.8)

    def test_blind_holes_leave_plate_closed(self):
        carrier = make_carrier(blind_holes=True, tower_height=12).generate()
        assert isinstance(carrier, Union)
        towers = [m for m in carrier.members[1:] if isinstance(m.child, Difference)]
        assert len(towers) == 4

    def test_nut_traps(self):
        carrier = make_carrier(fastener="M30", through_holes=True, nut_traps=True, thickness=4).generate()
        assert len(carrier.subtracted) == 8

    def test_idempotent(self):
        assert make_carrier().generate() == make_carrier().generate()

    def test_metadata(self):
        meta = make_carrier().get_metadata()
        assert meta.dimensions["post_count"] == 4
        assert meta.notes.startswith("M2.5")


class TestCarrierValidation:
    """Tests for carrier precondition checks."""

    def test_screws_outside_plate(self):
        with pytest.raises(InvalidGeometry, match="screw_x"):
            make_carrier(screw_x=68).generate()

    def test_screws_outside_plate_y(self):
        with pytest.raises(InvalidGeometry, match="screw_y"):
            make_carrier(screw_y=58).generate()

    def test_nut_traps_need_m30_through_holes(self):
        with pytest.raises(InvalidGeometry, match="nut_traps"):
            make_carrier(nut_traps=True, thickness=4).generate()

    def test_blind_and_through_exclusive(self):
        with pytest.raises(InvalidGeometry, match="blind_holes"):
            make_carrier(blind_holes=True, through_holes=True).generate()

    def test_corner_radius_too_large(self):
        with pytest.raises(InvalidGeometry, match="corner_radius"):
            make_carrier(corner_radius=30).generate()
