"""Tests for the command line interface."""

import json
from pathlib import Path

import pytest
import yaml
from typer.testing import CliRunner

from botparts.cli import app

EXAMPLE = Path(__file__).parent.parent / "examples" / "robot_parts.yaml"

runner = CliRunner()


@pytest.fixture
def bad_wheel_file(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text(yaml.safe_dump({
        "parts": [
            {"kind": "wheel", "name": "tiny", "oring_id": 8, "oring_od": 12, "thickness": 6},
        ]
    }))
    return path


class TestListParts:
    def test_lists_kinds(self):
        result = runner.invoke(app, ["list-parts"])
        assert result.exit_code == 0
        assert "wheel" in result.output
        assert "board_carrier" in result.output


class TestValidate:
    def test_example_valid(self):
        result = runner.invoke(app, ["validate", str(EXAMPLE)])
        assert result.exit_code == 0, result.output
        assert "Part file valid" in result.output
        assert "base_wheel_diameter" in result.output

    def test_missing_file(self, tmp_path):
        result = runner.invoke(app, ["validate", str(tmp_path / "missing.yaml")])
        assert result.exit_code == 1

    def test_invalid_wheel_reported(self, bad_wheel_file):
        result = runner.invoke(app, ["validate", str(bad_wheel_file)])
        assert result.exit_code == 1
        assert "InvalidWheelSpec" in result.output

    def test_schema_error(self, tmp_path):
        path = tmp_path / "schema.yaml"
        path.write_text(yaml.safe_dump({"parts": [{"kind": "gear", "name": "g"}]}))
        result = runner.invoke(app, ["validate", str(path)])
        assert result.exit_code == 1


class TestBuild:
    def test_build_scad(self, tmp_path):
        out = tmp_path / "out"
        result = runner.invoke(app, ["build", str(EXAMPLE), "-o", str(out), "--formats", "scad"])
        assert result.exit_code == 0, result.output
        assert (out / "parts" / "wheel_tt_left.scad").exists()
        assert (out / "parts" / "driver_carrier.scad").exists()
        manifest = json.loads((out / "parts_manifest.json").read_text())
        assert len(manifest["parts"]) == 5

    def test_build_rejects_unknown_format(self, tmp_path):
        result = runner.invoke(app, ["build", str(EXAMPLE), "-o", str(tmp_path), "--formats", "obj"])
        assert result.exit_code == 1

    def test_build_stops_on_invalid_part(self, tmp_path, bad_wheel_file):
        result = runner.invoke(app, ["build", str(bad_wheel_file), "-o", str(tmp_path), "--formats", "scad"])
        assert result.exit_code == 1
        assert not (tmp_path / "parts" / "tiny.scad").exists()

    def test_build_reports_kernel_error(self, tmp_path, monkeypatch):
        from botparts.errors import KernelError
        from botparts.export.exporter import Exporter

        def fail(self, parts, metadata):
            raise KernelError("hull members must be upright cylinders")

        monkeypatch.setattr(Exporter, "export", fail)
        result = runner.invoke(app, ["build", str(EXAMPLE), "-o", str(tmp_path), "--formats", "scad"])
        assert result.exit_code == 1
        assert "Export failed" in result.output
        assert result.exception is None or isinstance(result.exception, SystemExit)
