"""
Tests for chaosgame.cli (headless export path only)
"""
import xml.etree.ElementTree as ET

import pytest

from chaosgame.cli import build_argparser, main

SVG_NS = "{http://www.w3.org/2000/svg}"


class TestExport:
    def test_export(self, tmp_path):
        out = tmp_path / "out.svg"
        rc = main(["export", str(out), "--start", "250", "300", "--iterations", "50", "--seed", "1"])
        assert rc == 0
        root = ET.parse(out).getroot()
        # background + 50 pixels
        assert len(root.findall(f"{SVG_NS}rect")) == 51

    def test_seed_is_repeatable(self, tmp_path):
        a, b = tmp_path / "a.svg", tmp_path / "b.svg"
        args = ["--start", "250", "300", "--iterations", "100", "--seed", "42"]
        assert main(["export", str(a), *args]) == 0
        assert main(["export", str(b), *args]) == 0
        assert a.read_text() == b.read_text()

    def test_position_and_mode(self, tmp_path):
        out = tmp_path / "out.svg"
        rc = main([
            "export", str(out), "--start", "250", "300", "--iterations", "50",
            "--position", "10", "--mode", "highlighted-latest",
        ])
        assert rc == 0
        root = ET.parse(out).getroot()
        assert len(root.findall(f"{SVG_NS}circle")) == 10 + 2
        assert len(root.findall(f"{SVG_NS}line")) == 1

    def test_start_outside(self, tmp_path, capsys):
        out = tmp_path / "out.svg"
        rc = main(["export", str(out), "--start", "5", "5"])
        assert rc == 2
        assert not out.exists()
        assert "outside the triangle" in capsys.readouterr().err

    def test_position_out_of_range(self, tmp_path):
        out = tmp_path / "out.svg"
        rc = main(["export", str(out), "--start", "250", "300", "--iterations", "10", "--position", "11"])
        assert rc == 2

    def test_custom_size(self, tmp_path):
        out = tmp_path / "out.svg"
        rc = main(["export", str(out), "--start", "400", "500", "--iterations", "5", "--size", "800", "600"])
        assert rc == 0
        assert ET.parse(out).getroot().get("viewBox") == "0 0 800 600"


class TestArgParser:
    def test_iterations_limit(self):
        with pytest.raises(SystemExit):
            build_argparser().parse_args(["gui", "--iterations", "50001"])

    def test_iterations_positive(self):
        with pytest.raises(SystemExit):
            build_argparser().parse_args(["export", "x.svg", "--start", "1", "1", "--iterations", "0"])

    def test_gui_defaults(self):
        args = build_argparser().parse_args(["gui"])
        assert args.iterations == 50_000
        assert args.interval == 10
        assert args.mode == "highlighted-latest"

    def test_interval_limit(self):
        with pytest.raises(SystemExit):
            build_argparser().parse_args(["gui", "--interval", "5000"])

    def test_interval_at_limit(self):
        args = build_argparser().parse_args(["gui", "--interval", "1000"])
        assert args.interval == 1000
