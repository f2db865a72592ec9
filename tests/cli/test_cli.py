"""Tests for trendline CLI commands."""

import json
from pathlib import Path
from unittest.mock import patch

import pytest
from trendline.cli.main import main


@pytest.fixture
def data_file(tmp_path: Path) -> Path:
    p = tmp_path / "data.json"
    p.write_text(json.dumps([1, 2, 1, 2]), encoding="utf-8")
    return p


class TestRenderCommand:
    """Tests for `trendline render`."""

    def test_svg_to_stdout(self, data_file: Path, capsys):
        exit_code = main(["render", str(data_file), "--id", "t1"])
        out = capsys.readouterr().out

        assert exit_code == 0
        assert out.startswith("<svg ")
        assert 'id="trendline-t1"' in out

    def test_path_format(self, data_file: Path, capsys):
        exit_code = main(["render", str(data_file), "--format", "path", "--width", "3", "--height", "10", "--padding", "0"])

        assert exit_code == 0
        assert capsys.readouterr().out == "M 0,10\nL 1,0\nL 2,10\nL 3,0\n"

    def test_json_format(self, data_file: Path, capsys):
        exit_code = main(["render", str(data_file), "--format", "json", "--smooth", "--radius", "4"])
        data = json.loads(capsys.readouterr().out)

        assert exit_code == 0
        assert data["values"] == [1, 2, 1, 2]
        assert "\nS " in data["path"]
        assert data["length"] > 0

    def test_ascii_format(self, data_file: Path, capsys):
        exit_code = main(["render", str(data_file), "--format", "ascii"])
        out = capsys.readouterr().out

        assert exit_code == 0
        assert "●" in out
        assert "Trend:" in out

    def test_output_file(self, data_file: Path, tmp_path: Path):
        out = tmp_path / "chart.svg"
        exit_code = main(["render", str(data_file), "-o", str(out), "--gradient", "red", "blue"])

        assert exit_code == 0
        assert "linearGradient" in out.read_text(encoding="utf-8")

    def test_png_requires_output(self, data_file: Path, capsys):
        exit_code = main(["render", str(data_file), "--format", "png"])
        assert exit_code == 2
        assert "--output is required" in capsys.readouterr().err

    def test_png_delegates_to_matplotlib_renderer(self, data_file: Path, tmp_path: Path):
        out = tmp_path / "chart.png"
        with patch("trendline.render.mpl.render_image") as render_image:
            exit_code = main(["render", str(data_file), "--format", "png", "-o", str(out)])

        assert exit_code == 0
        render_image.assert_called_once()
        assert render_image.call_args.args[1] == str(out)

    def test_config_file_with_cli_override(self, data_file: Path, tmp_path: Path, capsys):
        config = tmp_path / "trendline.yaml"
        config.write_text("smooth: true\nradius: 0\nwidth: 3\nheight: 10\npadding: 0\n", encoding="utf-8")

        exit_code = main(["render", str(data_file), "--config", str(config), "--format", "path", "--radius", "100"])
        out = capsys.readouterr().out

        assert exit_code == 0
        assert out.splitlines()[1] == "L 0.5,5"

    def test_single_value_is_nothing_to_draw(self, tmp_path: Path, capsys):
        p = tmp_path / "one.json"
        p.write_text("[4]", encoding="utf-8")

        assert main(["render", str(p)]) == 1
        assert "Nothing to draw" in capsys.readouterr().err

    def test_negative_radius_is_an_error(self, data_file: Path, capsys):
        exit_code = main(["render", str(data_file), "--smooth", "--radius", "-3"])
        assert exit_code == 2
        assert "radius" in capsys.readouterr().err

    def test_highlight_out_of_range(self, data_file: Path, capsys):
        exit_code = main(["render", str(data_file), "--highlight", "0", "9"])
        assert exit_code == 2
        assert "trendline: error:" in capsys.readouterr().err

    def test_missing_data_file(self, tmp_path: Path, capsys):
        exit_code = main(["render", str(tmp_path / "missing.json")])
        assert exit_code == 2
        assert "does not exist" in capsys.readouterr().err


class TestPathCommand:
    """Tests for `trendline path`."""

    def test_prints_path_data(self, data_file: Path, capsys):
        exit_code = main(["path", str(data_file), "--width", "3", "--height", "10", "--padding", "0", "--smooth"])
        lines = capsys.readouterr().out.splitlines()

        assert exit_code == 0
        assert lines == ["M 0,10", "L 0.5,5", "S 1,0 1.5,5", "L 1.5,5", "S 2,10 2.5,5", "L 3,0"]

    def test_precision(self, tmp_path: Path, capsys):
        p = tmp_path / "data.yaml"
        p.write_text("values: [1, 2, 4]\n", encoding="utf-8")

        main(["path", str(p), "--width", "1", "--height", "1", "--padding", "0", "--precision", "2"])

        assert capsys.readouterr().out.splitlines()[1] == "L 0.5,0.67"

    def test_records_from_stdin(self, monkeypatch, capsys):
        import io

        monkeypatch.setattr("sys.stdin", io.StringIO('[{"value": 1}, {"value": 3}]'))
        exit_code = main(["path", "-", "--width", "10", "--height", "10", "--padding", "0"])

        assert exit_code == 0
        assert capsys.readouterr().out == "M 0,10\nL 10,0\n"


class TestChartIdFlag:
    """Tests for `trendline render --id`."""

    def test_unsafe_id_is_an_error(self, data_file: Path, capsys):
        exit_code = main(["render", str(data_file), "--id", 'a"b'])
        captured = capsys.readouterr()

        assert exit_code == 2
        assert captured.out == ""
        assert "Chart id" in captured.err
