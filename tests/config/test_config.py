from pathlib import Path

import pytest
from trendline.chart import ChartOptions
from trendline.config import ChartConfigLoader, ConfigLoadError, merge_options, options_from_mapping


def write(tmp_path: Path, name: str, text: str) -> Path:
    p = tmp_path / name
    p.write_text(text, encoding="utf-8")
    return p


class TestChartConfigLoader:
    def test_yaml(self, tmp_path: Path):
        path = write(
            tmp_path,
            "trendline.yaml",
            """
chart:
  smooth: true
  radius: 6
  width: 200
  gradient: ["#222", "#0af"]
  rangeHighlight: [1, 3]
  auto-draw: true
""",
        )
        options = ChartConfigLoader().load(path)

        assert options.smooth is True
        assert options.radius == 6
        assert options.width == 200
        assert options.gradient == ("#222", "#0af")
        assert options.range_highlight == (1, 3)
        assert options.auto_draw is True
        # untouched defaults
        assert options.padding == 8

    def test_json(self, tmp_path: Path):
        path = write(tmp_path, "trendline.json", '{"padding": 2, "stroke_width": 1.5}')
        options = ChartConfigLoader().load(path)
        assert options.padding == 2
        assert options.stroke_width == 1.5

    def test_empty_file_gives_defaults(self, tmp_path: Path):
        path = write(tmp_path, "trendline.yml", "")
        assert ChartConfigLoader().load(path) == ChartOptions()

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(ConfigLoadError) as exc:
            ChartConfigLoader().load(tmp_path / "nope.yaml")
        assert exc.value.code == "config_not_found"

    def test_root_must_be_mapping(self, tmp_path: Path):
        path = write(tmp_path, "trendline.yaml", "- 1\n- 2\n")
        with pytest.raises(ConfigLoadError) as exc:
            ChartConfigLoader().load(path)
        assert exc.value.code == "invalid_config"

    def test_invalid_yaml(self, tmp_path: Path):
        path = write(tmp_path, "trendline.yaml", "smooth: [unclosed\n")
        with pytest.raises(ConfigLoadError) as exc:
            ChartConfigLoader().load(path)
        assert exc.value.code == "invalid_yaml"

    def test_invalid_json(self, tmp_path: Path):
        path = write(tmp_path, "trendline.json", "{nope")
        with pytest.raises(ConfigLoadError) as exc:
            ChartConfigLoader().load(path)
        assert exc.value.code == "invalid_json"


class TestOptionsFromMapping:
    def test_unknown_option(self):
        with pytest.raises(ConfigLoadError) as exc:
            options_from_mapping({"colour": "red"})
        assert exc.value.code == "unknown_option"
        assert "radius" in exc.value.details["supported"]

    @pytest.mark.parametrize(
        "data",
        [
            {"smooth": "yes"},
            {"radius": "10"},
            {"radius": True},
            {"auto_draw_duration": 1.5},
            {"gradient": [1, 2]},
            {"range_highlight": [1, 2, 3]},
            {"stroke": ["red"]},
        ],
    )
    def test_type_errors(self, data):
        with pytest.raises(ConfigLoadError) as exc:
            options_from_mapping(data)
        assert exc.value.code == "invalid_option"

    def test_single_gradient_color(self):
        assert options_from_mapping({"gradient": "red"}).gradient == ("red",)

    def test_null_size(self):
        assert options_from_mapping({"width": None}).width is None

    def test_numeric_font_weight(self):
        assert options_from_mapping({"hoverTextWeight": 700}).hover_text_weight == "700"


class TestMergeOptions:
    def test_overrides_win(self):
        base = ChartOptions(radius=4, smooth=False)
        merged = merge_options(base, radius=12, smooth=True)
        assert (merged.radius, merged.smooth) == (12, True)

    def test_none_keeps_base(self):
        base = ChartOptions(radius=4)
        assert merge_options(base, radius=None) == base

    def test_unknown_override(self):
        with pytest.raises(ConfigLoadError):
            merge_options(ChartOptions(), colour="red")


class TestValueKinds:
    def test_unknown_kind_is_a_config_error(self):
        from trendline.config import _check

        with pytest.raises(ConfigLoadError) as exc:
            _check("radius", "complex", 1)
        assert exc.value.code == "invalid_option"
