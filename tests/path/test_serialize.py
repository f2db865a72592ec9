import math

import pytest
from trendline.errors import PathSyntaxError
from trendline.geometry.normalize import normalize_dataset
from trendline.geometry.types import Domain, Point
from trendline.path.compiler import build_linear_path, build_smooth_path
from trendline.path.serialize import parse_path_data, path_length, path_points, to_path_data
from trendline.path.types import LineTo, MoveTo, SmoothTo

ZIGZAG = (Point(0, 10), Point(1, 0), Point(2, 10), Point(3, 0))


class TestToPathData:
    def test_linear(self):
        assert to_path_data(build_linear_path(ZIGZAG)) == "M 0,10\nL 1,0\nL 2,10\nL 3,0"

    def test_smooth(self):
        text = to_path_data(build_smooth_path(ZIGZAG, radius=10))
        assert text.splitlines() == [
            "M 0,10",
            "L 0.5,5",
            "S 1,0 1.5,5",
            "L 1.5,5",
            "S 2,10 2.5,5",
            "L 3,0",
        ]

    def test_precision(self):
        text = to_path_data([MoveTo(Point(1 / 3, 2 / 3)), LineTo(Point(1.0, -0.25))], precision=2)
        assert text == "M 0.33,0.67\nL 1,-0.25"

    def test_empty(self):
        assert to_path_data(()) == ""


class TestParsePathData:
    def test_parses_all_commands(self):
        parsed = parse_path_data("M 0,10\nL 0.5,5\nS 1,0 1.5,5\n")
        assert parsed == (
            MoveTo(Point(0, 10)),
            LineTo(Point(0.5, 5)),
            SmoothTo(control=Point(1, 0), point=Point(1.5, 5)),
        )

    def test_tolerates_blank_lines_and_spacing(self):
        parsed = parse_path_data("\n  M   1,2  \n\n l 3,4\n")
        assert parsed == (MoveTo(Point(1, 2)), LineTo(Point(3, 4)))

    def test_round_trip_recovers_points(self):
        values = [3.14159, 2.71828, 1.41421, 1.73205, 0.57721, 4.6692]
        points = normalize_dataset(values, Domain(8, 292, 67, 8))

        for instructions in (build_linear_path(points), build_smooth_path(points, radius=10)):
            parsed = parse_path_data(to_path_data(instructions))
            assert parsed == instructions
            assert path_points(parsed) == path_points(instructions)

        linear = parse_path_data(to_path_data(build_linear_path(points)))
        assert [(p.x, p.y) for p in path_points(linear)] == [(p.x, p.y) for p in points]

    @pytest.mark.parametrize(
        ("text", "code", "line"),
        [
            ("L 1,2", "missing_move", 1),
            ("M 1,2\nC 1,2 3,4 5,6", "unsupported_command", 2),
            ("M 1;2", "bad_coordinate", 1),
            ("M 1,x", "bad_coordinate", 1),
            ("M 1,2\nS 3,4", "bad_arity", 2),
            ("M 1,2 3,4", "bad_arity", 1),
            ("M 1,2\n42", "path_syntax", 2),
        ],
    )
    def test_errors(self, text, code, line):
        with pytest.raises(PathSyntaxError) as exc:
            parse_path_data(text)
        assert exc.value.code == code
        assert exc.value.line == line
        assert str(exc.value).startswith(f"line {line}:")


class TestPathLength:
    def test_polyline(self):
        assert path_length(build_linear_path(ZIGZAG)) == pytest.approx(3 * math.sqrt(101))

    def test_empty(self):
        assert path_length(()) == 0.0

    def test_rounded_corner_is_shorter_than_sharp_corner(self):
        points = (Point(0, 0), Point(0, 100), Point(100, 100))
        sharp = path_length(build_linear_path(points))
        rounded = path_length(build_smooth_path(points, radius=10))

        # 90 + 90 straight, the curve sits between its chord and its two legs
        assert 180 + math.hypot(10, 10) < rounded < sharp

    def test_degenerate_curve_has_zero_length(self):
        path = (MoveTo(Point(1, 1)), LineTo(Point(1, 1)), SmoothTo(control=Point(1, 1), point=Point(1, 1)))
        assert path_length(path) == 0.0

    def test_smooth_after_smooth_reflects_control(self):
        path = (
            MoveTo(Point(0, 0)),
            SmoothTo(control=Point(0, 10), point=Point(10, 10)),
            SmoothTo(control=Point(20, 10), point=Point(20, 0)),
        )
        assert path_length(path) > 2 * math.hypot(10, 10)

    def test_requires_leading_move(self):
        with pytest.raises(PathSyntaxError):
            path_length((LineTo(Point(1, 1)),))
