# SPDX-License-Identifier: AGPL-3.0-only
#
# Copyright (c) 2026 Trendline Contributors
#
# This file is part of Trendline.
#
# Trendline is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, version 3 only.
#
# Trendline is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.
# See the GNU Affero General Public License for more details.

import re
from collections.abc import Iterable, Sequence

from trendline.errors import PathSyntaxError
from trendline.geometry.primitives import distance_between
from trendline.geometry.types import Point
from trendline.path.types import Instruction, LineTo, MoveTo, PathCommand, SmoothTo

_LINE_RE = re.compile(r"^\s*([A-Za-z])\s*(.*?)\s*$")

# Flattening stops once the control polygon is this close to the chord.
_CURVE_TOLERANCE = 1e-6
_CURVE_MAX_DEPTH = 18


def to_path_data(instructions: Iterable[Instruction], *, precision: int | None = None) -> str:
    """
    Serialize instructions to path data, one command per line.

        M 8,67
        L 54.4,8
        S 100.8,67 120,40

    Without ``precision`` numbers are written exactly, so ``parse_path_data``
    recovers the same floats.
    """
    lines = []
    for ins in instructions:
        coords = " ".join(f"{_fmt(p.x, precision)},{_fmt(p.y, precision)}" for p in ins.points())
        lines.append(f"{ins.command.value} {coords}")
    return "\n".join(lines)


def parse_path_data(text: str) -> tuple[Instruction, ...]:
    """
    Parse path data written by ``to_path_data``.

    Accepts blank lines and extra whitespace; anything else that is not an
    M/L/S line with the right number of ``x,y`` pairs raises PathSyntaxError.
    """
    out: list[Instruction] = []

    for lineno, raw in enumerate(text.splitlines(), start=1):
        if not raw.strip():
            continue

        m = _LINE_RE.match(raw)
        if m is None:
            raise PathSyntaxError(f"Cannot parse: {raw!r}", line=lineno)

        letter, rest = m.group(1), m.group(2)
        try:
            command = PathCommand(letter.upper())
        except ValueError as e:
            raise PathSyntaxError(f"Unsupported command '{letter}'.", code="unsupported_command", line=lineno) from e

        points = _parse_pairs(rest, lineno)

        if not out and command is not PathCommand.MOVE:
            raise PathSyntaxError("Path must start with M.", code="missing_move", line=lineno)

        if command is PathCommand.SMOOTH:
            _expect(points, 2, command, lineno)
            out.append(SmoothTo(control=points[0], point=points[1]))
        else:
            _expect(points, 1, command, lineno)
            out.append(MoveTo(points[0]) if command is PathCommand.MOVE else LineTo(points[0]))

    return tuple(out)


def path_points(instructions: Iterable[Instruction]) -> tuple[Point, ...]:
    """End points of each instruction, in drawing order."""
    return tuple(ins.end for ins in instructions)


def path_length(instructions: Sequence[Instruction]) -> float:
    """
    Total drawn length of the path.

    An S segment is the cubic (current, reflected-or-current, control, end),
    following the usual smooth-curveto rules; its length is measured by
    subdividing until the control polygon matches the chord.
    """
    total = 0.0
    current: Point | None = None
    last_control: Point | None = None

    for ins in instructions:
        if isinstance(ins, MoveTo):
            current = ins.point
            last_control = None
            continue

        if current is None:
            raise PathSyntaxError("Path must start with M.", code="missing_move")

        if isinstance(ins, LineTo):
            total += distance_between(current, ins.point)
            last_control = None
        else:
            if last_control is None:
                first = current
            else:
                first = Point(2 * current.x - last_control.x, 2 * current.y - last_control.y)
            total += _cubic_length(current, first, ins.control, ins.point, 0)
            last_control = ins.control

        current = ins.end

    return total


def _cubic_length(p0: Point, p1: Point, p2: Point, p3: Point, depth: int) -> float:
    chord = distance_between(p0, p3)
    polygon = distance_between(p0, p1) + distance_between(p1, p2) + distance_between(p2, p3)

    if polygon - chord <= _CURVE_TOLERANCE or depth >= _CURVE_MAX_DEPTH:
        return (chord + polygon) / 2

    # de Casteljau split at t=0.5
    p01 = _mid(p0, p1)
    p12 = _mid(p1, p2)
    p23 = _mid(p2, p3)
    p012 = _mid(p01, p12)
    p123 = _mid(p12, p23)
    split = _mid(p012, p123)

    return _cubic_length(p0, p01, p012, split, depth + 1) + _cubic_length(split, p123, p23, p3, depth + 1)


def _mid(a: Point, b: Point) -> Point:
    return Point((a.x + b.x) / 2, (a.y + b.y) / 2)


def _fmt(value: float, precision: int | None) -> str:
    if precision is not None:
        value = round(value, precision)
    if value == 0:
        return "0"
    if float(value).is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(float(value))


def _parse_pairs(text: str, lineno: int) -> list[Point]:
    points: list[Point] = []
    for token in text.split():
        parts = token.split(",")
        if len(parts) != 2:
            raise PathSyntaxError(f"Expected 'x,y', got {token!r}.", code="bad_coordinate", line=lineno)
        try:
            points.append(Point(float(parts[0]), float(parts[1])))
        except ValueError as e:
            raise PathSyntaxError(f"Invalid number in {token!r}.", code="bad_coordinate", line=lineno) from e
    return points


def _expect(points: list[Point], count: int, command: PathCommand, lineno: int) -> None:
    if len(points) != count:
        raise PathSyntaxError(
            f"'{command.value}' takes {count} coordinate pair(s), got {len(points)}.",
            code="bad_arity",
            line=lineno,
        )
