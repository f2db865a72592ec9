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

from dataclasses import dataclass
from enum import auto
from typing import Union

from trendline.geometry.types import Point
from trendline.utils.enum import StrEnum


class PathCommand(StrEnum):
    MOVE = "M"
    LINE = "L"
    SMOOTH = "S"


class CornerKind(StrEnum):
    TERMINAL = auto()  # last point, nothing to round toward
    STRAIGHT = auto()  # collinear with both neighbours
    CLAMPED = auto()  # radius reduced to half the shorter adjacent segment
    FULL = auto()


# Instructions


@dataclass(frozen=True, slots=True)
class MoveTo:
    point: Point

    @property
    def command(self) -> PathCommand:
        return PathCommand.MOVE

    @property
    def end(self) -> Point:
        return self.point

    def points(self) -> tuple[Point, ...]:
        return (self.point,)


@dataclass(frozen=True, slots=True)
class LineTo:
    point: Point

    @property
    def command(self) -> PathCommand:
        return PathCommand.LINE

    @property
    def end(self) -> Point:
        return self.point

    def points(self) -> tuple[Point, ...]:
        return (self.point,)


@dataclass(frozen=True, slots=True)
class SmoothTo:
    """
    Smooth curve to ``point`` using ``control`` as its (second) control point.

    Always emitted right after a LineTo, so the curve starts tangent to that
    line and bends around ``control``, the original sharp vertex.
    """

    control: Point
    point: Point

    @property
    def command(self) -> PathCommand:
        return PathCommand.SMOOTH

    @property
    def end(self) -> Point:
        return self.point

    def points(self) -> tuple[Point, ...]:
        return (self.control, self.point)


Instruction = Union[MoveTo, LineTo, SmoothTo]


# Corner decisions


@dataclass(frozen=True, slots=True)
class Corner:
    """
    How the path treats one interior point.

    ``before``/``after`` are the radius-offset points on the incoming and
    outgoing segments; they are only set for CLAMPED and FULL corners.
    """

    kind: CornerKind
    vertex: Point
    radius: float = 0.0
    before: Point | None = None
    after: Point | None = None

    @property
    def is_rounded(self) -> bool:
        return self.kind in (CornerKind.CLAMPED, CornerKind.FULL)

    def instructions(self) -> tuple[Instruction, ...]:
        if self.is_rounded and self.before is not None and self.after is not None:
            return (LineTo(self.before), SmoothTo(control=self.vertex, point=self.after))
        return (LineTo(self.vertex),)
