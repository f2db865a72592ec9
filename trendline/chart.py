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

import logging
import re
import uuid
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from trendline.errors import ChartError
from trendline.geometry.normalize import coerce_values, normalize, normalize_dataset
from trendline.geometry.types import Domain, Point
from trendline.path.compiler import DEFAULT_RADIUS, build_path, validate_radius
from trendline.path.serialize import path_length, to_path_data
from trendline.path.types import Instruction

logger = logging.getLogger(__name__)

_CHART_ID_RE = re.compile(r"[A-Za-z0-9_-]+")

# viewBox used when no explicit size is given; the SVG then scales to its
# container at a 4:1 aspect ratio.
DEFAULT_VIEW_WIDTH = 300
DEFAULT_VIEW_HEIGHT = 75
DEFAULT_SVG_WIDTH = "100%"
DEFAULT_SVG_HEIGHT = "25%"


@dataclass(frozen=True)
class ChartOptions:
    width: float | None = None
    height: float | None = None
    padding: float = 8
    smooth: bool = False
    radius: float = DEFAULT_RADIUS
    stroke: str = "black"
    stroke_width: float = 1
    gradient: tuple[str, ...] = ()
    range_highlight: tuple[int, ...] = ()
    range_highlight_color: str = "transparent"
    auto_draw: bool = False
    auto_draw_duration: int = 2000  # milliseconds
    auto_draw_easing: str = "ease"
    hover_text_color: str = "#aaa"
    hover_text_size: int = 14
    hover_text_weight: str = "bold"
    hover_line_color: str = "red"
    hover_line_width: float = 2

    @property
    def view_width(self) -> float:
        return self.width or DEFAULT_VIEW_WIDTH

    @property
    def view_height(self) -> float:
        return self.height or DEFAULT_VIEW_HEIGHT

    @property
    def svg_width(self) -> str:
        return _num(self.width) if self.width else DEFAULT_SVG_WIDTH

    @property
    def svg_height(self) -> str:
        return _num(self.height) if self.height else DEFAULT_SVG_HEIGHT

    def domain(self) -> Domain:
        return Domain.padded(self.view_width, self.view_height, self.padding)


@dataclass(frozen=True, slots=True)
class HighlightBand:
    """Horizontal span (viewBox x coordinates) filled behind the line."""

    start: float
    end: float

    @property
    def width(self) -> float:
        return self.end - self.start


@dataclass(frozen=True, slots=True)
class GradientStop:
    offset: float
    color: str


@dataclass(frozen=True)
class Chart:
    """
    Everything a renderer needs to draw one trend line.

    Built fresh from the data on every call; holds no references back to
    the input.
    """

    values: tuple[float, ...]
    points: tuple[Point, ...]
    instructions: tuple[Instruction, ...]
    view_box: tuple[float, float, float, float]
    highlight: HighlightBand | None = None

    @property
    def path_data(self) -> str:
        return to_path_data(self.instructions)

    @property
    def length(self) -> float:
        return path_length(self.instructions)

    def to_dict(self) -> dict[str, Any]:
        return {
            "values": list(self.values),
            "points": [p.to_tuple() for p in self.points],
            "path": self.path_data,
            "length": self.length,
            "view_box": list(self.view_box),
            "highlight": None
            if self.highlight is None
            else {"start": self.highlight.start, "end": self.highlight.end},
        }


def build_chart(data: Iterable[Any], options: ChartOptions | None = None) -> Chart | None:
    """
    Normalize ``data`` into the options' viewBox and compile its path.

    Returns None when there are fewer than two values; a single point
    cannot be drawn as a line.
    """
    options = options or ChartOptions()
    radius = validate_radius(options.radius)

    values = coerce_values(data)
    if len(values) < 2:
        logger.debug("chart skipped: %d value(s)", len(values))
        return None

    points = normalize_dataset(values, options.domain())
    instructions = build_path(points, smooth=options.smooth, radius=radius)

    return Chart(
        values=values,
        points=points,
        instructions=instructions,
        view_box=(0, 0, options.view_width, options.view_height),
        highlight=highlight_band(points, options.range_highlight),
    )


def highlight_band(points: tuple[Point, ...], range_highlight: tuple[int, ...]) -> HighlightBand | None:
    """
    Band covering the points at ``range_highlight = (first, second)``.

    The band reaches half the point spacing past each end so the edge
    points sit inside it rather than on its border.
    """
    if len(range_highlight) != 2:
        return None

    first, second = range_highlight
    for index in (first, second):
        if not 0 <= index < len(points):
            raise ChartError(
                f"Range highlight index {index} is outside the data (0..{len(points) - 1}).",
                code="highlight_out_of_range",
                details={"range_highlight": list(range_highlight)},
            )
    if first > second:
        first, second = second, first

    gap = points[1].x - points[0].x
    return HighlightBand(start=points[first].x - gap / 2, end=points[second].x + gap / 2)


def gradient_stops(colors: Iterable[str]) -> tuple[GradientStop, ...]:
    """
    Stops for a top-to-bottom stroke gradient.

    Colors are listed bottom-first, so they are reversed. A single color
    still gets a valid offset of 0.
    """
    reversed_colors = list(colors)[::-1]
    last = len(reversed_colors) - 1
    return tuple(
        GradientStop(offset=normalize(i, 0, last), color=c)
        for i, c in enumerate(reversed_colors)
    )


def generate_id() -> str:
    """Short random id that keeps element ids unique when several charts share a document."""
    return uuid.uuid4().hex[:8]


def _num(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)


def validate_chart_id(chart_id: str) -> str:
    """Reject ids that cannot be used verbatim in element ids and CSS selectors."""
    if not isinstance(chart_id, str) or not _CHART_ID_RE.fullmatch(chart_id):
        raise ChartError(
            f"Chart id must contain only letters, digits, '_' and '-', got {chart_id!r}.",
            code="invalid_chart_id",
            details={"chart_id": chart_id},
        )
    return chart_id
