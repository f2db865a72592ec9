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
import math
from collections.abc import Sequence

from trendline.errors import InvalidRadiusError
from trendline.geometry.primitives import are_collinear, distance_between, move_toward
from trendline.geometry.types import Point
from trendline.path.types import Corner, CornerKind, Instruction, LineTo, MoveTo

logger = logging.getLogger(__name__)

DEFAULT_RADIUS = 10.0


def build_linear_path(points: Sequence[Point]) -> tuple[Instruction, ...]:
    """
    Straight polyline through ``points``: one MoveTo, then a LineTo per point.

    Fewer than two points produce no path.
    """
    if len(points) < 2:
        logger.debug("not enough points for a path (%d)", len(points))
        return ()

    first, *rest = points
    return (MoveTo(first), *(LineTo(p) for p in rest))


def plan_corner(prev: Point, point: Point, next_point: Point | None, radius: float) -> Corner:
    """
    Decide how to draw the corner at ``point``.

    - TERMINAL: ``point`` is the last one, draw a plain line to it.
    - STRAIGHT: the path does not bend here, draw a plain line.
    - CLAMPED: ``radius`` would pass the midpoint of an adjacent segment,
      so half the shorter segment is used instead.
    - FULL: ``radius`` fits.
    """
    if next_point is None:
        return Corner(kind=CornerKind.TERMINAL, vertex=point)

    if are_collinear(prev, point, next_point):
        return Corner(kind=CornerKind.STRAIGHT, vertex=point)

    threshold = min(distance_between(prev, point), distance_between(next_point, point))

    if threshold / 2 < radius:
        kind = CornerKind.CLAMPED
        effective = threshold / 2
        logger.debug("radius %s clamped to %s at (%s, %s)", radius, effective, point.x, point.y)
    else:
        kind = CornerKind.FULL
        effective = radius

    return Corner(
        kind=kind,
        vertex=point,
        radius=effective,
        before=move_toward(prev, point, effective),
        after=move_toward(next_point, point, effective),
    )


def build_smooth_path(points: Sequence[Point], *, radius: float = DEFAULT_RADIUS) -> tuple[Instruction, ...]:
    """
    Polyline through ``points`` with every bend rounded by ``radius``.

    Each rounded corner becomes a LineTo to the point ``radius`` before the
    vertex followed by a SmoothTo around the vertex to the point ``radius``
    after it. The last point and straight runs are plain LineTos.
    """
    radius = validate_radius(radius)

    if len(points) < 2:
        logger.debug("not enough points for a path (%d)", len(points))
        return ()

    out: list[Instruction] = [MoveTo(points[0])]
    last_index = len(points) - 1

    for i in range(1, len(points)):
        next_point = points[i + 1] if i < last_index else None
        corner = plan_corner(points[i - 1], points[i], next_point, radius)
        out.extend(corner.instructions())

    return tuple(out)


def build_path(
    points: Sequence[Point],
    *,
    smooth: bool = False,
    radius: float = DEFAULT_RADIUS,
) -> tuple[Instruction, ...]:
    if smooth:
        return build_smooth_path(points, radius=radius)
    return build_linear_path(points)


def validate_radius(radius: float) -> float:
    """Return ``radius`` as a float, rejecting negative and NaN values."""
    value = float(radius)
    if math.isnan(value) or value < 0:
        raise InvalidRadiusError(
            f"Corner radius must be a non-negative number, got {radius!r}.",
            code="invalid_radius",
            details={"radius": radius},
        )
    return value
