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

import math

from trendline.geometry.types import Point

COLLINEAR_TOLERANCE = 1e-9


def distance_between(a: Point, b: Point) -> float:
    return math.hypot(b.x - a.x, b.y - a.y)


def are_collinear(a: Point, b: Point, c: Point, *, tolerance: float = COLLINEAR_TOLERANCE) -> bool:
    """
    True if the three points lie on one line.

    The cross product of (b - a) and (c - a) is compared against
    ``tolerance`` scaled by the lengths of both vectors, so the result does
    not depend on the magnitude of the coordinates.
    """
    abx, aby = b.x - a.x, b.y - a.y
    acx, acy = c.x - a.x, c.y - a.y
    cross = abx * acy - aby * acx
    scale = math.hypot(abx, aby) * math.hypot(acx, acy)
    if scale == 0.0:
        return True
    return abs(cross) <= tolerance * scale


def move_toward(from_point: Point, anchor: Point, distance: float) -> Point:
    """
    Point on the segment from ``anchor`` toward ``from_point``, ``distance`` away from ``anchor``.

    Callers keep ``distance`` within the segment length. Coincident points
    have no direction; ``anchor`` is returned unchanged.
    """
    length = distance_between(from_point, anchor)
    if length == 0.0:
        return anchor
    ratio = distance / length
    return Point(
        x=anchor.x + (from_point.x - anchor.x) * ratio,
        y=anchor.y + (from_point.y - anchor.y) * ratio,
    )
