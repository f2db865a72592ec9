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

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Point:
    """
    A position in output (viewBox) coordinates.

    Unpacks like a tuple: ``x, y = point``.
    """

    x: float
    y: float

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True, slots=True)
class Domain:
    """
    Target output rectangle for dataset normalization.

    ``min_y`` may be numerically greater than ``max_y``: SVG coordinates grow
    downward, so charts usually map the lowest value to the bottom edge by
    passing an inverted y range.
    """

    min_x: float
    max_x: float
    min_y: float
    max_y: float

    @staticmethod
    def padded(width: float, height: float, padding: float) -> "Domain":
        """Domain for a ``width`` x ``height`` viewBox, inset by ``padding``, y inverted."""
        return Domain(
            min_x=padding,
            max_x=width - padding,
            min_y=height - padding,
            max_y=padding,
        )
