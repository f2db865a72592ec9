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
from collections.abc import Iterable, Mapping, Sequence
from numbers import Real
from typing import Any

from trendline.errors import DatasetError
from trendline.geometry.types import Domain, Point


def normalize(
    value: float,
    minimum: float,
    maximum: float,
    *,
    scale_min: float = 0.0,
    scale_max: float = 1.0,
) -> float:
    """
    Linearly rescale ``value`` from ``[minimum, maximum]`` into ``[scale_min, scale_max]``.

    A zero-width source range uses a denominator of 1, so flat data and
    single-element ranges land on ``scale_min`` instead of NaN.
    ``scale_min`` may be greater than ``scale_max``.
    """
    span = maximum - minimum
    if span == 0:
        span = 1
    return scale_min + (value - minimum) * (scale_max - scale_min) / span


def normalize_dataset(values: Sequence[float], domain: Domain) -> tuple[Point, ...]:
    """
    Map ``values`` to points inside ``domain``.

    x is spread evenly by index over ``[min_x, max_x]``; y is interpolated
    from ``[min(values), max(values)]`` into ``[min_y, max_y]``.
    """
    if not values:
        return ()

    lo = min(values)
    hi = max(values)
    last_index = len(values) - 1

    return tuple(
        Point(
            x=normalize(i, 0, last_index, scale_min=domain.min_x, scale_max=domain.max_x),
            y=normalize(v, lo, hi, scale_min=domain.min_y, scale_max=domain.max_y),
        )
        for i, v in enumerate(values)
    )


def coerce_values(data: Iterable[Any], *, field: str = "value") -> tuple[float, ...]:
    """
    Turn chart input into bare floats.

    Accepts numbers, mappings with a numeric ``field`` key, or objects with
    a numeric ``field`` attribute, e.g. ``[1, {"value": 2}, Sample(value=3)]``.
    """
    out: list[float] = []
    for index, item in enumerate(data):
        raw = item
        if isinstance(item, Mapping):
            if field not in item:
                raise DatasetError(
                    f"Data point {index} has no '{field}' field.",
                    code="missing_field",
                    details={"index": index, "field": field},
                )
            raw = item[field]
        elif not isinstance(item, Real) and hasattr(item, field):
            raw = getattr(item, field)

        out.append(_as_number(raw, index))
    return tuple(out)


def _as_number(raw: Any, index: int) -> float:
    if isinstance(raw, bool) or not isinstance(raw, Real):
        raise DatasetError(
            f"Data point {index} is not a number: {raw!r}",
            code="not_a_number",
            details={"index": index},
        )
    value = float(raw)
    if not math.isfinite(value):
        raise DatasetError(
            f"Data point {index} is not finite: {raw!r}",
            code="not_finite",
            details={"index": index},
        )
    return value
