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

from trendline.geometry.normalize import coerce_values, normalize, normalize_dataset
from trendline.geometry.primitives import are_collinear, distance_between, move_toward
from trendline.geometry.types import Domain, Point

__all__ = [
    "Domain",
    "Point",
    "are_collinear",
    "coerce_values",
    "distance_between",
    "move_toward",
    "normalize",
    "normalize_dataset",
]
